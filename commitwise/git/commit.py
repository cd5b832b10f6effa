"""Git write operations used after a suggestion is chosen.

Contains:
- stage_all: Stage every change in the working tree
- commit: Create a commit with the given message
"""

from pathlib import Path
from typing import Optional

from commitwise.formatters import validate_commit_message
from commitwise.git.runner import _run_git_command


def stage_all(cwd: Optional[Path] = None) -> None:
    """Stage all changes (including new and deleted files)."""
    _run_git_command(["add", "-A"], cwd=cwd)


def commit(message: str, cwd: Optional[Path] = None) -> str:
    """Create a commit with the given message.

    Args:
        message: The commit message.
        cwd: Repository directory.

    Returns:
        git's summary output.

    Raises:
        ValidationError: If the message is empty.
        IdentityNotConfiguredError: If git has no user identity.
        GitError: If the commit fails.
    """
    message = validate_commit_message(message)
    return _run_git_command(["commit", "-m", message], cwd=cwd)
