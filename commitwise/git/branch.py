"""Git branch and commit utilities.

Contains:
- get_branch: Get the current branch name
- get_last_commits: Get the last n commit subjects
"""

from pathlib import Path
from typing import Optional

from commitwise.git.runner import _run_git_command
from commitwise.git.exceptions import GitError


def get_branch(cwd: Optional[Path] = None) -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' if in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"], cwd=cwd)
    if not branch:
        # Detached HEAD state
        return "HEAD (detached)"
    return branch


def get_last_commits(n: int = 3, cwd: Optional[Path] = None) -> list[str]:
    """Get the last n commit subjects.

    Args:
        n: Number of commits to retrieve.
        cwd: Repository directory.

    Returns:
        List of commit subject lines, newest first.
    """
    try:
        output = _run_git_command(["log", f"-n{n}", "--pretty=%s"], cwd=cwd)
        if not output:
            return []
        return output.split("\n")
    except GitError:
        # No commits yet in the repo
        return []
