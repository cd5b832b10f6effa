"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- has_identity_configured: Check that user.name and user.email are set
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitwise.git.exceptions import (
    IDENTITY_NOT_CONFIGURED_MESSAGE,
    NOT_A_REPOSITORY_MESSAGE,
    GitError,
    IdentityNotConfiguredError,
    NotARepositoryError,
)


def _classify_git_failure(args: list[str], stderr: str) -> GitError:
    """Map git's stderr onto the matching GitError subclass."""
    lowered = stderr.lower()
    if "not a git repository" in lowered:
        return NotARepositoryError(NOT_A_REPOSITORY_MESSAGE)
    if "please tell me who you are" in lowered:
        return IdentityNotConfiguredError(IDENTITY_NOT_CONFIGURED_MESSAGE)
    return GitError(f"Git command failed: git {' '.join(args)}\n{stderr.strip()}")


def _run_git_command(
    args: list[str],
    cwd: Optional[Path] = None,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in. Defaults to the process cwd.
        strip: Strip surrounding whitespace. When False only trailing
            newlines are removed.

    Returns:
        The stdout of the git command.

    Raises:
        NotARepositoryError: If git reports it is not inside a repository.
        IdentityNotConfiguredError: If git reports a missing user identity.
        GitError: If the command fails for any other reason.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            cwd=cwd,
        )
        if strip:
            return result.stdout.strip()
        return result.stdout.rstrip("\n")
    except subprocess.CalledProcessError as e:
        raise _classify_git_failure(args, e.stderr or "") from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        NotARepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
    except NotARepositoryError:
        raise
    except GitError as e:
        raise NotARepositoryError(NOT_A_REPOSITORY_MESSAGE) from e
    return Path(root)


def has_identity_configured(cwd: Optional[Path] = None) -> bool:
    """Check whether git has both user.name and user.email configured.

    Returns:
        True if both values are set and non-empty.
    """
    for key in ("user.name", "user.email"):
        try:
            value = _run_git_command(["config", key], cwd=cwd)
        except NotARepositoryError:
            raise
        except GitError:
            # git config exits 1 when the key is unset
            return False
        if not value:
            return False
    return True
