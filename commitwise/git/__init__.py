"""Version-control collaborator for commitwise.

This package provides git access with:
- exceptions: GitError, NotARepositoryError, IdentityNotConfiguredError,
              NoChangesFoundError
- runner: _run_git_command, get_repo_root, has_identity_configured
- branch: get_branch, get_last_commits
- status: StatusEntry, parse_status_code, parse_name_status,
          get_file_status_code, _get_staged_entries
- diff: get_file_diff
- commit: stage_all, commit
- repository: VersionControl, GitRepository
"""

# Exceptions
from commitwise.git.exceptions import (
    GitError,
    IdentityNotConfiguredError,
    NoChangesFoundError,
    NotARepositoryError,
)

# Runner utilities
from commitwise.git.runner import (
    _run_git_command,
    get_repo_root,
    has_identity_configured,
)

# Branch utilities
from commitwise.git.branch import (
    get_branch,
    get_last_commits,
)

# Status utilities
from commitwise.git.status import (
    STATUS_CODES,
    StatusEntry,
    parse_status_code,
    parse_name_status,
    get_file_status_code,
    _get_staged_entries,
)

# Diff utilities
from commitwise.git.diff import get_file_diff

# Write operations
from commitwise.git.commit import (
    stage_all,
    commit,
)

# Collaborator object
from commitwise.git.repository import (
    VersionControl,
    GitRepository,
)


__all__ = [
    # Exceptions
    "GitError",
    "IdentityNotConfiguredError",
    "NoChangesFoundError",
    "NotARepositoryError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    "has_identity_configured",
    # Branch
    "get_branch",
    "get_last_commits",
    # Status
    "STATUS_CODES",
    "StatusEntry",
    "parse_status_code",
    "parse_name_status",
    "get_file_status_code",
    "_get_staged_entries",
    # Diff
    "get_file_diff",
    # Commit
    "stage_all",
    "commit",
    # Repository
    "VersionControl",
    "GitRepository",
]
