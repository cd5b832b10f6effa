"""Version-control collaborator consumed by the suggestion engine.

Contains:
- VersionControl: Protocol for the read operations the engine needs
- GitRepository: git implementation bound to one working directory
"""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from commitwise.git.branch import get_branch, get_last_commits
from commitwise.git.commit import stage_all
from commitwise.git.diff import get_file_diff
from commitwise.git.runner import get_repo_root, has_identity_configured
from commitwise.git.status import (
    StatusEntry,
    _get_staged_entries,
    get_file_status_code,
)


@runtime_checkable
class VersionControl(Protocol):
    """Protocol for version-control read operations."""

    def list_changed_files(self) -> list[str]:
        """List changed file paths in a stable order."""
        ...

    def get_diff(self, path: str) -> str:
        """Get the textual diff of one file."""
        ...

    def get_file_status_code(self, path: str) -> str:
        """Get the short status code of one file."""
        ...

    def get_current_branch_name(self) -> str:
        """Get the current branch name."""
        ...

    def get_recent_commit_subjects(self, n: int) -> list[str]:
        """Get the subjects of the last n commits."""
        ...

    def has_identity_configured(self) -> bool:
        """Check whether a commit identity is configured."""
        ...


class GitRepository:
    """git-backed VersionControl for one working tree.

    Changes are always read from the index. With staged_only=False every
    change in the working tree (untracked files included) is staged first,
    so the suggestions describe exactly what the commit will contain.

    Args:
        path: Any directory inside the working tree. Defaults to cwd.
        staged_only: Describe only staged changes (default) or stage and
            describe every change.

    Raises:
        NotARepositoryError: If path is not inside a git repository.
    """

    def __init__(self, path: Optional[Path] = None, staged_only: bool = True):
        self.root = get_repo_root(cwd=path)
        self.staged_only = staged_only
        self._entries: dict[str, StatusEntry] = {}

    def list_changed_files(self) -> list[str]:
        if not self.staged_only:
            stage_all(cwd=self.root)
        entries = _get_staged_entries(cwd=self.root)
        self._entries = {entry.path: entry for entry in entries}
        return [entry.path for entry in entries]

    def get_diff(self, path: str) -> str:
        entry = self._entries.get(path)
        old_path = entry.old_path if entry else None
        return get_file_diff(path, old_path=old_path, cwd=self.root)

    def get_file_status_code(self, path: str) -> str:
        entry = self._entries.get(path)
        if entry:
            return entry.code
        return get_file_status_code(path, cwd=self.root)

    def get_current_branch_name(self) -> str:
        return get_branch(cwd=self.root)

    def get_recent_commit_subjects(self, n: int) -> list[str]:
        return get_last_commits(n, cwd=self.root)

    def has_identity_configured(self) -> bool:
        return has_identity_configured(cwd=self.root)
