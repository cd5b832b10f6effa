"""Change summarization: aggregate stats and scope labels."""

from typing import Iterable

from commitwise.models import ChangeSet, ChangeStats, FileChange
from commitwise.scope import unique_scopes


def compute_stats(changes: Iterable[FileChange]) -> ChangeStats:
    """Sum file count, additions and deletions over changes."""
    files = additions = deletions = 0
    for change in changes:
        files += 1
        additions += change.additions
        deletions += change.deletions
    return ChangeStats(files=files, additions=additions, deletions=deletions)


def summarize_changes(changes: Iterable[FileChange]) -> ChangeSet:
    """Build a ChangeSet from file changes.

    Args:
        changes: File changes in collection order.

    Returns:
        A ChangeSet whose stats are the exact sums over the changes and
        whose scopes are deduplicated in first-seen order. Empty input
        gives zeroed stats.
    """
    changes = tuple(changes)
    return ChangeSet(
        changes=changes,
        stats=compute_stats(changes),
        scopes=tuple(unique_scopes([c.filename for c in changes])),
    )
