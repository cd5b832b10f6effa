"""Per-file diff collection with size bounds.

Contains:
- count_changes: Count added and removed lines in a diff
- truncate_diff: Cap one diff's length with an explicit marker
- summarize_diff: Reduce a diff to a head/tail excerpt
- collect_changes: Build one FileChange per changed path
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from commitwise import config as _config
from commitwise.config import DiffLimits
from commitwise.git.exceptions import NO_STAGED_CHANGES_MESSAGE, NoChangesFoundError
from commitwise.git.repository import VersionControl
from commitwise.git.status import parse_status_code
from commitwise.models import FileChange

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "\n...[truncated]"

MAX_WORKERS = 8


def count_changes(diff: str) -> tuple[int, int]:
    """Count added and removed lines in a unified diff.

    Lines starting with "+++" or "---" are file headers and not counted.

    Args:
        diff: The diff text.

    Returns:
        (additions, deletions)
    """
    additions = 0
    deletions = 0
    for line in diff.split("\n"):
        if line.startswith("+") and not line.startswith("+++"):
            additions += 1
        elif line.startswith("-") and not line.startswith("---"):
            deletions += 1
    return additions, deletions


def truncate_diff(diff: str, max_chars: int) -> str:
    """Cap a diff at max_chars, appending TRUNCATION_MARKER when cut."""
    if len(diff) <= max_chars:
        return diff
    return diff[:max_chars] + TRUNCATION_MARKER


def summarize_diff(diff: str, head_lines: int, tail_lines: int) -> str:
    """Reduce a diff to its first and last lines.

    Args:
        diff: The diff text.
        head_lines: Lines to keep from the start.
        tail_lines: Lines to keep from the end.

    Returns:
        The diff unchanged if it is short enough, otherwise the excerpt with
        a count of the skipped middle lines.
    """
    lines = diff.split("\n")
    if len(lines) <= head_lines + tail_lines:
        return diff

    skipped = len(lines) - head_lines - tail_lines
    tail = lines[len(lines) - tail_lines:] if tail_lines else []
    return "\n".join(
        lines[:head_lines]
        + ["...", f"[{skipped} lines skipped]", "..."]
        + tail
    )


def collect_changes(
    vcs: VersionControl,
    paths: list[str],
    limits: Optional[DiffLimits] = None,
    empty_message: str = NO_STAGED_CHANGES_MESSAGE,
) -> list[FileChange]:
    """Build one FileChange per path, in the order of paths.

    Diffs and status codes are fetched concurrently; results are reassembled
    by input index. Additions and deletions are counted on the full diff
    before any size bound is applied.

    Args:
        vcs: The version-control collaborator.
        paths: Changed file paths.
        limits: Size bounds. Defaults to the configured limits.
        empty_message: Message for NoChangesFoundError.

    Returns:
        The file changes.

    Raises:
        NoChangesFoundError: If paths is empty.
        GitError: If the collaborator fails for any path.
    """
    if not paths:
        raise NoChangesFoundError(empty_message)

    limits = limits or _config.DIFF_LIMITS

    def fetch(path: str) -> tuple[str, str]:
        return vcs.get_diff(path), vcs.get_file_status_code(path)

    workers = max(1, min(len(paths), MAX_WORKERS, os.cpu_count() or 4))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        fetched = list(executor.map(fetch, paths))

    total_chars = sum(len(diff) for diff, _ in fetched)
    excerpt = total_chars > limits.max_total_chars
    if excerpt:
        logger.info(
            "Total diff size %d exceeds %d; using head/tail excerpts",
            total_chars,
            limits.max_total_chars,
        )

    changes = []
    for path, (diff, code) in zip(paths, fetched):
        additions, deletions = count_changes(diff)
        bounded = diff
        if excerpt:
            bounded = summarize_diff(
                bounded, limits.summary_head_lines, limits.summary_tail_lines
            )
        bounded = truncate_diff(bounded, limits.max_file_chars)
        changes.append(
            FileChange(
                filename=path,
                diff=bounded,
                additions=additions,
                deletions=deletions,
                status=parse_status_code(code),
            )
        )
    return changes
