"""Git status utilities.

Contains:
- STATUS_CODES: Status letter to FileStatus table
- StatusEntry: One staged path with its status code and rename source
- parse_status_code: Map a status code to a FileStatus
- parse_name_status: Parse NUL-separated `git diff --name-status -z` output
- get_file_status_code: Get the two-letter porcelain code for one path
- _get_staged_entries: Get staged changes with rename detection
"""

from pathlib import Path
from typing import NamedTuple, Optional

from commitwise.git.runner import _run_git_command
from commitwise.models import FileStatus

STATUS_CODES = {
    "A": FileStatus.ADDED,
    "M": FileStatus.MODIFIED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
    "C": FileStatus.COPIED,
    "U": FileStatus.UPDATED,
    "?": FileStatus.ADDED,
}


class StatusEntry(NamedTuple):
    """A staged path as reported by `git diff --name-status`.

    Attributes:
        path: Path relative to the repository root (the new path for
            renames and copies).
        code: Status code, e.g. "M", "A" or "R100".
        old_path: Source path of a rename or copy, otherwise None.
    """

    path: str
    code: str
    old_path: Optional[str] = None


def parse_status_code(code: str) -> FileStatus:
    """Map a status code to a FileStatus.

    Accepts porcelain codes ("A ", " M", "??") and name-status codes
    ("M", "R100"). The first non-blank letter decides. Unrecognized codes
    map to MODIFIED.

    Args:
        code: The status code.

    Returns:
        The matching FileStatus.
    """
    for letter in code[:2]:
        if letter != " ":
            return STATUS_CODES.get(letter, FileStatus.MODIFIED)
    return FileStatus.MODIFIED


def parse_name_status(output: str) -> list[StatusEntry]:
    """Parse `git diff --name-status -z` output.

    Each record is a status token followed by one path, or by the source
    and destination paths for renames and copies. Paths are raw bytes from
    git (no C-style quoting) because of -z.

    Args:
        output: NUL-separated git output.

    Returns:
        The entries in git's order.
    """
    tokens = [token for token in output.split("\0") if token]
    entries = []
    i = 0
    while i < len(tokens):
        code = tokens[i]
        if code[0] in ("R", "C"):
            entries.append(StatusEntry(tokens[i + 2], code, tokens[i + 1]))
            i += 3
        else:
            entries.append(StatusEntry(tokens[i + 1], code))
            i += 2
    return entries


def get_file_status_code(path: str, cwd: Optional[Path] = None) -> str:
    """Get the porcelain status code for a single path.

    Args:
        path: File path relative to the repository root.
        cwd: Repository directory.

    Returns:
        The two-character code, or an empty string if git reports nothing.
    """
    # The leading space of " M" is significant
    output = _run_git_command(
        ["status", "--porcelain=v1", "-z", "--", path], cwd=cwd, strip=False
    )
    if not output.strip("\0").strip():
        return ""
    return output[:2]


def _get_staged_entries(cwd: Optional[Path] = None) -> list[StatusEntry]:
    """Get staged changes, pairing renames and copies with their source."""
    output = _run_git_command(
        ["diff", "--staged", "--name-status", "-M", "-z"], cwd=cwd, strip=False
    )
    return parse_name_status(output)

