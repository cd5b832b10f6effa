"""Git diff utilities.

Contains:
- get_file_diff: Get the staged diff text for a single file
"""

from pathlib import Path
from typing import Optional

from commitwise.git.runner import _run_git_command


def get_file_diff(
    path: str,
    old_path: Optional[str] = None,
    cwd: Optional[Path] = None,
) -> str:
    """Get the staged diff for a single file.

    Args:
        path: File path relative to the repository root.
        old_path: Source path of a rename or copy. Both paths go into the
            pathspec so git can pair them.
        cwd: Repository directory.

    Returns:
        The unified diff text (empty if git reports no textual change).
    """
    args = ["diff", "--staged", "-M", "--"]
    if old_path:
        args.append(old_path)
    args.append(path)
    return _run_git_command(args, cwd=cwd)
