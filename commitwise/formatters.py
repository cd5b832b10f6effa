"""Commit message formatting and validation."""

import re
from typing import Optional

from commitwise.config import MAX_SUBJECT_LENGTH

# Commit types the prompt asks for and the parser accepts
CONVENTIONAL_TYPES = [
    "feat",
    "fix",
    "refactor",
    "style",
    "docs",
    "test",
    "chore",
    "perf",
]

HEADER_PATTERN = re.compile(
    r"^(?P<type>" + "|".join(CONVENTIONAL_TYPES) + r")"
    r"(?:\((?P<scope>[^()\s]+)\))?!?:\s*\S"
)


class ValidationError(Exception):
    """Raised when a user-supplied commit message is not usable."""

    pass


def sanitize_subject(subject: str, max_length: int = MAX_SUBJECT_LENGTH) -> str:
    """Sanitize a commit subject to a single line within max_length.

    Args:
        subject: The raw subject string.
        max_length: Maximum allowed length.

    Returns:
        A single-line subject without a trailing period, cut at a word
        boundary (with "...") if it was too long.
    """
    # Take only the first line and collapse internal whitespace
    subject = subject.strip().split("\n")[0]
    subject = re.sub(r"\s+", " ", subject).strip()
    subject = subject.rstrip(".").rstrip()

    if len(subject) <= max_length:
        return subject

    limit = max_length - 3
    cutoff = subject.rfind(" ", 0, limit + 1)
    if cutoff < limit * 0.6:
        cutoff = limit
    return subject[:cutoff].rstrip() + "..."


def parse_conventional_header(message: str) -> tuple[Optional[str], Optional[str]]:
    """Extract type and scope from a conventional commit header.

    Args:
        message: The commit header, e.g. "feat(auth): add login".

    Returns:
        (type, scope); either may be None when absent or unrecognised.
    """
    match = HEADER_PATTERN.match(message.strip())
    if not match:
        return None, None
    return match.group("type"), match.group("scope")


def validate_commit_message(message: Optional[str]) -> str:
    """Validate a commit message typed by the user.

    Args:
        message: The custom message.

    Returns:
        The message with surrounding whitespace removed.

    Raises:
        ValidationError: If the message is empty.
    """
    if message is None or not message.strip():
        raise ValidationError("Commit message cannot be empty.")
    return message.strip()
