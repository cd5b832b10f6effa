"""Parsing of provider responses into commit suggestions.

Responses are read by an ordered list of strategies. Each strategy returns
a list of (message, explanation) entries, or None when it cannot read the
text; the first strategy with a result wins:

1. parse_strict: The whole text is the JSON object
2. parse_fenced: JSON inside a markdown code block, or with fences removed
3. parse_salvaged: The "suggestions" array literal found by pattern
4. parse_heuristic: Lines that look like conventional commit headers
"""

import json
import logging
import re
from typing import Callable, Optional

from commitwise.config import MAX_SUGGESTIONS
from commitwise.formatters import CONVENTIONAL_TYPES
from commitwise.llm.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

SuggestionEntry = tuple[str, Optional[str]]
ParseStrategy = Callable[[str], Optional[list[SuggestionEntry]]]

FENCED_BLOCK_PATTERN = re.compile(r"```[\w-]*[ \t]*\n?(.*?)```", re.DOTALL)
FENCE_MARKER_PATTERN = re.compile(r"```[\w-]*")
SUGGESTIONS_KEY_PATTERN = re.compile(r'"suggestions"\s*:\s*(?=\[)')
HEADER_LINE_PATTERN = re.compile(
    r"^(?:" + "|".join(CONVENTIONAL_TYPES) + r")(?:\([^()]*\))?!?:"
)
# Leading "message": key, list bullets or numbering in front of a header
LINE_PREFIX_PATTERN = re.compile(r'^(?:[-*]\s+|\d+[.)]\s+)?(?:"?message"?\s*:\s*)?')


def _entries_from_items(items) -> Optional[list[SuggestionEntry]]:
    if not isinstance(items, list):
        return None

    entries = []
    for item in items:
        if isinstance(item, str):
            message, explanation = item, None
        elif isinstance(item, dict) and isinstance(item.get("message"), str):
            message = item["message"]
            explanation = item.get("explanation")
            if not isinstance(explanation, str) or not explanation.strip():
                explanation = None
        else:
            continue

        message = message.strip()
        if message:
            entries.append((message, explanation.strip() if explanation else None))

    return entries or None


def _entries_from_json_text(text: str) -> Optional[list[SuggestionEntry]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    return _entries_from_items(data.get("suggestions"))


def parse_strict(raw: str) -> Optional[list[SuggestionEntry]]:
    """Read the text as one JSON object with a "suggestions" array."""
    return _entries_from_json_text(raw.strip())


def parse_fenced(raw: str) -> Optional[list[SuggestionEntry]]:
    """Read JSON from inside a fenced code block.

    Each fenced block is tried in turn; if none parses, all fence markers
    are removed from the whole text and it is read again.
    """
    if "```" not in raw:
        return None

    for block in FENCED_BLOCK_PATTERN.findall(raw):
        entries = _entries_from_json_text(block.strip())
        if entries:
            return entries

    return _entries_from_json_text(FENCE_MARKER_PATTERN.sub("", raw).strip())


def parse_salvaged(raw: str) -> Optional[list[SuggestionEntry]]:
    """Read the array literal that follows a "suggestions" key."""
    decoder = json.JSONDecoder()
    for match in SUGGESTIONS_KEY_PATTERN.finditer(raw):
        try:
            items, _ = decoder.raw_decode(raw, match.end())
        except json.JSONDecodeError:
            continue
        entries = _entries_from_items(items)
        if entries:
            return entries
    return None


def _clean_line(line: str) -> str:
    line = LINE_PREFIX_PATTERN.sub("", line.strip(), count=1)
    line = line.rstrip(",").strip()
    if len(line) >= 2 and line[0] == line[-1] and line[0] in "\"'`":
        line = line[1:-1]
    return line.strip()


def parse_heuristic(raw: str) -> Optional[list[SuggestionEntry]]:
    """Collect lines that start with a conventional commit type."""
    entries = []
    for line in raw.splitlines():
        candidate = _clean_line(line)
        if ":" in candidate and HEADER_LINE_PATTERN.match(candidate):
            entries.append((candidate, None))
    return entries or None


PARSE_STRATEGIES: list[ParseStrategy] = [
    parse_strict,
    parse_fenced,
    parse_salvaged,
    parse_heuristic,
]


def parse_suggestion_entries(
    raw_response: str, limit: Optional[int] = MAX_SUGGESTIONS
) -> list[SuggestionEntry]:
    """Parse a provider response into suggestion entries.

    Args:
        raw_response: The raw text from the provider.
        limit: Maximum number of entries to return; None keeps them all.

    Returns:
        Non-empty list of (message, explanation), in provider order.

    Raises:
        ResponseParseError: If no strategy finds a suggestion.
    """
    for strategy in PARSE_STRATEGIES:
        entries = strategy(raw_response)
        if entries:
            logger.debug("Parsed %d suggestions with %s", len(entries), strategy.__name__)
            return entries[:limit]
        logger.debug("%s found no suggestions", strategy.__name__)

    raise ResponseParseError(
        "Could not parse suggestions from LLM response.\n"
        f"Raw response:\n{raw_response}"
    )


def parse_suggestions(raw_response: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Parse a provider response into suggestion messages.

    Raises:
        ResponseParseError: If no strategy finds a suggestion.
    """
    return [message for message, _ in parse_suggestion_entries(raw_response, limit)]
