"""Data models shared across the suggestion pipeline.

Contains:
- FileStatus: Change kind of a single file
- FileChange: One changed file with its bounded diff and line counts
- ChangeStats: Aggregate counts over a set of file changes
- ChangeSet: Ordered file changes plus derived stats and scopes
- SuggestionSource: Where a suggestion came from
- CommitSuggestion: A single candidate commit message
- SuggestionResult: What the engine hands back to the CLI
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FileStatus(str, Enum):
    """Change kind of a file in the working tree."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"
    UPDATED = "updated"


class SuggestionSource(str, Enum):
    """Origin of a commit suggestion."""

    AI = "ai"
    RULE = "rule"
    ERROR = "error"


class FileChange(BaseModel):
    """A single changed file.

    Attributes:
        filename: Path of the file relative to the repository root.
        diff: The (possibly truncated or excerpted) diff text.
        additions: Number of added lines in the full diff.
        deletions: Number of removed lines in the full diff.
        status: The kind of change.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    diff: str = ""
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    status: FileStatus = FileStatus.MODIFIED


class ChangeStats(BaseModel):
    """Aggregate statistics over a set of file changes."""

    model_config = ConfigDict(frozen=True)

    files: int = Field(default=0, ge=0)
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)


class ChangeSet(BaseModel):
    """Ordered file changes with their aggregate stats and inferred scopes.

    Build instances with commitwise.summary.summarize_changes(); the stats
    must always equal the sums over ``changes``.
    """

    model_config = ConfigDict(frozen=True)

    changes: tuple[FileChange, ...] = ()
    stats: ChangeStats = ChangeStats()
    scopes: tuple[str, ...] = ()

    @model_validator(mode="after")
    def stats_match_changes(self) -> "ChangeSet":
        """Reject stats that disagree with the change list."""
        expected = (
            len(self.changes),
            sum(c.additions for c in self.changes),
            sum(c.deletions for c in self.changes),
        )
        actual = (self.stats.files, self.stats.additions, self.stats.deletions)
        if expected != actual:
            raise ValueError(f"stats {actual} do not match changes {expected}")
        return self


class CommitSuggestion(BaseModel):
    """A candidate commit message.

    Attributes:
        message: Single-line conventional commit header.
        explanation: Optional short reason the message fits.
        type: Conventional commit type, when known.
        scope: Conventional commit scope, when known.
        source: Where the suggestion came from.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    explanation: Optional[str] = None
    type: Optional[str] = None
    scope: Optional[str] = None
    source: SuggestionSource

    @field_validator("message")
    @classmethod
    def message_must_be_single_line(cls, v: str) -> str:
        """Ensure the message is a non-empty single line."""
        v = v.strip()
        if not v:
            raise ValueError("Suggestion message cannot be empty")
        if "\n" in v:
            raise ValueError("Suggestion message must be a single line")
        return v


class SuggestionResult(BaseModel):
    """Suggestions for the current changes, best first.

    Attributes:
        suggestions: Non-empty ordered list; index 0 is the best guess.
        stats: Aggregate stats of the change set the suggestions describe.
        provider: Provider that produced AI suggestions, if any.
        model: Model that produced AI suggestions, if any.
    """

    suggestions: list[CommitSuggestion]
    stats: ChangeStats
    provider: Optional[str] = None
    model: Optional[str] = None

    @field_validator("suggestions")
    @classmethod
    def suggestions_must_not_be_empty(cls, v: list[CommitSuggestion]) -> list[CommitSuggestion]:
        """Ensure at least one suggestion is returned."""
        if not v:
            raise ValueError("suggestions cannot be empty")
        return v
