"""Rule-based commit suggestions.

RuleBasedAnalyzer derives one conventional commit header per changed file
from its path, extension and line counts. It performs no I/O and cannot
fail, so the engine can always fall back to it.
"""

from typing import Iterable, Optional

from commitwise.models import CommitSuggestion, FileChange, SuggestionSource
from commitwise.scope import SOURCE_ROOTS, get_extension, normalize_path

DEFAULT_TEMPLATES = {
    "feat": "feat({scope}): add {component} functionality",
    "fix": "fix({scope}): resolve issue with {component}",
    "docs": "docs({scope}): update documentation for {component}",
    "style": "style({scope}): improve formatting of {component}",
    "refactor": "refactor({scope}): restructure {component}",
    "test": "test({scope}): add tests for {component}",
    "perf": "perf({scope}): improve performance of {component}",
}

FALLBACK_TEMPLATE = "{type}({scope}): update {component}"

STYLESHEET_EXTENSIONS = {"css", "scss", "sass", "less"}

GENERAL_SCOPE = "general"


def determine_type(change: FileChange) -> str:
    """Classify a file change into a conventional commit type.

    Rules are checked in order; the first match wins.
    """
    path = change.filename.lower()
    if "test" in path:
        return "test"
    if "docs" in path:
        return "docs"
    if get_extension(path) in STYLESHEET_EXTENSIONS or "style" in change.diff:
        return "style"
    if change.additions > change.deletions * 2:
        return "feat"
    if change.deletions > change.additions * 2:
        return "refactor"
    return "fix"


def determine_scope(filename: str) -> str:
    """Get the scope from the leading directory of a path.

    A leading source root (src, lib, packages) is skipped when another
    directory follows it, so "src/auth/login.ts" gives "auth".
    """
    directories = normalize_path(filename).split("/")[:-1]
    if not directories:
        return GENERAL_SCOPE
    if len(directories) > 1 and directories[0].lower() in SOURCE_ROOTS:
        return directories[1]
    return directories[0]


def determine_component(filename: str) -> str:
    """Get the file name up to its first dot."""
    name = normalize_path(filename).split("/")[-1]
    return name.split(".")[0] or name


class RuleBasedAnalyzer:
    """Deterministic commit suggestions from file metadata."""

    def __init__(self, custom_templates: Optional[dict[str, str]] = None):
        """Initialize the analyzer.

        Args:
            custom_templates: Templates keyed by type, merged over the
                defaults. Placeholders: {type}, {scope}, {component}.
        """
        self.templates = {**DEFAULT_TEMPLATES, **(custom_templates or {})}

    def render(self, commit_type: str, scope: str, component: str) -> str:
        """Fill the template for commit_type."""
        template = self.templates.get(commit_type, FALLBACK_TEMPLATE)
        return (
            template.replace("{type}", commit_type)
            .replace("{scope}", scope)
            .replace("{component}", component)
        )

    def analyze(self, change: FileChange) -> CommitSuggestion:
        """Produce exactly one suggestion for a file change."""
        commit_type = determine_type(change)
        scope = determine_scope(change.filename)
        component = determine_component(change.filename)

        return CommitSuggestion(
            message=self.render(commit_type, scope, component),
            explanation=(
                f"{change.status.value.capitalize()} {change.filename} "
                f"(+{change.additions}/-{change.deletions})"
            ),
            type=commit_type,
            scope=scope,
            source=SuggestionSource.RULE,
        )

    def analyze_batch(self, changes: Iterable[FileChange]) -> list[CommitSuggestion]:
        """Produce one suggestion per file change, in order."""
        return [self.analyze(change) for change in changes]
