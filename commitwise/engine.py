"""Suggestion orchestration.

SuggestionEngine runs one request end to end:

    collect changes -> summarize -> select credential -> build prompt
    -> call provider (with model fallback) -> parse -> post-process

Repository, identity and empty-change failures propagate to the caller.
Any failure on the AI path falls back to RuleBasedAnalyzer.
"""

import logging
from typing import Optional

from commitwise.analyzer import RuleBasedAnalyzer
from commitwise.collector import collect_changes
from commitwise.config import (
    MAX_SUBJECT_LENGTH,
    MAX_SUGGESTIONS,
    DiffLimits,
    get_model_candidates,
)
from commitwise.formatters import parse_conventional_header, sanitize_subject
from commitwise.git.exceptions import (
    IDENTITY_NOT_CONFIGURED_MESSAGE,
    NO_CHANGES_MESSAGE,
    NO_STAGED_CHANGES_MESSAGE,
    IdentityNotConfiguredError,
)
from commitwise.git.repository import VersionControl
from commitwise.llm import ModelFallbackController, get_provider, select_credential
from commitwise.llm.exceptions import (
    LLMError,
    NoCredentialConfiguredError,
    ResponseParseError,
)
from commitwise.llm.parsing import parse_suggestion_entries
from commitwise.llm.prompts import build_prompt, gather_repository_context
from commitwise.models import (
    ChangeSet,
    CommitSuggestion,
    SuggestionResult,
    SuggestionSource,
)
from commitwise.summary import summarize_changes

logger = logging.getLogger(__name__)


def dedupe_suggestions(suggestions: list[CommitSuggestion]) -> list[CommitSuggestion]:
    """Drop suggestions whose message repeats an earlier one."""
    seen = set()
    unique = []
    for suggestion in suggestions:
        key = suggestion.message.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(suggestion)
    return unique


class SuggestionEngine:
    """Generates ranked commit suggestions for the current changes."""

    def __init__(
        self,
        vcs: VersionControl,
        analyzer: Optional[RuleBasedAnalyzer] = None,
        limits: Optional[DiffLimits] = None,
        rules_fallback: bool = True,
        max_suggestions: int = MAX_SUGGESTIONS,
        max_subject_length: int = MAX_SUBJECT_LENGTH,
    ):
        """Initialize the engine.

        Args:
            vcs: The version-control collaborator.
            analyzer: Rule-based fallback. Defaults to built-in templates.
            limits: Diff size bounds. Defaults to the configured limits.
            rules_fallback: Answer with rule-based suggestions when the AI
                path fails. When False, LLM errors (including a missing
                credential) propagate.
            max_suggestions: Number of AI suggestions to request and keep.
            max_subject_length: Subject budget for every suggestion.
        """
        self.vcs = vcs
        self.analyzer = analyzer or RuleBasedAnalyzer()
        self.limits = limits
        self.rules_fallback = rules_fallback
        self.max_suggestions = max_suggestions
        self.max_subject_length = max_subject_length

    def collect(self) -> ChangeSet:
        """Check the repository and summarize its changes.

        Raises:
            IdentityNotConfiguredError: If git has no user identity.
            NoChangesFoundError: If there is nothing to describe.
            GitError: For other git failures.
        """
        if not self.vcs.has_identity_configured():
            raise IdentityNotConfiguredError(IDENTITY_NOT_CONFIGURED_MESSAGE)

        staged_only = getattr(self.vcs, "staged_only", True)
        empty_message = NO_STAGED_CHANGES_MESSAGE if staged_only else NO_CHANGES_MESSAGE

        paths = self.vcs.list_changed_files()
        changes = collect_changes(self.vcs, paths, self.limits, empty_message)
        return summarize_changes(changes)

    def generate_suggestions(self) -> SuggestionResult:
        """Generate suggestions for the current changes.

        Returns:
            A non-empty SuggestionResult. Suggestions are tagged "ai" when
            the provider answered, "rule" when the engine fell back.

        Raises:
            NotARepositoryError, IdentityNotConfiguredError,
            NoChangesFoundError: From change collection.
            LLMError: Only when rules_fallback is False.
        """
        change_set = self.collect()

        try:
            return self._suggest_with_ai(change_set)
        except NoCredentialConfiguredError as e:
            if not self.rules_fallback:
                raise
            logger.info("No LLM credential configured; using rule-based suggestions")
            logger.debug("%s", e)
        except LLMError as e:
            if not self.rules_fallback:
                raise
            logger.warning("AI suggestions failed, using rule-based suggestions: %s", e)

        return self._suggest_with_rules(change_set)

    def _suggest_with_ai(self, change_set: ChangeSet) -> SuggestionResult:
        credential = select_credential()
        provider = get_provider(credential.provider)

        context = gather_repository_context(self.vcs)
        prompt = build_prompt(
            change_set,
            context,
            count=self.max_suggestions,
            max_length=self.max_subject_length,
        )

        controller = ModelFallbackController(
            provider, get_model_candidates(credential.provider, credential.model)
        )
        response = controller.run(credential.api_key, prompt.text)
        entries = parse_suggestion_entries(response.text, limit=None)

        suggestions = []
        for message, explanation in entries:
            message = sanitize_subject(message, self.max_subject_length)
            if not message:
                continue
            commit_type, scope = parse_conventional_header(message)
            suggestions.append(
                CommitSuggestion(
                    message=message,
                    explanation=explanation,
                    type=commit_type,
                    scope=scope,
                    source=SuggestionSource.AI,
                )
            )

        suggestions = dedupe_suggestions(suggestions)[: self.max_suggestions]
        if not suggestions:
            # Every parsed message was blank after sanitizing
            raise ResponseParseError("LLM response contained no usable suggestions")

        return SuggestionResult(
            suggestions=suggestions,
            stats=change_set.stats,
            provider=credential.provider.value,
            model=response.model,
        )

    def _suggest_with_rules(self, change_set: ChangeSet) -> SuggestionResult:
        suggestions = []
        for suggestion in self.analyzer.analyze_batch(change_set.changes):
            message = sanitize_subject(suggestion.message, self.max_subject_length)
            suggestions.append(suggestion.model_copy(update={"message": message}))

        return SuggestionResult(
            suggestions=dedupe_suggestions(suggestions),
            stats=change_set.stats,
        )
