"""Prompt construction for commit suggestions.

Contains:
- RepositoryContext: Branch name and recent commit subjects
- Prompt: The rendered prompt plus the output contract it encodes
- gather_repository_context: Best-effort context lookup
- build_prompt: Render a ChangeSet into a Prompt
"""

import logging

from pydantic import BaseModel, ConfigDict

from commitwise.config import MAX_SUBJECT_LENGTH, MAX_SUGGESTIONS, RECENT_COMMIT_COUNT
from commitwise.formatters import CONVENTIONAL_TYPES
from commitwise.git.exceptions import GitError
from commitwise.git.repository import VersionControl
from commitwise.llm.prompts.suggestions import (
    FILE_SECTION_TEMPLATE,
    USER_PROMPT_TEMPLATE_SUGGESTIONS,
)
from commitwise.models import ChangeSet
from commitwise.scope import infer_file_scope

logger = logging.getLogger(__name__)


class RepositoryContext(BaseModel):
    """Repository facts included in the prompt.

    Both fields are best-effort: an empty value means the lookup failed.
    """

    model_config = ConfigDict(frozen=True)

    branch: str = ""
    recent_commits: tuple[str, ...] = ()


class Prompt(BaseModel):
    """A rendered prompt.

    Attributes:
        text: The full user prompt sent to the provider.
        expected_count: Number of suggestions the prompt asks for.
        max_subject_length: Subject budget the prompt asks the model to honor.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    expected_count: int = MAX_SUGGESTIONS
    max_subject_length: int = MAX_SUBJECT_LENGTH


def gather_repository_context(
    vcs: VersionControl, commit_count: int = RECENT_COMMIT_COUNT
) -> RepositoryContext:
    """Look up the branch name and recent commit subjects.

    Failures are logged and leave the affected field empty; they never
    abort prompt construction.
    """
    branch = ""
    recent: tuple[str, ...] = ()

    try:
        branch = vcs.get_current_branch_name()
    except GitError as e:
        logger.warning("Could not read current branch: %s", e)

    try:
        recent = tuple(vcs.get_recent_commit_subjects(commit_count))
    except GitError as e:
        logger.warning("Could not read recent commits: %s", e)

    return RepositoryContext(branch=branch, recent_commits=recent)


def _render_file_sections(change_set: ChangeSet) -> str:
    sections = []
    for change in change_set.changes:
        sections.append(
            FILE_SECTION_TEMPLATE.format(
                filename=change.filename,
                scope=infer_file_scope(change.filename),
                status=change.status.value,
                additions=change.additions,
                deletions=change.deletions,
                diff=change.diff or "(no diff available)",
            )
        )
    return "\n".join(sections)


def build_prompt(
    change_set: ChangeSet,
    context: RepositoryContext | None = None,
    count: int = MAX_SUGGESTIONS,
    max_length: int = MAX_SUBJECT_LENGTH,
) -> Prompt:
    """Render the suggestion prompt for a change set.

    The output is deterministic for identical inputs.

    Args:
        change_set: The summarized changes.
        context: Repository context. Defaults to an empty context.
        count: Number of suggestions to request.
        max_length: Subject length limit to request.

    Returns:
        The rendered Prompt.
    """
    context = context or RepositoryContext()

    text = USER_PROMPT_TEMPLATE_SUGGESTIONS.format(
        count=count,
        types=", ".join(CONVENTIONAL_TYPES),
        max_length=max_length,
        branch=context.branch,
        recent_commits="\n".join(f"- {s}" for s in context.recent_commits),
        files=change_set.stats.files,
        additions=change_set.stats.additions,
        deletions=change_set.stats.deletions,
        scopes=", ".join(change_set.scopes),
        file_sections=_render_file_sections(change_set),
    )
    return Prompt(text=text, expected_count=count, max_subject_length=max_length)
