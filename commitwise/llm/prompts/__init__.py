"""LLM prompt templates and prompt construction.

This package contains:
- system: The shared system prompt for all providers
- suggestions: The user prompt template for ranked commit suggestions
- builder: Prompt value object and build_prompt()
"""

from commitwise.llm.prompts.system import SYSTEM_PROMPT
from commitwise.llm.prompts.suggestions import (
    FILE_SECTION_TEMPLATE,
    USER_PROMPT_TEMPLATE_SUGGESTIONS,
)
from commitwise.llm.prompts.builder import (
    Prompt,
    RepositoryContext,
    build_prompt,
    gather_repository_context,
)


__all__ = [
    "SYSTEM_PROMPT",
    "USER_PROMPT_TEMPLATE_SUGGESTIONS",
    "FILE_SECTION_TEMPLATE",
    "Prompt",
    "RepositoryContext",
    "build_prompt",
    "gather_repository_context",
]
