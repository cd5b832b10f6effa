"""Configuration for commitwise.

Module-level defaults live here. Values from ~/.commitwise/config.yaml are
applied on top of them by load_config(); use 'commitwise config' commands to
modify settings.
"""

from dataclasses import dataclass
from enum import Enum


class LLMProvider(Enum):
    """Supported LLM providers."""

    GOOGLE = "google"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GROQ = "groq"
    OPENROUTER = "openrouter"
    COHERE = "cohere"


# ============================================================
# PROVIDER SELECTION
# ============================================================

# First provider with a credential wins
PROVIDER_PRIORITY = [
    LLMProvider.GOOGLE,
    LLMProvider.ANTHROPIC,
    LLMProvider.OPENAI,
    LLMProvider.GROQ,
    LLMProvider.OPENROUTER,
    LLMProvider.COHERE,
]

API_KEY_ENV_VARS = {
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GROQ: "GROQ_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
    LLMProvider.COHERE: "COHERE_API_KEY",
}

# Ordered candidates tried when a model is reported as unavailable.
# The first entry is the provider default.
MODEL_CANDIDATES = {
    LLMProvider.GOOGLE: [
        "gemini-2.0-flash",
        "gemini-2.5-flash",
        "gemini-2.0-flash-lite",
        "gemini-1.5-flash",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-3-5-haiku-latest",
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
    ],
    LLMProvider.OPENAI: [
        "gpt-4o-mini",
        "gpt-4.1-mini",
        "gpt-4o",
    ],
    LLMProvider.GROQ: [
        "llama-3.3-70b-versatile",
        "llama-3.1-8b-instant",
    ],
    LLMProvider.OPENROUTER: [
        "anthropic/claude-3.5-haiku",
        "openai/gpt-4o-mini",
        "google/gemini-2.0-flash-001",
    ],
    LLMProvider.COHERE: [
        "command-r",
        "command-r-plus",
    ],
}


# ============================================================
# DIFF SIZE POLICY
# ============================================================


@dataclass(frozen=True)
class DiffLimits:
    """Size bounds applied while collecting diffs.

    Attributes:
        max_file_chars: Per-file cap; longer diffs are cut and marked.
        max_total_chars: Aggregate cap; above it every diff is reduced to a
            head/tail excerpt.
        summary_head_lines: Lines kept from the start of an excerpted diff.
        summary_tail_lines: Lines kept from the end of an excerpted diff.
    """

    max_file_chars: int = 3000
    max_total_chars: int = 1_000_000
    summary_head_lines: int = 50
    summary_tail_lines: int = 50


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.commitwise/config.yaml doesn't set them

DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.7
MAX_SUGGESTIONS = 3
MAX_SUBJECT_LENGTH = 72
RECENT_COMMIT_COUNT = 3


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
PREFERRED_PROVIDER: LLMProvider | None = None
PREFERRED_MODEL: str | None = None
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE
DIFF_LIMITS = DiffLimits()


def load_config() -> None:
    """Load configuration from the global config file.

    This should be called by the CLI before generating suggestions.

    Raises:
        GlobalConfigError: If the config file exists but cannot be read.
    """
    global PREFERRED_PROVIDER, PREFERRED_MODEL, MAX_TOKENS, TEMPERATURE, DIFF_LIMITS

    # Import here to avoid circular dependency
    from commitwise import global_config

    provider = global_config.get_active_provider()
    model = global_config.get_active_model()
    max_tokens = global_config.get_max_tokens()
    temperature = global_config.get_temperature()
    diff_section = global_config.get_diff_config()

    if provider:
        PREFERRED_PROVIDER = provider
    if model:
        PREFERRED_MODEL = model
    if max_tokens is not None:
        MAX_TOKENS = max_tokens
    if temperature is not None:
        TEMPERATURE = temperature
    if diff_section:
        DIFF_LIMITS = DiffLimits(
            max_file_chars=int(diff_section.get("max_file_chars", DIFF_LIMITS.max_file_chars)),
            max_total_chars=int(diff_section.get("max_total_chars", DIFF_LIMITS.max_total_chars)),
            summary_head_lines=int(diff_section.get("summary_head_lines", DIFF_LIMITS.summary_head_lines)),
            summary_tail_lines=int(diff_section.get("summary_tail_lines", DIFF_LIMITS.summary_tail_lines)),
        )


def get_model_candidates(provider: LLMProvider, preferred: str | None = None) -> list[str]:
    """Get the ordered model candidates for a provider.

    Args:
        provider: The LLM provider.
        preferred: A model to try before the built-in candidates.

    Returns:
        Model identifiers without duplicates, preferred model first.
    """
    candidates = list(MODEL_CANDIDATES[provider])
    if preferred:
        candidates = [preferred] + [m for m in candidates if m != preferred]
    return candidates
