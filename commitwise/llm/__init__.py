"""LLM provider module for commitwise.

This module provides a unified interface to multiple LLM providers.
The provider for a request is chosen by credential availability; see
commitwise.llm.credentials.
"""

from dotenv import load_dotenv

from commitwise.config import LLMProvider
from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.credentials import ProviderCredential, select_credential
from commitwise.llm.exceptions import (
    LLMError,
    ModelUnavailableError,
    NoCredentialConfiguredError,
    ProviderTransportError,
    ResponseParseError,
)
from commitwise.llm.fallback import ModelFallbackController, ProviderResponse
from commitwise.llm.parsing import parse_suggestion_entries, parse_suggestions

# Load environment variables from .env file
load_dotenv()


def get_provider(provider: LLMProvider) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if provider == LLMProvider.GOOGLE:
        from commitwise.llm.google_provider import GoogleProvider

        return GoogleProvider()

    elif provider == LLMProvider.ANTHROPIC:
        from commitwise.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider()

    elif provider == LLMProvider.OPENAI:
        from commitwise.llm.openai_provider import OpenAIProvider

        return OpenAIProvider()

    elif provider == LLMProvider.GROQ:
        from commitwise.llm.groq_provider import GroqProvider

        return GroqProvider()

    elif provider == LLMProvider.OPENROUTER:
        from commitwise.llm.openrouter_provider import OpenRouterProvider

        return OpenRouterProvider()

    elif provider == LLMProvider.COHERE:
        from commitwise.llm.cohere_provider import CohereProvider

        return CohereProvider()

    else:
        raise ValueError(f"Unsupported provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "NoCredentialConfiguredError",
    "ProviderTransportError",
    "ModelUnavailableError",
    "ResponseParseError",
    "ProviderCredential",
    "ModelFallbackController",
    "ProviderResponse",
    "get_provider",
    "select_credential",
    "parse_suggestions",
    "parse_suggestion_entries",
]
