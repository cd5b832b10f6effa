"""Base class and shared utilities for LLM providers.

Every provider exposes one capability, call(api_key, model, prompt_text),
returning the raw response text. Subclasses implement _complete() with
their own SDK; the base class maps SDK failures onto the error taxonomy.
"""

from abc import ABC, abstractmethod
from typing import Any

from commitwise.config import LLMProvider
from commitwise.llm.exceptions import (
    LLMError,
    ModelUnavailableError,
    ProviderTransportError,
)

# Substrings providers use when a model id is unknown or cannot serve the call
MODEL_UNAVAILABLE_MARKERS = (
    "not found",
    "not supported",
    "does not exist",
    "model_not_found",
)


def _status_code(exc: Exception) -> Any:
    for attr in ("status_code", "code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def upstream_message(exc: Exception) -> str:
    """Extract the upstream error payload's message from an SDK exception.

    Falls back to str(exc) when the exception carries no structured body.
    """
    body = getattr(exc, "body", None)
    if body is None:
        body = getattr(exc, "details", None)

    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
        if body.get("message"):
            return str(body["message"])

    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


def is_model_unavailable(exc: Exception) -> bool:
    """Check whether an SDK exception means the model cannot be used."""
    if _status_code(exc) == 404:
        return True
    text = f"{upstream_message(exc)} {exc}".lower()
    return any(marker in text for marker in MODEL_UNAVAILABLE_MARKERS)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    provider: LLMProvider
    display_name: str = "LLM"

    def call(self, api_key: str, model: str, prompt_text: str) -> str:
        """Send one prompt to one model and return the raw response text.

        Args:
            api_key: The provider API key.
            model: The model identifier.
            prompt_text: The rendered user prompt.

        Returns:
            The raw, unparsed response text.

        Raises:
            ModelUnavailableError: If the provider rejects the model.
            ProviderTransportError: For any other failure or an empty reply.
        """
        try:
            text = self._complete(api_key, model, prompt_text)
        except LLMError:
            raise
        except Exception as e:
            message = upstream_message(e)
            if is_model_unavailable(e):
                raise ModelUnavailableError(
                    f"{self.display_name} model '{model}' is unavailable: {message}",
                    model=model,
                ) from e
            raise ProviderTransportError(
                f"{self.display_name} API call failed: {message}"
            ) from e

        if not text or not text.strip():
            raise ProviderTransportError(f"{self.display_name} returned an empty response")
        return text

    @abstractmethod
    def _complete(self, api_key: str, model: str, prompt_text: str) -> str:
        """Issue the SDK request and return the response text."""
        pass
