"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- NoCredentialConfiguredError: Raised when no provider has an API key
- ProviderTransportError: Raised when a provider call fails
- ModelUnavailableError: Raised when a provider rejects the requested model
- ResponseParseError: Raised when no suggestions can be read from a response
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class NoCredentialConfiguredError(LLMError):
    """Raised when no API key is set for any supported provider."""

    pass


class ProviderTransportError(LLMError):
    """Raised when a provider call fails for a reason other than the model."""

    pass


class ModelUnavailableError(LLMError):
    """Raised when a provider reports the model as not found or not supported.

    Attributes:
        model: The rejected model identifier.
    """

    def __init__(self, message: str, model: str | None = None):
        super().__init__(message)
        self.model = model


class ResponseParseError(LLMError):
    """Raised when the provider response contains no usable suggestions."""

    pass
