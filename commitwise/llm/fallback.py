"""Model fallback within a single provider.

ModelFallbackController walks a provider's ordered model candidates,
advancing only when the provider reports the current model as unavailable.
The prompt is identical on every attempt and calls are strictly sequential.
"""

import logging
from dataclasses import dataclass

from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.exceptions import ModelUnavailableError, ProviderTransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderResponse:
    """Raw text from a successful call and the model that produced it."""

    text: str
    model: str
    attempts: int


class ModelFallbackController:
    """Tries a provider's candidate models in order."""

    def __init__(self, provider: BaseLLMProvider, candidates: list[str]):
        """Initialize the controller.

        Args:
            provider: The provider adapter selected for this request.
            candidates: Model identifiers in the order to try them.
        """
        if not candidates:
            raise ValueError("At least one candidate model is required")
        self.provider = provider
        self.candidates = list(candidates)

    def run(self, api_key: str, prompt_text: str) -> ProviderResponse:
        """Call the provider, falling back through candidate models.

        Args:
            api_key: The provider API key.
            prompt_text: The rendered prompt, sent unchanged on every attempt.

        Returns:
            The first successful response.

        Raises:
            ProviderTransportError: If every candidate is unavailable, or on
                any failure other than an unavailable model.
        """
        last_error = None
        for attempt, model in enumerate(self.candidates, start=1):
            try:
                text = self.provider.call(api_key, model, prompt_text)
            except ModelUnavailableError as e:
                last_error = e
                logger.warning(
                    "Model %s unavailable on %s (%d/%d): %s",
                    model,
                    self.provider.display_name,
                    attempt,
                    len(self.candidates),
                    e,
                )
                continue
            return ProviderResponse(text=text, model=model, attempts=attempt)

        raise ProviderTransportError(
            f"No available model for {self.provider.display_name}; "
            f"tried: {', '.join(self.candidates)}"
        ) from last_error
