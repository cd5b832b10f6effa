"""OpenRouter provider implementation.

OpenRouter provides unified access to many models through a single API.
It uses an OpenAI-compatible API format.
"""

from openai import OpenAI

from commitwise.config import LLMProvider
from commitwise.llm.openai_provider import OpenAIProvider

# OpenRouter API base URL
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter LLM provider."""

    provider = LLMProvider.OPENROUTER
    display_name = "OpenRouter"

    def _create_client(self, api_key: str) -> OpenAI:
        return OpenAI(api_key=api_key, base_url=OPENROUTER_BASE_URL)

    def _extra_request_args(self) -> dict:
        return {
            "extra_headers": {
                "HTTP-Referer": "https://github.com/commitwise",
                "X-Title": "commitwise",
            }
        }
