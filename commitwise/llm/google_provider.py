"""Google Gemini provider implementation."""

from google import genai
from google.genai import types

import commitwise.config as _config
from commitwise.config import LLMProvider
from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.exceptions import ProviderTransportError
from commitwise.llm.prompts import SYSTEM_PROMPT

# Models with built-in "thinking" that consumes output tokens
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

THINKING_TOKEN_MULTIPLIER = 3


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    provider = LLMProvider.GOOGLE
    display_name = "Google Gemini"

    @staticmethod
    def _is_thinking_model(model: str) -> bool:
        return any(name in model.lower() for name in THINKING_MODELS)

    def _complete(self, api_key: str, model: str, prompt_text: str) -> str:
        client = genai.Client(api_key=api_key)

        max_tokens = _config.MAX_TOKENS
        if self._is_thinking_model(model):
            max_tokens = _config.MAX_TOKENS * THINKING_TOKEN_MULTIPLIER

        response = client.models.generate_content(
            model=model,
            contents=prompt_text,
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_PROMPT,
                max_output_tokens=max_tokens,
                temperature=_config.TEMPERATURE,
            ),
        )

        if not response.candidates:
            raise ProviderTransportError("Google Gemini returned no candidates in response")

        finish_reason = str(getattr(response.candidates[0], "finish_reason", ""))
        if "SAFETY" in finish_reason:
            raise ProviderTransportError(
                f"Google Gemini blocked response due to safety filters: {finish_reason}"
            )

        return response.text
