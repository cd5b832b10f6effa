"""Groq provider implementation."""

from groq import Groq

import commitwise.config as _config
from commitwise.config import LLMProvider
from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.prompts import SYSTEM_PROMPT


class GroqProvider(BaseLLMProvider):
    """Groq LLM provider (fast inference for open-source models)."""

    provider = LLMProvider.GROQ
    display_name = "Groq"

    def _complete(self, api_key: str, model: str, prompt_text: str) -> str:
        client = Groq(api_key=api_key)

        response = client.chat.completions.create(
            model=model,
            max_tokens=_config.MAX_TOKENS,
            temperature=_config.TEMPERATURE,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt_text},
            ],
        )

        return response.choices[0].message.content
