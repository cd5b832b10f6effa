"""Cohere provider implementation."""

import cohere

import commitwise.config as _config
from commitwise.config import LLMProvider
from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.prompts import SYSTEM_PROMPT


class CohereProvider(BaseLLMProvider):
    """Cohere LLM provider."""

    provider = LLMProvider.COHERE
    display_name = "Cohere"

    def _complete(self, api_key: str, model: str, prompt_text: str) -> str:
        client = cohere.ClientV2(api_key=api_key)

        response = client.chat(
            model=model,
            max_tokens=_config.MAX_TOKENS,
            temperature=_config.TEMPERATURE,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt_text},
            ],
        )

        return response.message.content[0].text
