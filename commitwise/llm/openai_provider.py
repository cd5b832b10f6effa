"""OpenAI provider implementation."""

from openai import OpenAI

import commitwise.config as _config
from commitwise.config import LLMProvider
from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.prompts import SYSTEM_PROMPT


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    provider = LLMProvider.OPENAI
    display_name = "OpenAI"

    def _create_client(self, api_key: str) -> OpenAI:
        return OpenAI(api_key=api_key)

    def _extra_request_args(self) -> dict:
        return {}

    def _complete(self, api_key: str, model: str, prompt_text: str) -> str:
        client = self._create_client(api_key)

        response = client.chat.completions.create(
            model=model,
            max_tokens=_config.MAX_TOKENS,
            temperature=_config.TEMPERATURE,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt_text},
            ],
            **self._extra_request_args(),
        )

        return response.choices[0].message.content
