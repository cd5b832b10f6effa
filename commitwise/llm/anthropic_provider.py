"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

import commitwise.config as _config
from commitwise.config import LLMProvider
from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.prompts import SYSTEM_PROMPT


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    provider = LLMProvider.ANTHROPIC
    display_name = "Anthropic"

    def _complete(self, api_key: str, model: str, prompt_text: str) -> str:
        client = Anthropic(api_key=api_key)

        message = client.messages.create(
            model=model,
            max_tokens=_config.MAX_TOKENS,
            temperature=_config.TEMPERATURE,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt_text}],
        )

        # Concatenate the text blocks of the reply
        return "".join(
            block.text for block in message.content if getattr(block, "type", "") == "text"
        )
