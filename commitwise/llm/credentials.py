"""Provider credential selection.

Exactly one credential is selected per suggestion request: the first
provider, in priority order, whose API key is present. A configured
provider preference is tried ahead of the built-in order.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

import commitwise.config as _config
from commitwise import global_config
from commitwise.config import API_KEY_ENV_VARS, PROVIDER_PRIORITY, LLMProvider
from commitwise.llm.exceptions import NoCredentialConfiguredError

logger = logging.getLogger(__name__)


class ProviderCredential(BaseModel):
    """The provider, API key and preferred model for one request."""

    model_config = ConfigDict(frozen=True)

    provider: LLMProvider
    api_key: str
    model: str

    def __repr__(self) -> str:
        return f"ProviderCredential(provider={self.provider.value!r}, model={self.model!r})"


def get_api_key(provider: LLMProvider) -> Optional[str]:
    """Look up the API key for a provider.

    Checks in order:
    1. Environment variable (including a loaded .env file)
    2. ~/.commitwise/credentials file

    Returns:
        The API key, or None if not set.
    """
    env_var = API_KEY_ENV_VARS[provider]
    api_key = os.environ.get(env_var)
    if api_key:
        return api_key
    return global_config.get_credential(env_var)


def provider_order(preferred: Optional[LLMProvider] = None) -> list[LLMProvider]:
    """Get the provider lookup order, preferred provider first."""
    if preferred is None:
        return list(PROVIDER_PRIORITY)
    return [preferred] + [p for p in PROVIDER_PRIORITY if p != preferred]


def select_credential(
    preferred: Optional[LLMProvider] = None,
    preferred_model: Optional[str] = None,
) -> ProviderCredential:
    """Select the credential to use for this request.

    Args:
        preferred: Provider to try first. Defaults to the configured one.
        preferred_model: Model for the preferred provider. Defaults to the
            configured one. Ignored for other providers.

    Returns:
        The first available ProviderCredential.

    Raises:
        NoCredentialConfiguredError: If no provider has an API key.
    """
    preferred = preferred or _config.PREFERRED_PROVIDER
    preferred_model = preferred_model or _config.PREFERRED_MODEL

    for provider in provider_order(preferred):
        api_key = get_api_key(provider)
        if not api_key:
            continue

        model = _config.MODEL_CANDIDATES[provider][0]
        if provider == preferred and preferred_model:
            model = preferred_model

        logger.debug("Selected provider %s with model %s", provider.value, model)
        return ProviderCredential(provider=provider, api_key=api_key, model=model)

    env_vars = ", ".join(API_KEY_ENV_VARS[p] for p in PROVIDER_PRIORITY)
    raise NoCredentialConfiguredError(
        "No LLM API key configured.\n"
        f"Set one of: {env_vars}\n"
        "Or run: commitwise config set-key <provider>"
    )
