"""Tests for commitwise.llm.credentials module."""

import pytest

import commitwise.config as _config
from commitwise.config import MODEL_CANDIDATES, PROVIDER_PRIORITY, LLMProvider
from commitwise.global_config import save_credential
from commitwise.llm.credentials import (
    ProviderCredential,
    get_api_key,
    provider_order,
    select_credential,
)
from commitwise.llm.exceptions import NoCredentialConfiguredError


class TestGetApiKey:
    """Tests for get_api_key function."""

    def test_environment_variable(self, monkeypatch):
        """Test the environment is checked first."""
        monkeypatch.setenv("OPENAI_API_KEY", "env-key")
        save_credential("OPENAI_API_KEY", "file-key")

        assert get_api_key(LLMProvider.OPENAI) == "env-key"

    def test_credentials_file(self):
        """Test the credentials file is the fallback."""
        save_credential("GROQ_API_KEY", "file-key")

        assert get_api_key(LLMProvider.GROQ) == "file-key"

    def test_missing(self):
        """Test None when no key exists."""
        assert get_api_key(LLMProvider.COHERE) is None


class TestProviderOrder:
    """Tests for provider_order function."""

    def test_default_priority(self):
        """Test the built-in order without a preference."""
        assert provider_order() == PROVIDER_PRIORITY

    def test_preferred_first(self):
        """Test a preferred provider moves to the front once."""
        order = provider_order(LLMProvider.COHERE)

        assert order[0] == LLMProvider.COHERE
        assert order.count(LLMProvider.COHERE) == 1
        assert len(order) == len(PROVIDER_PRIORITY)


class TestSelectCredential:
    """Tests for select_credential function."""

    def test_first_available_in_priority_wins(self, monkeypatch):
        """Test the highest-priority provider with a key is selected."""
        monkeypatch.setenv("GROQ_API_KEY", "gsk")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")

        credential = select_credential()

        assert credential.provider == LLMProvider.ANTHROPIC
        assert credential.api_key == "sk-ant"
        assert credential.model == MODEL_CANDIDATES[LLMProvider.ANTHROPIC][0]

    def test_configured_preference_wins(self, monkeypatch):
        """Test a configured provider and model are used when keyed."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
        monkeypatch.setenv("COHERE_API_KEY", "co")
        monkeypatch.setattr(_config, "PREFERRED_PROVIDER", LLMProvider.COHERE)
        monkeypatch.setattr(_config, "PREFERRED_MODEL", "command-r-plus")

        credential = select_credential()

        assert credential == ProviderCredential(
            provider=LLMProvider.COHERE, api_key="co", model="command-r-plus"
        )

    def test_preference_without_key_falls_through(self, monkeypatch):
        """Test an unkeyed preference does not block other providers."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk")
        monkeypatch.setattr(_config, "PREFERRED_PROVIDER", LLMProvider.GOOGLE)
        monkeypatch.setattr(_config, "PREFERRED_MODEL", "gemini-2.5-pro")

        credential = select_credential()

        assert credential.provider == LLMProvider.OPENAI
        assert credential.model == MODEL_CANDIDATES[LLMProvider.OPENAI][0]

    def test_no_credentials_raises(self):
        """Test absence of every key is a configuration error."""
        with pytest.raises(NoCredentialConfiguredError) as exc_info:
            select_credential()

        assert "GOOGLE_API_KEY" in str(exc_info.value)
        assert "commitwise config set-key" in str(exc_info.value)

    def test_repr_hides_api_key(self, monkeypatch):
        """Test the key never appears in the repr."""
        monkeypatch.setenv("GOOGLE_API_KEY", "secret-value")

        assert "secret-value" not in repr(select_credential())
