"""Tests for commitwise.global_config module."""

import stat
from pathlib import Path

import pytest
import yaml

from commitwise.config import LLMProvider
from commitwise.global_config import (
    GlobalConfigError,
    ensure_global_config_dir,
    get_active_model,
    get_active_provider,
    get_config_file_path,
    get_credential,
    get_credentials_file_path,
    get_diff_config,
    get_global_config_dir,
    get_max_tokens,
    get_temperature,
    load_credentials,
    load_global_config,
    save_credential,
    save_global_config,
    set_provider_and_model,
)


class TestGlobalConfigDir:
    """Tests for global config directory functions."""

    def test_get_global_config_dir_returns_path(self):
        """Test that get_global_config_dir returns a Path."""
        result = get_global_config_dir()
        assert isinstance(result, Path)
        assert ".commitwise" in str(result)

    def test_ensure_global_config_dir_creates_directory(self):
        """Test that ensure_global_config_dir creates the directory."""
        result = ensure_global_config_dir()

        assert result.exists()
        assert result == get_global_config_dir()

    def test_file_paths(self):
        """Test config and credentials file names."""
        assert get_config_file_path().name == "config.yaml"
        assert get_credentials_file_path().name == "credentials"


class TestLoadSaveConfig:
    """Tests for config.yaml loading and saving."""

    def test_missing_file_is_empty(self):
        """Test a missing file loads as an empty dict."""
        assert load_global_config() == {}

    def test_round_trip(self):
        """Test saved values load back."""
        save_global_config({"provider": "groq", "max_tokens": 512})

        assert load_global_config() == {"provider": "groq", "max_tokens": 512}

    def test_invalid_yaml_raises(self):
        """Test unparseable YAML raises GlobalConfigError."""
        ensure_global_config_dir()
        get_config_file_path().write_text("provider: [unclosed")

        with pytest.raises(GlobalConfigError):
            load_global_config()

    def test_non_mapping_raises(self):
        """Test a YAML list is rejected."""
        ensure_global_config_dir()
        get_config_file_path().write_text("- a\n- b\n")

        with pytest.raises(GlobalConfigError):
            load_global_config()


class TestCredentials:
    """Tests for credentials file handling."""

    def test_save_and_get(self):
        """Test a saved key can be read back."""
        save_credential("OPENAI_API_KEY", "sk-test")

        assert get_credential("OPENAI_API_KEY") == "sk-test"

    def test_update_keeps_other_keys(self):
        """Test updating one key keeps the others."""
        save_credential("OPENAI_API_KEY", "one")
        save_credential("GROQ_API_KEY", "two")
        save_credential("OPENAI_API_KEY", "three")

        assert load_credentials() == {"OPENAI_API_KEY": "three", "GROQ_API_KEY": "two"}

    def test_file_is_owner_only(self):
        """Test the credentials file is mode 0600."""
        save_credential("OPENAI_API_KEY", "sk-test")

        mode = stat.S_IMODE(get_credentials_file_path().stat().st_mode)
        assert mode == stat.S_IRUSR | stat.S_IWUSR

    def test_comments_and_blank_lines_ignored(self):
        """Test comment lines are skipped."""
        ensure_global_config_dir()
        get_credentials_file_path().write_text("# comment\n\nCOHERE_API_KEY = co-key\n")

        assert load_credentials() == {"COHERE_API_KEY": "co-key"}

    def test_missing_key(self):
        """Test unknown keys give None."""
        assert get_credential("NOPE") is None


class TestProviderSettings:
    """Tests for provider, model and tuning settings."""

    def test_set_provider_and_model(self):
        """Test provider and model are stored."""
        set_provider_and_model(LLMProvider.ANTHROPIC, "claude-sonnet-4-20250514")

        assert get_active_provider() == LLMProvider.ANTHROPIC
        assert get_active_model() == "claude-sonnet-4-20250514"

    def test_set_provider_without_model_clears_model(self):
        """Test omitting the model removes a stale one."""
        set_provider_and_model(LLMProvider.OPENAI, "gpt-4o")
        set_provider_and_model(LLMProvider.GROQ, None)

        assert get_active_provider() == LLMProvider.GROQ
        assert get_active_model() is None

    def test_unknown_provider_is_none(self):
        """Test an unknown provider string is ignored."""
        save_global_config({"provider": "mystery"})

        assert get_active_provider() is None

    def test_tuning_values(self):
        """Test max_tokens, temperature and diff section."""
        save_global_config(
            {"max_tokens": 2048, "temperature": 0.2, "diff": {"max_file_chars": 500}}
        )

        assert get_max_tokens() == 2048
        assert get_temperature() == 0.2
        assert get_diff_config() == {"max_file_chars": 500}

    def test_unset_values(self):
        """Test missing values are None or empty."""
        assert get_max_tokens() is None
        assert get_temperature() is None
        assert get_diff_config() == {}

    def test_saved_file_is_yaml(self):
        """Test the file on disk is plain YAML."""
        set_provider_and_model(LLMProvider.COHERE, "command-r")

        data = yaml.safe_load(get_config_file_path().read_text())
        assert data == {"provider": "cohere", "model": "command-r"}
