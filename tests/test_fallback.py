"""Tests for commitwise.llm.fallback module."""

from unittest.mock import MagicMock

import pytest

from commitwise.llm.base import BaseLLMProvider
from commitwise.llm.exceptions import ModelUnavailableError, ProviderTransportError
from commitwise.llm.fallback import ModelFallbackController, ProviderResponse


def _provider(side_effect):
    provider = MagicMock(spec=BaseLLMProvider)
    provider.display_name = "Stub"
    provider.call.side_effect = side_effect
    return provider


class TestModelFallbackController:
    """Tests for ModelFallbackController."""

    def test_first_model_succeeds(self):
        """Test no fallback when the first model answers."""
        provider = _provider(["ok"])

        response = ModelFallbackController(provider, ["a", "b"]).run("key", "PROMPT")

        assert response == ProviderResponse(text="ok", model="a", attempts=1)
        provider.call.assert_called_once_with("key", "a", "PROMPT")

    def test_two_unavailable_then_success(self):
        """Test exactly two retries with the same prompt before success."""
        provider = _provider(
            [
                ModelUnavailableError("not found", model="a"),
                ModelUnavailableError("not found", model="b"),
                "raw text",
            ]
        )

        response = ModelFallbackController(provider, ["a", "b", "c"]).run("key", "PROMPT")

        assert response.model == "c"
        assert response.attempts == 3
        assert [c.args for c in provider.call.call_args_list] == [
            ("key", "a", "PROMPT"),
            ("key", "b", "PROMPT"),
            ("key", "c", "PROMPT"),
        ]

    def test_exhausted_candidates_raise_transport_error(self):
        """Test running out of models is terminal."""
        provider = _provider([ModelUnavailableError("gone"), ModelUnavailableError("gone")])

        with pytest.raises(ProviderTransportError) as exc_info:
            ModelFallbackController(provider, ["a", "b"]).run("key", "PROMPT")

        assert "a, b" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ModelUnavailableError)

    def test_transport_error_is_not_retried(self):
        """Test other failures stop immediately."""
        provider = _provider([ProviderTransportError("401 unauthorized"), "never"])

        with pytest.raises(ProviderTransportError):
            ModelFallbackController(provider, ["a", "b"]).run("key", "PROMPT")

        assert provider.call.call_count == 1

    def test_fallback_is_logged(self, caplog):
        """Test each fallback step is logged as a warning."""
        provider = _provider([ModelUnavailableError("gone"), "ok"])

        ModelFallbackController(provider, ["a", "b"]).run("key", "PROMPT")

        assert "Model a unavailable" in caplog.text

    def test_requires_candidates(self):
        """Test an empty candidate list is rejected."""
        with pytest.raises(ValueError):
            ModelFallbackController(_provider([]), [])
