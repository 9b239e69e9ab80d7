# tests/unit/llms/test_factory.py

from unittest.mock import MagicMock, patch

import pytest

from spec_fidelity.llms import LLMConfig, create_llm_client
from spec_fidelity.llms.anthropic import AnthropicLLMClient
from spec_fidelity.llms.openai import OpenAILLMClient


class TestFactory:
    def test_create_openai_client(self) -> None:
        """Test creating OpenAI client."""
        with patch("spec_fidelity.llms.openai.AsyncOpenAI"):
            config = LLMConfig(provider="openai", model="gpt-4o", api_key="test")
            client = create_llm_client(config)
            assert isinstance(client, OpenAILLMClient)

    def test_create_anthropic_client(self) -> None:
        """Test creating Anthropic client."""
        with patch("spec_fidelity.llms.anthropic.AsyncAnthropic"):
            config = LLMConfig(
                provider="anthropic", model="claude-sonnet-4-20250514", api_key="test"
            )
            client = create_llm_client(config)
            assert isinstance(client, AnthropicLLMClient)

    def test_unknown_provider_raises(self) -> None:
        """Test that unknown provider raises ValueError."""
        config = LLMConfig(provider="unknown", model="model")  # type: ignore
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            create_llm_client(config)

    def test_config_values_passed_through(self) -> None:
        """Timeout goes to the SDK; retries stay with the adapter."""
        with patch("spec_fidelity.llms.openai.AsyncOpenAI") as mock_openai:
            config = LLMConfig(
                provider="openai",
                model="gpt-4-turbo",
                api_key="my-key",
                timeout=60.0,
                max_retries=5,
            )
            client = create_llm_client(config)

            assert client._model == "gpt-4-turbo"
            assert client._max_retries == 5
            mock_openai.assert_called_once_with(api_key="my-key", timeout=60.0)

    def test_metrics_hook_is_shared(self) -> None:
        metrics_hook = MagicMock()
        with patch("spec_fidelity.llms.openai.AsyncOpenAI"):
            client = create_llm_client(
                LLMConfig(provider="openai", model="gpt-4o"), metrics_hook
            )

        assert client.metrics_hook is metrics_hook


class TestLLMConfig:
    def test_defaults(self) -> None:
        config = LLMConfig(provider="openai", model="gpt-4o")

        assert config.api_key is None
        assert config.timeout == 30.0
        assert config.max_retries == 3

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"model": ""}, "model must not be empty"),
            ({"timeout": 0}, "timeout must be > 0"),
            ({"max_retries": 0}, "max_retries must be >= 1"),
        ],
    )
    def test_invalid_values(self, kwargs: dict, message: str) -> None:
        values = {"provider": "openai", "model": "gpt-4o", **kwargs}

        with pytest.raises(ValueError, match=message):
            LLMConfig(**values)
