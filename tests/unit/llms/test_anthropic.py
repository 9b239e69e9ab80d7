# tests/unit/llms/test_anthropic.py

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from spec_fidelity.llms.anthropic import JSON_INSTRUCTION, AnthropicLLMClient
from spec_fidelity.llms.base import Message, Role


@pytest.fixture
def mock_anthropic_response() -> MagicMock:
    """Create a mock Anthropic response."""
    response = MagicMock()

    text_block = MagicMock()
    text_block.type = "text"
    text_block.text = "Hello! How can I help you?"

    response.content = [text_block]
    response.stop_reason = "end_turn"
    response.usage.input_tokens = 10
    response.usage.output_tokens = 8
    return response


class TestAnthropicLLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_anthropic_response: MagicMock) -> None:
        """Test basic completion."""
        with patch("spec_fidelity.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Hello!")]
            )

            assert response.content == "Hello! How can I help you?"
            assert response.finish_reason == "stop"
            assert response.usage.total_tokens == 18
            assert response.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_system_message_is_passed_separately(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        with patch("spec_fidelity.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            await client.complete(
                messages=[
                    Message(role=Role.SYSTEM, content="Be brief."),
                    Message(role=Role.USER, content="Hello!"),
                ]
            )

            kwargs = mock_client.messages.create.call_args.kwargs
            assert kwargs["system"] == "Be brief."
            assert kwargs["messages"] == [{"role": "user", "content": "Hello!"}]
            assert kwargs["max_tokens"] == 4096

    @pytest.mark.asyncio
    async def test_json_format_extends_system_prompt(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        """Without a native JSON mode the instruction goes into the system prompt."""
        with patch("spec_fidelity.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            await client.complete(
                messages=[
                    Message(role=Role.SYSTEM, content="Rewrite steps."),
                    Message(role=Role.USER, content="..."),
                ],
                response_format="json",
            )

            system = mock_client.messages.create.call_args.kwargs["system"]
            assert system.startswith("Rewrite steps.")
            assert system.endswith(JSON_INSTRUCTION)

    @pytest.mark.asyncio
    async def test_max_tokens_stop_reason_maps_to_length(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        mock_anthropic_response.stop_reason = "max_tokens"
        with patch("spec_fidelity.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Hello!")]
            )

            assert response.finish_reason == "length"

    def test_extract_system(self) -> None:
        with patch("spec_fidelity.llms.anthropic.AsyncAnthropic"):
            client = AnthropicLLMClient(api_key="test-key")

            system, rest = client._extract_system(
                [
                    Message(role=Role.SYSTEM, content="sys"),
                    Message(role=Role.USER, content="hi"),
                ]
            )

            assert system == "sys"
            assert rest == [Message(role=Role.USER, content="hi")]
