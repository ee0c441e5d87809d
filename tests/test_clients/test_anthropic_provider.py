"""Tests for AnthropicProvider (Claude binding)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from resume_studio.clients.anthropic_provider import RESUME_TOOL, AnthropicProvider
from resume_studio.clients.base import SYSTEM_INSTRUCTION
from resume_studio.errors import AIResponseError
from resume_studio.parsers.resume_file import extract_text

PATCH_TARGET = "resume_studio.clients.anthropic_provider.anthropic.AsyncAnthropic"


def _make_api_message(blocks: list, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = blocks
    return message


def _text_block(text: str) -> MagicMock:
    return MagicMock(type="text", text=text)


def _tool_block(data: dict) -> MagicMock:
    return MagicMock(type="tool_use", input=data)


def _provider_with(mock_cls, message) -> AnthropicProvider:
    mock_client = MagicMock()
    mock_client.messages.create = AsyncMock(return_value=message)
    mock_cls.return_value = mock_client
    return AnthropicProvider()


class TestAnthropicProviderInit:
    def test_init_default_disables_sdk_retries(self):
        with patch(PATCH_TARGET) as mock_cls:
            AnthropicProvider()
            mock_cls.assert_called_once_with(timeout=90.0, max_retries=0)

    def test_init_with_api_key_passes_key(self):
        with patch(PATCH_TARGET) as mock_cls:
            AnthropicProvider(api_key="test-key", timeout=30.0)
            mock_cls.assert_called_once_with(timeout=30.0, max_retries=0, api_key="test-key")

    def test_real_client_never_retries(self):
        provider = AnthropicProvider(api_key="k")
        assert provider.client.max_retries == 0


class TestAnthropicParseResume:
    async def test_returns_tool_input(self, pdf_part, sample_raw_response):
        with patch(PATCH_TARGET) as mock_cls:
            provider = _provider_with(mock_cls, _make_api_message([_tool_block(sample_raw_response)]))
            result = await provider.parse_resume(pdf_part)

        assert result == sample_raw_response

    async def test_forces_resume_tool_and_sends_pdf_document(self, pdf_part):
        with patch(PATCH_TARGET) as mock_cls:
            provider = _provider_with(mock_cls, _make_api_message([_tool_block({})]))
            await provider.parse_resume(pdf_part)
            kwargs = provider.client.messages.create.call_args.kwargs

        assert kwargs["system"] == SYSTEM_INSTRUCTION
        assert kwargs["tool_choice"] == {"type": "tool", "name": RESUME_TOOL}
        assert kwargs["tools"][0]["input_schema"]["properties"]["personalInfo"]
        document = kwargs["messages"][0]["content"][0]
        assert document["type"] == "document"
        assert document["source"]["media_type"] == "application/pdf"
        assert document["source"]["data"] == pdf_part.base64_data

    async def test_text_file_sent_as_text(self, text_part):
        with patch(PATCH_TARGET) as mock_cls:
            provider = _provider_with(mock_cls, _make_api_message([_tool_block({})]))
            await provider.parse_resume(text_part)
            content = provider.client.messages.create.call_args.kwargs["messages"][0]["content"]

        assert content[0]["type"] == "text"
        assert "Jane Roe" in content[0]["text"]

    async def test_text_extraction_runs_off_the_event_loop(self, text_part):
        with (
            patch(PATCH_TARGET) as mock_cls,
            patch(
                "resume_studio.clients.anthropic_provider.asyncio.to_thread",
                new=AsyncMock(return_value="Extracted text"),
            ) as mock_to_thread,
        ):
            provider = _provider_with(mock_cls, _make_api_message([_tool_block({})]))
            await provider.parse_resume(text_part)
            content = provider.client.messages.create.call_args.kwargs["messages"][0]["content"]

        mock_to_thread.assert_awaited_once_with(extract_text, text_part)
        assert content[0]["text"].endswith("Extracted text")


    async def test_falls_back_to_json_text(self, pdf_part):
        with patch(PATCH_TARGET) as mock_cls:
            message = _make_api_message([_text_block('```json\n{"summary": "From text"}\n```')])
            provider = _provider_with(mock_cls, message)
            result = await provider.parse_resume(pdf_part)

        assert result == {"summary": "From text"}

    async def test_no_json_is_response_error(self, pdf_part):
        with patch(PATCH_TARGET) as mock_cls:
            provider = _provider_with(mock_cls, _make_api_message([_text_block("I cannot read this")]))
            with pytest.raises(AIResponseError) as exc_info:
                await provider.parse_resume(pdf_part)

        assert exc_info.value.provider == "anthropic"


class TestAnthropicTextAndChat:
    async def test_generate_text_joins_text_blocks(self):
        with patch(PATCH_TARGET) as mock_cls:
            message = _make_api_message([_text_block("Hello "), _text_block("world")])
            provider = _provider_with(mock_cls, message)
            result = await provider.generate_text("say hello")

        assert result == "Hello world"

    async def test_chat_maps_model_role_to_assistant(self):
        with patch(PATCH_TARGET) as mock_cls:
            provider = _provider_with(mock_cls, _make_api_message([_text_block("Sure")]))
            chat = provider.start_chat("You are a resume coach.")
            await chat.send_message("Improve my summary")
            await chat.send_message("Shorter")
            kwargs = provider.client.messages.create.call_args.kwargs

        assert kwargs["system"] == "You are a resume coach."
        assert [m["role"] for m in kwargs["messages"]] == ["user", "assistant", "user"]
