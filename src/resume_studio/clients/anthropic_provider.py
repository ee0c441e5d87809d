"""Claude binding of the AI provider interface."""

from __future__ import annotations

import asyncio
import logging

import anthropic

from resume_studio.clients.base import MODEL, PARSE_INSTRUCTION, SYSTEM_INSTRUCTION, AIProvider
from resume_studio.models.extraction import resume_json_schema
from resume_studio.parsers.resume_file import FilePart, extract_text
from resume_studio.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

RESUME_TOOL = "record_resume"


class AnthropicProvider(AIProvider):
    """Async Claude client. The schema is enforced through a forced tool call."""

    name = "anthropic"
    transport_errors = (anthropic.APIError,)
    timeout_errors = (anthropic.APITimeoutError,)

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-sonnet-4-5-20250929",
        *,
        timeout: float = 90.0,
        max_tokens: int = 8192,
        temperature: float = 0.0,
    ):
        super().__init__(model, timeout=timeout, max_tokens=max_tokens, temperature=temperature)
        kwargs: dict = {"timeout": timeout, "max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def _extract_resume(self, file: FilePart) -> dict:
        content = [*await self._file_blocks(file), {"type": "text", "text": PARSE_INSTRUCTION}]
        message = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=SYSTEM_INSTRUCTION,
            messages=[{"role": "user", "content": content}],
            tools=[
                {
                    "name": RESUME_TOOL,
                    "description": "Record the structured resume extracted from the document.",
                    "input_schema": resume_json_schema(),
                }
            ],
            tool_choice={"type": "tool", "name": RESUME_TOOL},
        )
        self._log_usage(message)
        for block in message.content:
            if getattr(block, "type", None) == "tool_use":
                return block.input
        # No tool call: fall back to JSON in the text blocks
        return extract_json(_text_of(message))

    async def _generate(self, prompt: str) -> str:
        message = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        self._log_usage(message)
        return _text_of(message)

    async def _chat_turn(self, system_instruction: str, turns: list[tuple[str, str]]) -> str:
        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [
                {"role": "assistant" if role == MODEL else "user", "content": text}
                for role, text in turns
            ],
        }
        if system_instruction:
            kwargs["system"] = system_instruction
        message = await self.client.messages.create(**kwargs)
        self._log_usage(message)
        return _text_of(message)

    async def _file_blocks(self, file: FilePart) -> list[dict]:
        if file.is_pdf:
            return [
                {
                    "type": "document",
                    "source": {
                        "type": "base64",
                        "media_type": file.mime_type,
                        "data": file.base64_data,
                    },
                }
            ]
        text = await asyncio.to_thread(extract_text, file)
        return [{"type": "text", "text": f"Resume document:\n\n{text}"}]

    def _log_usage(self, message) -> None:
        logger.debug(
            "Claude response: %d input, %d output tokens",
            message.usage.input_tokens,
            message.usage.output_tokens,
        )


def _text_of(message) -> str:
    return "".join(
        block.text for block in message.content if getattr(block, "type", None) == "text"
    )
