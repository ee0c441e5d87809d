"""OpenAI binding of the AI provider interface."""

from __future__ import annotations

import asyncio
import logging

import openai

from resume_studio.clients.base import MODEL, PARSE_INSTRUCTION, SYSTEM_INSTRUCTION, AIProvider
from resume_studio.models.extraction import resume_json_schema
from resume_studio.parsers.resume_file import FilePart, extract_text
from resume_studio.utils.json_parser import extract_json

logger = logging.getLogger(__name__)


class OpenAIProvider(AIProvider):
    """Async OpenAI chat-completions client with a json_schema response format."""

    name = "openai"
    transport_errors = (openai.APIError,)
    timeout_errors = (openai.APITimeoutError,)

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        *,
        timeout: float = 90.0,
        max_tokens: int = 8192,
        temperature: float = 0.0,
    ):
        super().__init__(model, timeout=timeout, max_tokens=max_tokens, temperature=temperature)
        kwargs: dict = {"timeout": timeout, "max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        self.client = openai.AsyncOpenAI(**kwargs)

    async def _extract_resume(self, file: FilePart) -> dict:
        document = await self._file_part(file)
        response = await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {
                    "role": "user",
                    "content": [document, {"type": "text", "text": PARSE_INSTRUCTION}],
                },
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {"name": "resume", "schema": resume_json_schema()},
            },
        )
        return extract_json(self._content_of(response))

    async def _generate(self, prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return self._content_of(response)

    async def _chat_turn(self, system_instruction: str, turns: list[tuple[str, str]]) -> str:
        messages = [{"role": "system", "content": system_instruction}] if system_instruction else []
        messages.extend(
            {"role": "assistant" if role == MODEL else "user", "content": text}
            for role, text in turns
        )
        response = await self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.max_tokens,
            messages=messages,
        )
        return self._content_of(response)

    async def _file_part(self, file: FilePart) -> dict:
        if file.is_pdf:
            return {
                "type": "file",
                "file": {
                    "filename": file.filename or "resume.pdf",
                    "file_data": f"data:{file.mime_type};base64,{file.base64_data}",
                },
            }
        text = await asyncio.to_thread(extract_text, file)
        return {"type": "text", "text": f"Resume document:\n\n{text}"}

    @staticmethod
    def _content_of(response) -> str:
        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.debug(
                "OpenAI response: %s prompt, %s completion tokens",
                usage.prompt_tokens,
                usage.completion_tokens,
            )
        return response.choices[0].message.content or ""
