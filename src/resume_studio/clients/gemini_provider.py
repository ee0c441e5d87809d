"""Gemini binding of the AI provider interface."""

from __future__ import annotations

import asyncio
import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from resume_studio.clients.base import MODEL, PARSE_INSTRUCTION, SYSTEM_INSTRUCTION, AIProvider
from resume_studio.models.extraction import ExtractedResume
from resume_studio.parsers.resume_file import FilePart, extract_text
from resume_studio.utils.json_parser import extract_json

logger = logging.getLogger(__name__)


class GeminiProvider(AIProvider):
    """Async google-genai client using response_schema for structured output."""

    name = "gemini"
    transport_errors = (genai_errors.APIError,)

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.5-flash",
        *,
        timeout: float = 90.0,
        max_tokens: int = 8192,
        temperature: float = 0.0,
    ):
        super().__init__(model, timeout=timeout, max_tokens=max_tokens, temperature=temperature)
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        self.client = genai.Client(**kwargs)

    async def _extract_resume(self, file: FilePart) -> dict:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[await self._file_part(file), PARSE_INSTRUCTION],
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_INSTRUCTION,
                response_mime_type="application/json",
                response_schema=ExtractedResume,
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            ),
        )
        return extract_json(response.text or "")

    async def _generate(self, prompt: str) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            ),
        )
        return response.text or ""

    async def _chat_turn(self, system_instruction: str, turns: list[tuple[str, str]]) -> str:
        contents = [
            types.Content(
                role="model" if role == MODEL else "user",
                parts=[types.Part.from_text(text=text)],
            )
            for role, text in turns
        ]
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction or None,
                max_output_tokens=self.max_tokens,
            ),
        )
        return response.text or ""

    async def _file_part(self, file: FilePart) -> types.Part:
        if file.is_pdf or file.mime_type == "text/plain":
            return types.Part.from_bytes(data=file.raw_bytes, mime_type=file.mime_type)
        text = await asyncio.to_thread(extract_text, file)
        return types.Part.from_text(text=f"Resume document:\n\n{text}")
