"""AI provider interface shared by every backend binding."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable

from resume_studio.errors import AIError, AIResponseError, AITimeoutError, AITransportError
from resume_studio.parsers.resume_file import FilePart, UnsupportedDocumentError

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """\
You are an expert resume parsing AI. Your sole purpose is to accurately extract \
information from a resume file and convert it into a structured JSON object based on \
the provided schema. You must handle various resume formats and layouts gracefully. \
Extract only what is present in the document and do not invent information. If a piece \
of information is not present, use an empty string, and use an empty array for any \
missing section."""

PARSE_INSTRUCTION = """\
Analyze the provided resume. Extract all information and structure it as a JSON object \
that adheres to the provided schema. If a section is missing (e.g., no projects), \
provide an empty array. Format dates concisely. Respond with JSON only."""

USER = "user"
MODEL = "model"


class ChatSession:
    """Multi-turn conversation with a fixed system instruction."""

    def __init__(self, provider: AIProvider, system_instruction: str):
        self.provider = provider
        self.system_instruction = system_instruction
        self.history: list[tuple[str, str]] = []  # (role, text), role is "user" | "model"

    async def send_message(self, message: str) -> str:
        """Send one user turn and return the model's reply.

        The turn is only recorded in the history when the call succeeds.
        """
        turns = [*self.history, (USER, message)]
        reply = await self.provider._call(
            "chat", self.provider._chat_turn(self.system_instruction, turns)
        )
        self.history = [*turns, (MODEL, reply)]
        return reply


class AIProvider(ABC):
    """Capability interface: parse a resume, generate text, hold a chat.

    Subclasses implement the underscore hooks; the public methods apply the
    timeout ceiling and translate every failure into an AIError.
    """

    name: str = "provider"
    transport_errors: tuple[type[BaseException], ...] = ()
    timeout_errors: tuple[type[BaseException], ...] = ()

    def __init__(
        self,
        model: str,
        *,
        timeout: float = 90.0,
        max_tokens: int = 8192,
        temperature: float = 0.0,
    ):
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def parse_resume(self, file: FilePart) -> dict:
        """Extract a partial ResumeData (list items without ids) from a file."""
        logger.info("Parsing %s with %s (%s)", file.filename or file.mime_type, self.name, self.model)
        data = await self._call("parse_resume", self._extract_resume(file))
        if not isinstance(data, dict):
            raise AIResponseError(
                f"Expected a JSON object, got {type(data).__name__}", self.name
            )
        return data

    async def generate_text(self, prompt: str) -> str:
        return await self._call("generate_text", self._generate(prompt))

    def start_chat(self, system_instruction: str) -> ChatSession:
        return ChatSession(self, system_instruction)

    async def _call(self, operation: str, request: Awaitable[Any]) -> Any:
        """Await a backend request under the timeout ceiling."""
        try:
            return await asyncio.wait_for(request, timeout=self.timeout)
        except AIError:
            raise
        except asyncio.TimeoutError as exc:
            logger.error("%s %s timed out after %.0fs", self.name, operation, self.timeout)
            raise AITimeoutError(f"{operation} exceeded {self.timeout:.0f}s", self.name) from exc
        except self.timeout_errors as exc:
            logger.error("%s %s timed out", self.name, operation, exc_info=True)
            raise AITimeoutError(f"{operation} timed out: {exc}", self.name) from exc
        except UnsupportedDocumentError as exc:
            raise AIError(f"Document could not be prepared: {exc}", self.name) from exc
        except self.transport_errors as exc:
            logger.error("%s %s failed", self.name, operation, exc_info=True)
            raise AITransportError(f"{operation} failed: {exc}", self.name) from exc
        except ValueError as exc:
            logger.error("%s %s returned unusable output", self.name, operation, exc_info=True)
            raise AIResponseError(f"{operation} returned unusable output: {exc}", self.name) from exc
        except Exception as exc:
            logger.error("%s %s failed", self.name, operation, exc_info=True)
            raise AITransportError(f"{operation} failed: {exc}", self.name) from exc

    @abstractmethod
    async def _extract_resume(self, file: FilePart) -> dict:
        """Run the schema-constrained extraction and return the parsed JSON."""

    @abstractmethod
    async def _generate(self, prompt: str) -> str:
        """Single-turn free text generation."""

    @abstractmethod
    async def _chat_turn(self, system_instruction: str, turns: list[tuple[str, str]]) -> str:
        """Answer the last user turn given the whole conversation."""
