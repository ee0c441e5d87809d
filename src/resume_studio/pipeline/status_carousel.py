"""Rotating status messages shown while a long AI call runs."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

LOADING_MESSAGES = (
    "Warming up the AI engine...",
    "Analyzing resume layout and structure...",
    "Extracting key sections: experience, education...",
    "Identifying skills and expertise...",
    "Cross-referencing achievements and roles...",
    "Finalizing the structured data...",
    "Almost there, polishing the details...",
)


class StatusCarousel:
    """Calls ``on_message`` with the next message every ``interval`` seconds until stopped."""

    def __init__(
        self,
        on_message: Callable[[str], None],
        messages: Sequence[str] = LOADING_MESSAGES,
        interval: float = 2.5,
    ):
        if not messages:
            raise ValueError("StatusCarousel needs at least one message")
        self.on_message = on_message
        self.messages = tuple(messages)
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Show the first message now and schedule the rest. Needs a running loop."""
        if self.running:
            return
        self._emit(0)
        self._task = asyncio.get_running_loop().create_task(self._rotate())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _rotate(self) -> None:
        index = 0
        while True:
            await asyncio.sleep(self.interval)
            index = (index + 1) % len(self.messages)
            self._emit(index)

    def _emit(self, index: int) -> None:
        try:
            self.on_message(self.messages[index])
        except Exception:
            logger.error("Status callback failed", exc_info=True)
