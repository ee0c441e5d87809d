"""Tests for the rotating status messages."""

from __future__ import annotations

import asyncio

import pytest

from resume_studio.pipeline.status_carousel import LOADING_MESSAGES, StatusCarousel


class TestStatusCarousel:
    def test_seven_messages(self):
        assert len(LOADING_MESSAGES) == 7
        assert LOADING_MESSAGES[0] == "Warming up the AI engine..."

    def test_empty_messages_rejected(self):
        with pytest.raises(ValueError):
            StatusCarousel(lambda m: None, messages=[])

    async def test_first_message_emitted_on_start(self):
        seen = []
        carousel = StatusCarousel(seen.append, interval=10)
        carousel.start()
        try:
            assert seen == [LOADING_MESSAGES[0]]
            assert carousel.running
        finally:
            carousel.stop()

    async def test_rotates_and_wraps(self):
        seen = []
        carousel = StatusCarousel(seen.append, messages=["a", "b"], interval=0.01)
        carousel.start()
        await asyncio.sleep(0.08)
        carousel.stop()
        assert seen[:4] == ["a", "b", "a", "b"]

    async def test_stop_halts_rotation(self):
        seen = []
        carousel = StatusCarousel(seen.append, messages=["a", "b"], interval=0.01)
        carousel.start()
        carousel.stop()
        assert not carousel.running
        await asyncio.sleep(0.05)
        assert seen == ["a"]

    async def test_failing_callback_does_not_stop_rotation(self):
        calls = []

        def on_message(message):
            calls.append(message)
            raise RuntimeError("ui gone")

        carousel = StatusCarousel(on_message, messages=["a", "b"], interval=0.01)
        carousel.start()
        await asyncio.sleep(0.05)
        carousel.stop()
        assert len(calls) >= 2
