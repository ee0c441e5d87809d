"""Tests for provider selection."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from resume_studio.clients import factory
from resume_studio.clients.anthropic_provider import AnthropicProvider
from resume_studio.clients.gemini_provider import GeminiProvider
from resume_studio.clients.openai_provider import OpenAIProvider
from resume_studio.config import AIConfig
from resume_studio.errors import AIError


@pytest.fixture(autouse=True)
def _reset_provider():
    factory.reset_ai_provider()
    yield
    factory.reset_ai_provider()


class TestCreateProvider:
    @pytest.mark.parametrize(
        "name, target, expected",
        [
            ("anthropic", "resume_studio.clients.anthropic_provider.anthropic.AsyncAnthropic", AnthropicProvider),
            ("openai", "resume_studio.clients.openai_provider.openai.AsyncOpenAI", OpenAIProvider),
            ("gemini", "resume_studio.clients.gemini_provider.genai.Client", GeminiProvider),
        ],
    )
    def test_builds_configured_provider(self, name, target, expected):
        with patch(target):
            provider = factory.create_ai_provider(AIConfig(provider=name), api_key="k")
        assert isinstance(provider, expected)
        assert provider.name == name

    def test_model_and_limits_from_config(self):
        config = AIConfig(anthropic_model="claude-test", timeout=12.0, max_tokens=100)
        with patch("resume_studio.clients.anthropic_provider.anthropic.AsyncAnthropic"):
            provider = factory.create_ai_provider(config)
        assert provider.model == "claude-test"
        assert provider.timeout == 12.0
        assert provider.max_tokens == 100

    def test_constructor_failure_wrapped(self):
        with patch(
            "resume_studio.clients.openai_provider.openai.AsyncOpenAI",
            side_effect=RuntimeError("missing api key"),
        ):
            with pytest.raises(AIError, match="missing api key"):
                factory.create_ai_provider(AIConfig(provider="openai"))


class TestProviderSingleton:
    def test_get_builds_once(self):
        with patch("resume_studio.clients.anthropic_provider.anthropic.AsyncAnthropic"):
            first = factory.get_ai_provider(AIConfig())
            second = factory.get_ai_provider()
        assert first is second

    def test_set_overrides(self):
        replacement = MagicMock()
        factory.set_ai_provider(replacement)
        assert factory.get_ai_provider() is replacement
