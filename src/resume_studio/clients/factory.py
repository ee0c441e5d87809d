"""Process-wide AI provider selection."""

from __future__ import annotations

import logging
from typing import Callable

from resume_studio.clients.anthropic_provider import AnthropicProvider
from resume_studio.clients.base import AIProvider
from resume_studio.clients.gemini_provider import GeminiProvider
from resume_studio.clients.openai_provider import OpenAIProvider
from resume_studio.config import AIConfig, load_config
from resume_studio.errors import AIError

logger = logging.getLogger(__name__)

_BUILDERS: dict[str, Callable[[AIConfig, str | None], AIProvider]] = {
    "anthropic": lambda cfg, key: AnthropicProvider(
        api_key=key,
        model=cfg.anthropic_model,
        timeout=cfg.timeout,
        max_tokens=cfg.max_tokens,
        temperature=cfg.temperature,
    ),
    "openai": lambda cfg, key: OpenAIProvider(
        api_key=key,
        model=cfg.openai_model,
        timeout=cfg.timeout,
        max_tokens=cfg.max_tokens,
        temperature=cfg.temperature,
    ),
    "gemini": lambda cfg, key: GeminiProvider(
        api_key=key,
        model=cfg.gemini_model,
        timeout=cfg.timeout,
        max_tokens=cfg.max_tokens,
        temperature=cfg.temperature,
    ),
}

_provider: AIProvider | None = None


def create_ai_provider(config: AIConfig, api_key: str | None = None) -> AIProvider:
    """Build the provider named by ``config.provider``."""
    builder = _BUILDERS.get(config.provider)
    if builder is None:
        raise AIError(f"Unknown AI provider: {config.provider}")
    try:
        provider = builder(config, api_key)
    except Exception as exc:
        logger.error("Could not initialise %s provider", config.provider, exc_info=True)
        raise AIError(f"Could not initialise provider: {exc}", config.provider) from exc
    logger.info("AI provider: %s (%s)", provider.name, provider.model)
    return provider


def get_ai_provider(config: AIConfig | None = None) -> AIProvider:
    """Return the process-wide provider, building it on first use."""
    global _provider
    if _provider is None:
        _provider = create_ai_provider(config or load_config().ai)
    return _provider


def set_ai_provider(provider: AIProvider) -> None:
    global _provider
    _provider = provider


def reset_ai_provider() -> None:
    global _provider
    _provider = None
