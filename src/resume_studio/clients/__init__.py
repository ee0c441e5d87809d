"""AI provider bindings behind one interface."""

from resume_studio.clients.base import AIProvider, ChatSession
from resume_studio.clients.factory import (
    create_ai_provider,
    get_ai_provider,
    reset_ai_provider,
    set_ai_provider,
)

__all__ = [
    "AIProvider",
    "ChatSession",
    "create_ai_provider",
    "get_ai_provider",
    "reset_ai_provider",
    "set_ai_provider",
]
