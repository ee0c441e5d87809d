"""Identifier generator for resume list items."""

from __future__ import annotations

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Return a time-ordered, collision-resistant id like ``id-1718000000000-k3j9x0q2a``."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(9))
    return f"id-{millis}-{suffix}"
