"""Pull a JSON object out of free-form model output."""

from __future__ import annotations

import json


def extract_json(text: str) -> dict:
    """Extract a JSON object from model output.

    Tries in order:
    1. json.loads on the whole text
    2. The body of a ```json fenced block
    3. The span from the first '{' to the last '}'
    4. A truncated object closed with the missing brackets/braces

    Raises ValueError when none of these yields a JSON object.
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected model text, got {type(text).__name__}")
    text = text.strip()

    candidates = [text]
    unfenced = _strip_code_fences(text)
    if unfenced != text:
        candidates.append(unfenced)

    for candidate in candidates:
        for loader in (json.loads, _load_braces, _load_truncated):
            try:
                value = loader(candidate)
            except (json.JSONDecodeError, TypeError):
                continue
            if isinstance(value, dict):
                return value

    raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    lines = text.split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def _load_braces(text: str) -> dict | None:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return json.loads(text[start : end + 1])


def _load_truncated(text: str) -> dict | None:
    """Close the brackets and braces a cut-off response left open."""
    start = text.find("{")
    if start == -1:
        return None
    candidate = text[start:].rstrip().rstrip(",")
    open_braces = candidate.count("{") - candidate.count("}")
    open_brackets = candidate.count("[") - candidate.count("]")
    if open_braces <= 0 and open_brackets <= 0:
        return None

    try:
        return json.loads(candidate + "]" * max(0, open_brackets) + "}" * open_braces)
    except json.JSONDecodeError:
        pass

    # Cut back to the last complete string and close from there
    last_quote = candidate.rfind('"')
    if last_quote <= 0:
        return None
    truncated = candidate[: last_quote + 1].rstrip().rstrip(",")
    ob = truncated.count("{") - truncated.count("}")
    ol = truncated.count("[") - truncated.count("]")
    return json.loads(truncated + "]" * max(0, ol) + "}" * max(0, ob))
