"""Export filename defaults."""

from __future__ import annotations

import re

PDF_EXTENSION = ".pdf"


def default_filename(full_name: str, extension: str = PDF_EXTENSION) -> str:
    """``Resume-Jane_Roe.pdf``; ``Resume.pdf`` when there is no name."""
    slug = re.sub(r"\s+", "_", full_name.strip())
    return f"Resume-{slug}{extension}" if slug else f"Resume{extension}"


def ensure_extension(filename: str, extension: str = PDF_EXTENSION) -> str:
    """Append ``extension`` unless the name already ends with it (any case)."""
    name = filename.strip().replace("/", "_").replace("\\", "_")
    if name.lower().endswith(extension.lower()):
        return name
    return f"{name}{extension}"


def resolve_filename(requested: str | None, full_name: str, extension: str = PDF_EXTENSION) -> str:
    """User override if given, otherwise the default, always with the extension."""
    if requested and requested.strip():
        return ensure_extension(requested, extension)
    return default_filename(full_name, extension)
