"""Resume templates and the live preview."""

from resume_studio.templates.preview import LivePreview, PreviewSnapshot
from resume_studio.templates.registry import TemplateEntry, TemplateRegistry, default_registry

__all__ = [
    "LivePreview",
    "PreviewSnapshot",
    "TemplateEntry",
    "TemplateRegistry",
    "default_registry",
]
