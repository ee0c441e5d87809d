"""Template registry: template id -> pure rendering function of ResumeData."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

import markdown
from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup, escape

from resume_studio.models.resume import ResumeData

logger = logging.getLogger(__name__)

HTML_TEMPLATES_DIR = Path(__file__).parent / "html"

Renderer = Callable[[ResumeData], str]


@dataclass(frozen=True)
class TemplateEntry:
    """A registered template.

    ``render`` returns the preview markup; ``stylesheets`` are the CSS texts
    that must accompany it wherever the markup is shown.
    """

    id: str
    name: str
    thumbnail: str
    render: Renderer
    stylesheets: tuple[str, ...] = field(default_factory=tuple)


class TemplateRegistry:
    """Closed mapping from template id to TemplateEntry."""

    def __init__(self):
        self._entries: dict[str, TemplateEntry] = {}

    def register(self, entry: TemplateEntry) -> None:
        if entry.id in self._entries:
            raise ValueError(f"Template already registered: {entry.id}")
        self._entries[entry.id] = entry

    def get(self, template_id: str) -> TemplateEntry:
        try:
            return self._entries[template_id]
        except KeyError:
            raise KeyError(
                f"Unknown template {template_id!r}; available: {', '.join(self._entries)}"
            ) from None

    def render(self, template_id: str, data: ResumeData) -> str:
        return self.get(template_id).render(data)

    def ids(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._entries

    def __iter__(self) -> Iterator[TemplateEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _markdown_filter(text: str) -> Markup:
    return Markup(markdown.markdown(str(escape(text)), extensions=["nl2br"]))


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(HTML_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["markdown"] = _markdown_filter
    return env


def jinja_renderer(env: Environment, template_name: str) -> Renderer:
    """Build a renderer from a Jinja2 template file."""
    template = env.get_template(template_name)

    def render(data: ResumeData) -> str:
        return template.render(resume=data)

    return render


def read_stylesheet(name: str) -> str:
    return (HTML_TEMPLATES_DIR / name).read_text(encoding="utf-8")


# (id, display name, thumbnail)
BUILTIN_TEMPLATES = (
    (
        "classic",
        "Classic Professional",
        "https://images.unsplash.com/photo-1586281380349-632531db7ed4?w=400&h=565&fit=crop&q=80",
    ),
    (
        "modern",
        "Modern Two-Column",
        "https://images.unsplash.com/photo-1598772433939-95330366606a?w=400&h=565&fit=crop&q=80",
    ),
    (
        "compact",
        "Compact",
        "https://images.unsplash.com/photo-1519389950473-47ba0277781c?w=400&h=565&fit=crop&q=80",
    ),
    (
        "minimalist",
        "Simple Minimalist",
        "https://images.unsplash.com/photo-1517547109322-1d5a7101897a?w=400&h=565&fit=crop&q=80",
    ),
)


def default_registry() -> TemplateRegistry:
    """Registry holding the built-in templates."""
    env = _environment()
    base_css = read_stylesheet("base.css")
    registry = TemplateRegistry()
    for template_id, name, thumbnail in BUILTIN_TEMPLATES:
        registry.register(
            TemplateEntry(
                id=template_id,
                name=name,
                thumbnail=thumbnail,
                render=jinja_renderer(env, f"{template_id}.html"),
                stylesheets=(base_css, read_stylesheet(f"{template_id}.css")),
            )
        )
    logger.debug("Registered templates: %s", ", ".join(registry.ids()))
    return registry
