"""Live preview of the store's document through a registered template."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from markupsafe import escape

from resume_studio.models.resume import ResumeData
from resume_studio.store.resume_store import ResumeStore
from resume_studio.templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewSnapshot:
    """Markup and stylesheets of the preview at one moment, plus its pixel width."""

    markup: str
    stylesheets: tuple[str, ...]
    width_px: int
    title: str = "Resume"

    def document_html(self) -> str:
        """Standalone HTML document holding the fully expanded preview."""
        styles = "\n".join(f"<style>{css}</style>" for css in self.stylesheets)
        return (
            "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{escape(self.title)}</title>\n{styles}\n</head>\n"
            f"<body style=\"margin: 0; width: {self.width_px}px;\">\n{self.markup}\n</body>\n</html>\n"
        )


class LivePreview:
    """Re-renders whenever the store changes, while mounted."""

    def __init__(
        self,
        store: ResumeStore,
        registry: TemplateRegistry,
        template_id: str = "classic",
        width_px: int = 816,
    ):
        registry.get(template_id)  # fail fast on unknown ids
        self.store = store
        self.registry = registry
        self.template_id = template_id
        self.width_px = width_px
        self.markup: str | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def mount(self) -> None:
        if self.mounted:
            return
        self._unsubscribe = self.store.subscribe(self._render)
        self._render(self.store.get_state())

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.markup = None

    def set_template(self, template_id: str) -> None:
        self.registry.get(template_id)
        self.template_id = template_id
        if self.mounted:
            self._render(self.store.get_state())

    def snapshot(self) -> PreviewSnapshot | None:
        """The rendered preview, or None when it is not mounted."""
        if not self.mounted or self.markup is None:
            return None
        entry = self.registry.get(self.template_id)
        return PreviewSnapshot(
            markup=self.markup,
            stylesheets=entry.stylesheets,
            width_px=self.width_px,
            title=self.store.get_state().personal_info.full_name or "Resume",
        )

    def _render(self, data: ResumeData) -> None:
        self.markup = self.registry.render(self.template_id, data)
        logger.debug("Preview rendered with %s (%d chars)", self.template_id, len(self.markup))
