"""Capture the fully expanded preview as one raster image."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Protocol

from resume_studio.templates.preview import PreviewSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RasterImage:
    """A PNG image and its pixel size."""

    png: bytes
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


class Rasterizer(Protocol):
    def capture(self, snapshot: PreviewSnapshot, scale: float) -> RasterImage: ...


class PyMuPDFRasterizer:
    """Lays the preview out with fitz.Story on a single page exactly as tall
    as the content, then renders that page at ``scale`` times its size."""

    def capture(self, snapshot: PreviewSnapshot, scale: float) -> RasterImage:
        import fitz  # pymupdf

        story = fitz.Story(html=snapshot.markup, user_css="\n".join(snapshot.stylesheets))
        fit = story.fit_height(float(snapshot.width_px))
        if not fit.big_enough:
            raise RuntimeError("Preview content could not be laid out")
        rect = fit.rect

        buffer = io.BytesIO()
        writer = fitz.DocumentWriter(buffer)
        story.reset()
        device = writer.begin_page(rect)
        story.place(rect)
        story.draw(device)
        writer.end_page()
        writer.close()

        with fitz.open(stream=buffer.getvalue(), filetype="pdf") as doc:
            pixmap = doc[0].get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
            image = RasterImage(png=pixmap.tobytes("png"), width=pixmap.width, height=pixmap.height)
        logger.debug("Captured preview at %sx: %dx%d px", scale, image.width, image.height)
        return image
