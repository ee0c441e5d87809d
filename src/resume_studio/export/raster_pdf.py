"""Assemble a PDF from a raster image and a page plan using fpdf2."""

from __future__ import annotations

import logging
from io import BytesIO

from fpdf import FPDF

from resume_studio.export.pagination import LETTER, PageSize, PaginationMode, Placement, plan_pages
from resume_studio.export.rasterizer import PyMuPDFRasterizer, RasterImage, Rasterizer
from resume_studio.templates.preview import PreviewSnapshot

logger = logging.getLogger(__name__)


def build_pdf(image: RasterImage, mode: PaginationMode, page: PageSize) -> tuple[bytes, int]:
    """Lay ``image`` out per ``mode`` and return (pdf bytes, page count)."""
    placements = plan_pages(image.width, image.height, page, mode)
    return draw_placements(image, placements, page), len(placements)


def draw_placements(image: RasterImage, placements: list[Placement], page: PageSize) -> bytes:
    pdf = FPDF(orientation="portrait", unit="in", format=page.name)
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(0, 0, 0)
    for placement in placements:
        pdf.add_page()
        # Parts of the image outside the page are clipped by the page box
        pdf.image(
            BytesIO(image.png),
            x=placement.x,
            y=placement.y,
            w=placement.width,
            h=placement.height,
        )
    logger.debug("Built %d-page %s PDF", len(placements), page.name)
    return bytes(pdf.output())


class RasterPdfExporter:
    """Capture the preview through a rasterizer and paginate it into a PDF."""

    def __init__(
        self,
        rasterizer: Rasterizer | None = None,
        *,
        mode: PaginationMode = PaginationMode.TILE,
        page: PageSize = LETTER,
        scale: float = 3.0,
    ):
        self.rasterizer = rasterizer or PyMuPDFRasterizer()
        self.mode = PaginationMode(mode)
        self.page = page
        self.scale = scale

    def render(self, snapshot: PreviewSnapshot) -> tuple[bytes, int]:
        """Blocking: capture then assemble. Returns (pdf bytes, page count)."""
        image = self.rasterizer.capture(snapshot, self.scale)
        return build_pdf(image, self.mode, self.page)
