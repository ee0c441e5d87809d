"""Page geometry for laying a tall raster image onto fixed-size pages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class PaginationMode(str, Enum):
    TILE = "tile"
    FIT_ONE_PAGE = "fit_one_page"


@dataclass(frozen=True)
class PageSize:
    """Physical page size in inches."""

    name: str
    width: float
    height: float


LETTER = PageSize("letter", 8.5, 11.0)
A4 = PageSize("a4", 210 / 25.4, 297 / 25.4)
PAGE_SIZES = {LETTER.name: LETTER, A4.name: A4}


@dataclass(frozen=True)
class Placement:
    """Where the image is drawn on one page, in inches from the page's top-left."""

    page_index: int
    x: float
    y: float
    width: float
    height: float


# Slack for float error so an image exactly N pages tall yields N pages
_EPSILON = 1e-9


def plan_tiles(image_width: float, image_height: float, page: PageSize) -> list[Placement]:
    """Tile mode: one continuous strip scaled to page width, cut into pages.

    Page i draws the whole strip at y = -i * page.height, so the pages
    together paint [0, H) with no gaps or overlap. Always at least one page.
    """
    _check_dimensions(image_width, image_height)
    total_height = page.width * image_height / image_width
    page_count = max(1, math.ceil(total_height / page.height - _EPSILON))
    return [
        Placement(
            page_index=i,
            x=0.0,
            y=-i * page.height,
            width=page.width,
            height=total_height,
        )
        for i in range(page_count)
    ]


def plan_fit(image_width: float, image_height: float, page: PageSize) -> Placement:
    """Fit-to-one-page mode: uniform scale to fit the page, centered."""
    _check_dimensions(image_width, image_height)
    ratio = min(page.width / image_width, page.height / image_height)
    width = image_width * ratio
    height = image_height * ratio
    return Placement(
        page_index=0,
        x=(page.width - width) / 2,
        y=(page.height - height) / 2,
        width=width,
        height=height,
    )


def plan_pages(
    image_width: float, image_height: float, page: PageSize, mode: PaginationMode
) -> list[Placement]:
    if PaginationMode(mode) is PaginationMode.TILE:
        return plan_tiles(image_width, image_height, page)
    return [plan_fit(image_width, image_height, page)]


def _check_dimensions(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Image has no area: {width}x{height}")
