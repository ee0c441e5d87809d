"""Fixtures for export tests."""

from __future__ import annotations

import pytest

from resume_studio.export.rasterizer import RasterImage


def make_png(width: int, height: int) -> bytes:
    import fitz

    pixmap = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, width, height), False)
    pixmap.clear_with(255)
    return pixmap.tobytes("png")


class FakeRasterizer:
    """Returns a fixed white image and records every capture."""

    def __init__(self, width: int = 85, height: int = 220):
        self.image = RasterImage(png=make_png(width, height), width=width, height=height)
        self.calls = []

    def capture(self, snapshot, scale):
        self.calls.append((snapshot, scale))
        return self.image


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    return FakeRasterizer()


@pytest.fixture
def png_factory():
    return make_png
