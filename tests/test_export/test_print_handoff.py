"""Tests for the print handoff document."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from resume_studio.export.print_handoff import (
    A4_WIDTH_PX,
    BrowserPrintHost,
    PrintHandoffExporter,
    build_print_document,
    print_scale,
)
from resume_studio.templates.preview import PreviewSnapshot

SNAPSHOT = PreviewSnapshot(
    markup='<div class="resume">Jane &amp; Roe</div>',
    stylesheets=("body { color: #333; }", ".resume > h1 { font-size: 20px; }"),
    width_px=816,
    title="Jane Roe",
)


class TestPrintDocument:
    def test_scale_maps_preview_onto_a4(self):
        assert print_scale(816) == pytest.approx(A4_WIDTH_PX / 816)
        assert print_scale(816) < 1

    def test_document_contents(self):
        html = build_print_document(SNAPSHOT, settle_delay=0.5)
        assert "@page { size: A4; margin: 0; }" in html
        assert "print-color-adjust: exact" in html
        assert "window.print()" in html
        assert "}, 500);" in html
        assert "<title>Jane Roe</title>" in html
        # Markup and stylesheets are carried verbatim
        assert '<div class="resume">Jane &amp; Roe</div>' in html
        assert ".resume > h1 { font-size: 20px; }" in html
        assert f"scale({print_scale(816):.6f})" in html


class TestPrintHandoffExporter:
    def test_writes_document_and_opens_it(self, tmp_path):
        host = MagicMock()
        host.open.return_value = True
        exporter = PrintHandoffExporter(host, settle_delay=0.2, directory=tmp_path)

        path = exporter.hand_off(SNAPSHOT)

        assert path.parent == tmp_path
        assert "window.print()" in path.read_text(encoding="utf-8")
        host.open.assert_called_once_with(path)

    def test_no_browser_raises(self, tmp_path):
        host = MagicMock()
        host.open.return_value = False
        with pytest.raises(RuntimeError, match="No browser"):
            PrintHandoffExporter(host, directory=tmp_path).hand_off(SNAPSHOT)

    def test_browser_host_opens_file_uri(self, tmp_path):
        path = tmp_path / "doc.html"
        path.write_text("x")
        with patch("resume_studio.export.print_handoff.webbrowser.open", return_value=True) as mock_open:
            assert BrowserPrintHost().open(path)
        assert mock_open.call_args.args[0].startswith("file://")
