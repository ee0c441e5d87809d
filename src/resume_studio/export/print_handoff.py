"""Hand a print-ready copy of the preview to the host browser's print dialog."""

from __future__ import annotations

import logging
import tempfile
import webbrowser
from pathlib import Path
from typing import Protocol

from jinja2 import Environment
from markupsafe import Markup

from resume_studio.templates.preview import PreviewSnapshot

logger = logging.getLogger(__name__)

# 210mm at 96 CSS px per inch
A4_WIDTH_PX = 210 / 25.4 * 96

PRINT_DOCUMENT = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
{% for css in stylesheets %}
<style>{{ css }}</style>
{% endfor %}
<style>
@page { size: A4; margin: 0; }
html, body { margin: 0; padding: 0; background: #ffffff; }
body { width: 210mm; -webkit-print-color-adjust: exact; print-color-adjust: exact; }
.print-root { width: {{ width_px }}px; transform: scale({{ scale }}); transform-origin: top left; }
</style>
</head>
<body>
<div class="print-root">
{{ markup }}
</div>
<script>
window.addEventListener("load", function () {
  setTimeout(function () { window.focus(); window.print(); }, {{ settle_ms }});
});
</script>
</body>
</html>
"""

_env = Environment(autoescape=True)


class PrintHost(Protocol):
    def open(self, document: Path) -> bool: ...


class BrowserPrintHost:
    """Opens the print document in the default web browser."""

    def open(self, document: Path) -> bool:
        return webbrowser.open(document.resolve().as_uri())


def print_scale(preview_width_px: int) -> float:
    """Uniform scale that maps the preview width onto the A4 page width."""
    return A4_WIDTH_PX / preview_width_px


def build_print_document(snapshot: PreviewSnapshot, settle_delay: float) -> str:
    """Standalone A4 document: preview markup, its stylesheets, and a delayed print() call."""
    return _env.from_string(PRINT_DOCUMENT).render(
        title=snapshot.title,
        stylesheets=[Markup(css) for css in snapshot.stylesheets],
        markup=Markup(snapshot.markup),
        width_px=snapshot.width_px,
        scale=f"{print_scale(snapshot.width_px):.6f}",
        settle_ms=int(settle_delay * 1000),
    )


def hand_off(
    snapshot: PreviewSnapshot,
    settle_delay: float,
    host: PrintHost,
    directory: Path | None = None,
) -> Path:
    """Write the print document and open it. Fire-and-forget: there is no print callback."""
    target_dir = directory or Path(tempfile.mkdtemp(prefix="resume-print-"))
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / "resume-print.html"
    path.write_text(build_print_document(snapshot, settle_delay), encoding="utf-8")
    if not host.open(path):
        raise RuntimeError("No browser available to open the print document")
    logger.info("Print document handed off: %s", path)
    return path


class PrintHandoffExporter:
    """Print strategy: the host browser's print dialog produces the PDF."""

    def __init__(
        self,
        host: PrintHost | None = None,
        *,
        settle_delay: float = 0.5,
        directory: Path | None = None,
    ):
        self.host = host or BrowserPrintHost()
        self.settle_delay = settle_delay
        self.directory = directory

    def hand_off(self, snapshot: PreviewSnapshot) -> Path:
        return hand_off(snapshot, self.settle_delay, self.host, self.directory)
