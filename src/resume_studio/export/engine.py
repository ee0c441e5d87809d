"""Export engine: one export at a time, reported through status callbacks."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from resume_studio.config import ExportConfig
from resume_studio.errors import ExportBusyError, ExportFailure
from resume_studio.export.filename import resolve_filename
from resume_studio.export.pagination import PAGE_SIZES, PaginationMode
from resume_studio.export.print_handoff import PrintHandoffExporter, PrintHost
from resume_studio.export.raster_pdf import RasterPdfExporter
from resume_studio.export.rasterizer import Rasterizer
from resume_studio.templates.preview import LivePreview, PreviewSnapshot

logger = logging.getLogger(__name__)

PREVIEW_UNAVAILABLE_MESSAGE = "The resume preview is not available. Open the editor and try again."


class ExportStatus(str, Enum):
    STARTED = "started"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one export.

    For the rasterize strategy ``path`` is the written PDF and ``pdf`` its
    bytes. For the print strategy ``path`` is the handed-off HTML document.
    """

    strategy: str
    path: Path
    pages: int | None = None
    pdf: bytes | None = None


class ExportEngine:
    """Reads the live preview and produces a PDF or a print handoff.

    A request made while another is in flight raises ExportBusyError, so the
    capture steps of two requests never overlap.
    """

    def __init__(
        self,
        preview: LivePreview,
        config: ExportConfig | None = None,
        *,
        rasterizer: Rasterizer | None = None,
        print_host: PrintHost | None = None,
        on_status: Callable[[ExportStatus], None] | None = None,
    ):
        self.preview = preview
        self.config = config or ExportConfig()
        self.on_status = on_status
        self.raster = RasterPdfExporter(
            rasterizer,
            mode=PaginationMode(self.config.pagination),
            page=PAGE_SIZES[self.config.page_format],
            scale=self.config.scale,
        )
        self.printer = PrintHandoffExporter(print_host, settle_delay=self.config.print_settle_delay)
        self._busy = False
        self._busy_timer: asyncio.TimerHandle | None = None

    @property
    def is_busy(self) -> bool:
        return self._busy

    async def export(
        self,
        filename: str | None = None,
        output_dir: str | Path | None = None,
        strategy: str | None = None,
    ) -> ExportResult:
        """Run one export with the configured (or given) strategy.

        Raises:
            ExportBusyError: another export is still in flight
            ExportFailure: the preview is not mounted, or capture/handoff failed
        """
        if self._busy:
            raise ExportBusyError()
        strategy = strategy or self.config.strategy
        self._busy = True
        self._emit(ExportStatus.STARTED)
        try:
            snapshot = self.preview.snapshot()
            if snapshot is None:
                raise ExportFailure("Preview is not mounted", user_message=PREVIEW_UNAVAILABLE_MESSAGE)
            if strategy == "rasterize":
                result = await self._rasterize(snapshot, filename, Path(output_dir or Path.cwd()))
            elif strategy == "print":
                path = await asyncio.to_thread(self.printer.hand_off, snapshot)
                result = ExportResult(strategy="print", path=path)
            else:
                raise ExportFailure(f"Unknown export strategy: {strategy}")
        except ExportFailure:
            self._finish(ExportStatus.FAILED)
            raise
        except Exception as e:
            logger.error("Export failed: %s", e, exc_info=True)
            self._finish(ExportStatus.FAILED)
            raise ExportFailure(str(e)) from e

        if strategy == "print":
            # No completion signal exists for the print dialog
            loop = asyncio.get_running_loop()
            self._busy_timer = loop.call_later(
                self.config.print_busy_timeout, self._finish, ExportStatus.SUCCEEDED
            )
        else:
            self._finish(ExportStatus.SUCCEEDED)
        return result

    async def _rasterize(
        self, snapshot: PreviewSnapshot, filename: str | None, output_dir: Path
    ) -> ExportResult:
        # Let pending preview updates land before capture
        await asyncio.sleep(self.config.capture_delay)
        pdf, pages = await asyncio.to_thread(self.raster.render, snapshot)
        name = resolve_filename(filename, self.preview.store.get_state().personal_info.full_name)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / name
        path.write_bytes(pdf)
        logger.info("Exported %d-page PDF to %s", pages, path)
        return ExportResult(strategy="rasterize", path=path, pages=pages, pdf=pdf)

    def _finish(self, status: ExportStatus) -> None:
        self._busy_timer = None
        self._busy = False
        self._emit(status)

    def _emit(self, status: ExportStatus) -> None:
        if self.on_status is None:
            return
        try:
            self.on_status(status)
        except Exception:
            logger.exception("Export status callback failed")
