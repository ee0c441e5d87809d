"""AI import: uploaded file -> provider -> normalizer -> store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from resume_studio.clients.base import AIProvider
from resume_studio.clients.factory import get_ai_provider
from resume_studio.config import ImportConfig
from resume_studio.errors import AIError, ImportBusyError, IngestionFailure
from resume_studio.models.resume import ResumeData
from resume_studio.parsers.resume_file import FilePart, UnsupportedDocumentError, load_file_part
from resume_studio.pipeline.normalizer import ingest
from resume_studio.pipeline.status_carousel import StatusCarousel
from resume_studio.store.resume_store import ResumeStore

logger = logging.getLogger(__name__)


class ResumeImporter:
    """Runs one AI import at a time against a store.

    The store is replaced only after the provider call and normalization
    both succeed; any failure raises IngestionFailure and leaves it untouched.
    A second import while one is running raises ImportBusyError.
    """

    def __init__(
        self,
        store: ResumeStore,
        provider: AIProvider | None = None,
        *,
        config: ImportConfig | None = None,
        on_status: Callable[[str], None] | None = None,
    ):
        self.store = store
        self.provider = provider if provider is not None else get_ai_provider()
        self.config = config or ImportConfig()
        self.on_status = on_status or (lambda message: None)
        self._busy = False
        self._carousel: StatusCarousel | None = None

    @property
    def is_busy(self) -> bool:
        return self._busy

    async def import_file(self, file_path: str | Path) -> ResumeData:
        """Encode a PDF/DOC/DOCX/TXT/MD file and import it."""
        with self._running():
            try:
                part = await load_file_part(file_path, self.config.max_file_mb * 1024 * 1024)
            except (OSError, UnsupportedDocumentError) as exc:
                logger.error("Could not read %s: %s", file_path, exc)
                raise IngestionFailure(f"Could not read {file_path}: {exc}") from exc
            return await self._parse_and_commit(part)

    async def import_part(self, part: FilePart) -> ResumeData:
        """Import an already encoded file."""
        with self._running():
            return await self._parse_and_commit(part)

    async def _parse_and_commit(self, part: FilePart) -> ResumeData:
        try:
            raw = await self.provider.parse_resume(part)
        except AIError as exc:
            logger.error("AI parsing failed for %s: %s", part.filename or part.mime_type, exc)
            raise IngestionFailure(str(exc)) from exc
        return ingest(raw, self.store)

    @contextmanager
    def _running(self) -> Iterator[None]:
        if self._busy:
            raise ImportBusyError()
        self._busy = True
        carousel = self._carousel = StatusCarousel(
            self.on_status, interval=self.config.carousel_interval
        )
        carousel.start()
        try:
            yield
        finally:
            carousel.stop()
            self._busy = False
