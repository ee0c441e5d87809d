"""Load uploaded resume files into base64 parts for the AI providers."""

from __future__ import annotations

import asyncio
import base64
import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt", ".md")

MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
    ".md": "text/markdown",
}

PDF_MIME = MIME_TYPES[".pdf"]
TEXT_MIMES = (MIME_TYPES[".txt"], MIME_TYPES[".md"])
WORD_MIMES = (MIME_TYPES[".doc"], MIME_TYPES[".docx"])


class UnsupportedDocumentError(ValueError):
    """The file cannot be read or turned into text."""


@dataclass(frozen=True)
class FilePart:
    """One uploaded file, base64 encoded."""

    mime_type: str
    base64_data: str
    filename: str = ""

    @property
    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.base64_data)

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == PDF_MIME

    @property
    def is_text(self) -> bool:
        return self.mime_type in TEXT_MIMES


def encode_file(file_path: str | Path, max_bytes: int | None = None) -> FilePart:
    """Read a PDF/DOC/DOCX/TXT/MD file and base64 encode it."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in ACCEPTED_EXTENSIONS:
        raise UnsupportedDocumentError(f"Unsupported file format: {path.suffix or path.name}")
    data = path.read_bytes()
    if not data:
        raise UnsupportedDocumentError(f"File is empty: {path.name}")
    if max_bytes is not None and len(data) > max_bytes:
        raise UnsupportedDocumentError(
            f"File is too large: {len(data)} bytes (limit {max_bytes})"
        )
    logger.debug("Encoded %s (%d bytes)", path.name, len(data))
    return FilePart(
        mime_type=MIME_TYPES[suffix],
        base64_data=base64.b64encode(data).decode("ascii"),
        filename=path.name,
    )


async def load_file_part(file_path: str | Path, max_bytes: int | None = None) -> FilePart:
    """Encode a file off the event loop."""
    return await asyncio.to_thread(encode_file, file_path, max_bytes)


def extract_text(part: FilePart) -> str:
    """Turn a file part into plain text for providers that cannot read it natively."""
    data = part.raw_bytes
    if part.is_text:
        return clean_text(data.decode("utf-8", errors="replace"))
    if part.mime_type in WORD_MIMES:
        return _docx_text(data, part.filename)
    if part.is_pdf:
        return _pdf_text(data)
    raise UnsupportedDocumentError(f"Cannot extract text from {part.mime_type}")


def clean_text(text: str) -> str:
    """Strip unicode artifacts and collapse whitespace in plain-text resumes."""
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    # Normalize bullets (●, •, ◦, ◆, ■, ▪, ★, ○ → -)
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)
    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _docx_text(data: bytes, filename: str) -> str:
    from docx import Document

    try:
        doc = Document(io.BytesIO(data))
    except Exception as exc:
        # Legacy binary .doc files are not zip containers
        raise UnsupportedDocumentError(
            f"Could not read {filename or 'Word document'}; save it as .docx or PDF"
        ) from exc
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts)


def _pdf_text(data: bytes) -> str:
    import fitz  # pymupdf

    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)
