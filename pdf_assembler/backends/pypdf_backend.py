"""pypdf backend implementation for PDF Assembler."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import EncryptedPDFError, InvalidPDFError
from ..utils import get_logger
from .base import BackendDocument, PDFBackend

LOGGER = get_logger("pdf_assembler.backends")


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader

    def iter_pages(self) -> Iterable[object]:
        return iter(self.reader.pages)

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        return self.load_bytes(raw_bytes, name=str(pdf_path))

    def load_bytes(self, data: bytes, *, name: str = "<memory>") -> PypdfDocument:
        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {name}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {name}. Error: {exc}") from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF %s", name)
            try:
                status = reader.decrypt("")
            except Exception as exc:  # pragma: no cover - decrypt errors vary
                raise EncryptedPDFError(f"Unable to decrypt encrypted PDF: {name}") from exc
            if status == 0:
                raise EncryptedPDFError(f"PDF is encrypted and requires a password: {name}")

        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise InvalidPDFError(f"Unable to read pages of PDF: {name}. Error: {exc}") from exc

        return PypdfDocument(num_pages=num_pages, file_size=len(data), reader=reader)

    def new_writer(self, source: PypdfDocument | None = None) -> PdfWriter:
        if source is None:
            return PdfWriter()
        return PdfWriter(clone_from=source.reader)

    def serialize(self, writer: PdfWriter) -> bytes:
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()
