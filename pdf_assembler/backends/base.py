"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol


@dataclass
class BackendDocument:
    """Represents a loaded source PDF with backend-specific helpers."""

    num_pages: int
    file_size: int

    def iter_pages(self) -> Iterable[object]:
        raise NotImplementedError

    def get_page(self, index: int) -> object:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def load(self, pdf_path: str) -> BackendDocument:
        """Load a PDF file fully into memory and return a backend document wrapper."""

    def load_bytes(self, data: bytes, *, name: str = "<memory>") -> BackendDocument:
        """Wrap an in-memory PDF."""

    def new_writer(self, source: BackendDocument | None = None) -> object:
        """Return a backend writer instance, optionally cloned from *source*."""

    def serialize(self, writer: object) -> bytes:
        """Return the complete serialized PDF held by *writer*."""
