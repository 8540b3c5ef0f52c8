"""In-memory output document shared by the page builders."""

from __future__ import annotations

from typing import List, Optional

from pypdf import PageObject

from .backends import PypdfBackend
from .backends.base import PDFBackend


class AssemblyDocument:
    """Ordered collection of pages waiting to be serialized.

    One instance belongs to exactly one conversion: the builders append
    pages to it in order and :func:`pdf_assembler.writer.write_document`
    serializes it once at the end.
    """

    def __init__(self, *, backend: Optional[PDFBackend] = None) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()
        self._writer = self.backend.new_writer()

    # ------------------------------------------------------------------
    # Page access
    # ------------------------------------------------------------------
    @property
    def pages(self) -> List[PageObject]:
        return list(self._writer.pages)

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    def __len__(self) -> int:
        return self.page_count

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_page(self, page: PageObject) -> PageObject:
        """Append *page* and return the copy now owned by this document."""
        return self._writer.add_page(page)

    def to_bytes(self) -> bytes:
        return self.backend.serialize(self._writer)


__all__ = ["AssemblyDocument"]
