"""Merge functionality for PDF Assembler."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .document import AssemblyDocument
from .exceptions import PdfMergeError, translate_errors
from .utils import PathLike, ensure_iterable, get_logger

LOGGER = get_logger("pdf_assembler.merge")


class DocumentMerger:
    """Appends every page of each source PDF to an :class:`AssemblyDocument`."""

    def __init__(self, backend: Optional[PDFBackend] = None) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()

    def add_documents(
        self,
        document: AssemblyDocument,
        pdf_paths: Iterable[PathLike],
        *,
        log: bool = False,
    ) -> int:
        """Append all pages of *pdf_paths*, in order, and return how many were added.

        Pages keep their own content, resources and rotation. Sources are
        never reordered and neither are the pages inside a source.

        Raises:
            InvalidPDFError: If a source cannot be parsed
            EncryptedPDFError: If a source cannot be opened without a password
            PdfMergeError: If copying pages fails for any other reason
        """
        level = logging.INFO if log else logging.DEBUG
        added = 0
        for pdf_path in ensure_iterable(pdf_paths):
            LOGGER.log(level, "Processing input PDF %s", pdf_path)
            with translate_errors(PdfMergeError):
                source = self.backend.load(str(pdf_path))
                for page_index, page in enumerate(source.iter_pages()):
                    LOGGER.debug("Adding page %s from %s", page_index, pdf_path)
                    document.add_page(page)
                    added += 1
        return added


__all__ = ["DocumentMerger"]
