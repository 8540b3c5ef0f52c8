"""High level entry points: images to PDF, merge and rotate.

Each function is one complete conversion. The output file is written
only after the whole document has been assembled in memory, and every
error that escapes is a :class:`~pdf_assembler.exceptions.PDFAssemblerException`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, LayoutConfig
from .document import AssemblyDocument
from .exceptions import PDFAssemblerException, PdfMergeError, translate_errors
from .merger import DocumentMerger
from .raster import RasterPageBuilder
from .rotation import RotationApplicator, validate_rotation
from .title import TitlePageBuilder
from .types import AssemblyResult, RotationResult
from .utils import PathLike, ensure_iterable, get_logger
from .writer import write_document

LOGGER = get_logger("pdf_assembler")


def images_to_pdf(
    images: Iterable[PathLike],
    output: PathLike,
    title: Optional[str] = None,
    rotation: int = 0,
    *,
    config: Optional[LayoutConfig] = None,
    log: bool = False,
) -> AssemblyResult:
    """Create a PDF at *output* with one page per image.

    Args:
        images: Image paths in page order; non PNG/JPEG paths are skipped.
        output: Destination PDF path.
        title: Optional text for a leading title page.
        rotation: Clockwise rotation (0, 90, 180 or 270) applied to the
            pixels of every image before it is placed.
        config: Layout settings, :data:`DEFAULT_CONFIG` when omitted.
        log: Promote per-page diagnostics to INFO.

    Raises:
        InvalidRotationError: If *rotation* is not supported
        ImageEmbedError: If an image cannot be decoded or drawn
        PdfWriteError: If the PDF cannot be written
    """

    layout = config or DEFAULT_CONFIG
    degrees = validate_rotation(rotation)
    image_paths = ensure_iterable(images)

    with translate_errors(PDFAssemblerException):
        document = AssemblyDocument()
        has_title = TitlePageBuilder(layout).add_title_page(document, title)
        builder = RasterPageBuilder(layout)
        content_pages = builder.add_images(
            document,
            image_paths,
            rotation=degrees,
            first_page_number=2 if has_title else 1,
            log=log,
        )
        if not content_pages:
            LOGGER.warning("None of the %d input(s) is a PNG or JPG image", len(image_paths))
        output_path = write_document(document, output)

    LOGGER.info("Created PDF with %d images at %s", content_pages, output_path)
    return AssemblyResult(
        output_path=output_path,
        operation="images",
        total_pages=document.page_count,
        content_pages=content_pages,
        has_title_page=has_title,
        skipped=list(builder.skipped),
    )


def merge_pdfs(
    pdfs: Iterable[PathLike],
    output: PathLike,
    title: Optional[str] = None,
    *,
    config: Optional[LayoutConfig] = None,
    log: bool = False,
) -> AssemblyResult:
    """Concatenate *pdfs*, in order, into a single PDF at *output*.

    Raises:
        PdfMergeError: If no input is given or pages cannot be copied
        InvalidPDFError: If an input is not a readable PDF
        PdfWriteError: If the PDF cannot be written
    """

    pdf_paths = ensure_iterable(pdfs)
    if not pdf_paths:
        raise PdfMergeError("No input PDFs provided")

    with translate_errors(PDFAssemblerException):
        document = AssemblyDocument()
        has_title = TitlePageBuilder(config or DEFAULT_CONFIG).add_title_page(document, title)
        content_pages = DocumentMerger(document.backend).add_documents(document, pdf_paths, log=log)
        output_path = write_document(document, output)

    LOGGER.info("Merged %d PDFs into %s", len(pdf_paths), output_path)
    return AssemblyResult(
        output_path=output_path,
        operation="merge",
        total_pages=document.page_count,
        content_pages=content_pages,
        has_title_page=has_title,
    )


def rotate_pdfs(
    pdfs: Iterable[PathLike],
    degrees: int = 180,
    overwrite: bool = False,
    *,
    log: bool = False,
) -> RotationResult:
    """Set the rotation of every page of every PDF in *pdfs* to *degrees*.

    Files are handled one after another and the first failure stops the
    run. With ``overwrite=False`` each result goes to ``<name>-rotated.pdf``.

    Raises:
        InvalidRotationError: If *degrees* is not supported
        PdfRotationError: If a PDF cannot be rotated or written
    """

    angle = validate_rotation(degrees)
    pdf_paths = ensure_iterable(pdfs)

    with translate_errors(PDFAssemblerException):
        applicator = RotationApplicator()
        written = applicator.rotate_all(pdf_paths, angle, overwrite, log=log)

    LOGGER.info("Rotated %d PDF(s) to %d degrees", len(written), angle)
    return RotationResult(
        degrees=angle,
        overwrite=overwrite,
        files_written=written,
        pages_rotated=applicator.pages_rotated,
    )


async def images_to_pdf_async(
    images: Iterable[PathLike],
    output: PathLike,
    title: Optional[str] = None,
    rotation: int = 0,
    *,
    config: Optional[LayoutConfig] = None,
    log: bool = False,
) -> AssemblyResult:
    """Coroutine form of :func:`images_to_pdf`, run in a worker thread."""

    return await asyncio.to_thread(
        images_to_pdf, ensure_iterable(images), output, title, rotation, config=config, log=log
    )


async def merge_pdfs_async(
    pdfs: Iterable[PathLike],
    output: PathLike,
    title: Optional[str] = None,
    *,
    config: Optional[LayoutConfig] = None,
    log: bool = False,
) -> AssemblyResult:
    """Coroutine form of :func:`merge_pdfs`, run in a worker thread."""

    return await asyncio.to_thread(merge_pdfs, ensure_iterable(pdfs), output, title, config=config, log=log)


async def rotate_pdfs_async(
    pdfs: Iterable[PathLike],
    degrees: int = 180,
    overwrite: bool = False,
    *,
    log: bool = False,
) -> RotationResult:
    """Coroutine form of :func:`rotate_pdfs`, run in a worker thread."""

    return await asyncio.to_thread(rotate_pdfs, ensure_iterable(pdfs), degrees, overwrite, log=log)


__all__ = [
    "images_to_pdf",
    "merge_pdfs",
    "rotate_pdfs",
    "images_to_pdf_async",
    "merge_pdfs_async",
    "rotate_pdfs_async",
]
