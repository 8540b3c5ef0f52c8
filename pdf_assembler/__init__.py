"""
PDF Assembler - Build PDF documents from images and other PDFs.

This library turns a folder of PNG/JPEG images into a paginated PDF,
concatenates PDFs into one document and sets the rotation of PDF pages.

Quick Start:
    >>> from pdf_assembler import images_to_pdf, merge_pdfs, rotate_pdfs
    >>> images_to_pdf(['scan-1.png', 'scan-2.jpg'], 'scans.pdf', title='Scans')
    >>> merge_pdfs(['a.pdf', 'b.pdf'], 'merged.pdf')
    >>> rotate_pdfs(['merged.pdf'], 90)

Entry Points:
    - images_to_pdf / images_to_pdf_async: One image per page
    - merge_pdfs / merge_pdfs_async: Concatenate PDFs in order
    - rotate_pdfs / rotate_pdfs_async: Set every page's rotation

Building Blocks:
    - LayoutConfig: Page size, margins and fonts
    - AssemblyDocument: In-memory output document
    - RasterPageBuilder, TitlePageBuilder, DocumentMerger, RotationApplicator

Exceptions:
    - PDFAssemblerException: Base exception
    - ValidationError / NoInputsError: Nothing to process
    - ImageEmbedError: Image could not be decoded or drawn
    - InvalidPDFError / EncryptedPDFError: Unusable source PDF
    - PdfMergeError, PdfRotationError, PdfWriteError: Operation failures

For CLI usage, use the 'pdf-assembler' command after installation.
"""

__version__ = "1.0.0"
__author__ = "PDF Assembler Contributors"
__license__ = "MIT"

# Entry points
from pdf_assembler.assembler import (
    images_to_pdf,
    images_to_pdf_async,
    merge_pdfs,
    merge_pdfs_async,
    rotate_pdfs,
    rotate_pdfs_async,
)

# Building blocks
from pdf_assembler.config import DEFAULT_CONFIG, LayoutConfig, page_size_by_name
from pdf_assembler.document import AssemblyDocument
from pdf_assembler.merger import DocumentMerger
from pdf_assembler.raster import RasterPageBuilder
from pdf_assembler.rotation import RotationApplicator, rotated_path, validate_rotation
from pdf_assembler.title import TitlePageBuilder
from pdf_assembler.writer import write_document

# Geometry and data types
from pdf_assembler.geometry import center_on, placement_for, scale_to_fit, select_orientation
from pdf_assembler.types import AssemblyResult, ImageFormat, PlacementRect, Point, RotationResult, Size

# Exceptions
from pdf_assembler.exceptions import (
    PDFAssemblerException,
    ValidationError,
    NoInputsError,
    InvalidRotationError,
    UnsupportedImageError,
    ImageEmbedError,
    InvalidPDFError,
    EncryptedPDFError,
    PdfMergeError,
    PdfRotationError,
    PdfWriteError,
)

__all__ = [
    # Entry points
    "images_to_pdf",
    "images_to_pdf_async",
    "merge_pdfs",
    "merge_pdfs_async",
    "rotate_pdfs",
    "rotate_pdfs_async",
    # Building blocks
    "DEFAULT_CONFIG",
    "LayoutConfig",
    "page_size_by_name",
    "AssemblyDocument",
    "DocumentMerger",
    "RasterPageBuilder",
    "RotationApplicator",
    "TitlePageBuilder",
    "rotated_path",
    "validate_rotation",
    "write_document",
    # Geometry and data types
    "select_orientation",
    "scale_to_fit",
    "center_on",
    "placement_for",
    "AssemblyResult",
    "ImageFormat",
    "PlacementRect",
    "Point",
    "RotationResult",
    "Size",
    # Exceptions
    "PDFAssemblerException",
    "ValidationError",
    "NoInputsError",
    "InvalidRotationError",
    "UnsupportedImageError",
    "ImageEmbedError",
    "InvalidPDFError",
    "EncryptedPDFError",
    "PdfMergeError",
    "PdfRotationError",
    "PdfWriteError",
    # Version info
    "__version__",
]
