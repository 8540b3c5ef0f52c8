"""
Type definitions and dataclasses for PDF Assembler.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple


class ImageFormat(str, Enum):
    """Raster formats accepted as page content."""

    PNG = "PNG"
    JPEG = "JPEG"


class Size(NamedTuple):
    """Width and height in PDF points."""

    width: float
    height: float


class Point(NamedTuple):
    """A position in page coordinates, origin at the bottom-left corner."""

    x: float
    y: float


@dataclass(frozen=True)
class PlacementRect:
    """
    Area an image is drawn into on its page.

    Attributes:
        x: Distance of the left edge from the left page border
        y: Distance of the bottom edge from the bottom page border
        width: Drawn image width
        height: Drawn image height
    """
    x: float
    y: float
    width: float
    height: float


@dataclass
class AssemblyResult:
    """
    Result of an images-to-PDF or merge operation.

    Attributes:
        output_path: Path of the written PDF
        operation: Type of operation performed ("images" or "merge")
        total_pages: Number of pages in the written PDF
        content_pages: Pages coming from the inputs (title page excluded)
        has_title_page: Whether a title page was prepended
        skipped: Inputs that were ignored (unsupported image formats)
    """
    output_path: Path
    operation: str
    total_pages: int
    content_pages: int
    has_title_page: bool = False
    skipped: List[Path] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"AssemblyResult(operation={self.operation}, pages={self.total_pages}, "
            f"skipped={len(self.skipped)})"
        )


@dataclass
class RotationResult:
    """
    Result of a rotation operation.

    Attributes:
        degrees: Absolute rotation applied to every page
        overwrite: Whether the sources were replaced in place
        files_written: Destination of every processed PDF, in input order
        pages_rotated: Total number of pages whose rotation was set
    """
    degrees: int
    overwrite: bool
    files_written: List[Path] = field(default_factory=list)
    pages_rotated: int = 0

    def __str__(self) -> str:
        return f"RotationResult(degrees={self.degrees}, files={len(self.files_written)})"


__all__ = [
    "ImageFormat",
    "Size",
    "Point",
    "PlacementRect",
    "AssemblyResult",
    "RotationResult",
]
