"""Input discovery and output path resolution for the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .exceptions import NoInputsError
from .utils import PathLike, ensure_path, get_logger

LOGGER = get_logger("pdf_assembler.discovery")

IMAGE_PATTERNS = ("*.png", "*.jpg", "*.jpeg")
PDF_PATTERNS = ("*.pdf",)


def find_inputs(folder: PathLike, patterns: Iterable[str], kind: str = "files") -> List[Path]:
    """Return the files directly inside *folder* matching any of *patterns*.

    Paths are absolute and sorted lexicographically, which fixes the page
    order of the resulting document. A single file path is accepted too
    and returned as-is when it matches.

    Raises:
        NoInputsError: If nothing matches
    """

    root = ensure_path(folder)
    pattern_list = list(patterns)

    if root.is_file():
        matches = {root} if any(root.match(pattern) for pattern in pattern_list) else set()
    else:
        matches = {
            path
            for pattern in pattern_list
            for path in root.glob(pattern)
            if path.is_file()
        }

    if not matches:
        raise NoInputsError(f"Found no {kind}")

    found = sorted(matches, key=str)
    LOGGER.debug("Found %d %s in %s", len(found), kind, root)
    return found


def find_images(folder: PathLike) -> List[Path]:
    return find_inputs(folder, IMAGE_PATTERNS, kind="images")


def find_pdfs(folder: PathLike) -> List[Path]:
    return find_inputs(folder, PDF_PATTERNS, kind="PDFs")


def resolve_output_path(out_filename: Optional[str], in_folder: PathLike = ".") -> Path:
    """Return the absolute output path for a generated PDF.

    Without *out_filename* the input folder's name is used. The ``.pdf``
    extension is appended when missing.
    """

    filename = out_filename or ensure_path(in_folder).name or "output"
    if not filename.endswith(".pdf"):
        filename += ".pdf"
    return ensure_path(filename)


__all__ = [
    "IMAGE_PATTERNS",
    "PDF_PATTERNS",
    "find_inputs",
    "find_images",
    "find_pdfs",
    "resolve_output_path",
]
