"""Page rotation for existing PDF files.

Rotation here is the ``/Rotate`` page property: the page content is left
untouched and viewers turn the page clockwise when displaying it. The
angle is absolute, so applying 90 to a page already at 270 yields 90.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .exceptions import InvalidRotationError, PdfRotationError, translate_errors
from .utils import PathLike, ensure_iterable, get_logger

LOGGER = get_logger("pdf_assembler.rotate")

VALID_ROTATIONS = (0, 90, 180, 270)
ROTATED_SUFFIX = "-rotated"


def validate_rotation(angle: Union[int, str]) -> int:
    """Return *angle* as an int, checking it is one of 0, 90, 180 or 270.

    Raises:
        InvalidRotationError: If *angle* is not a supported rotation
    """

    if isinstance(angle, bool):
        raise InvalidRotationError(f"Invalid rotation: {angle!r}")
    try:
        value = int(str(angle).strip())
    except ValueError:
        raise InvalidRotationError(f"Invalid rotation: {angle!r}") from None
    if value not in VALID_ROTATIONS:
        raise InvalidRotationError(
            f"Invalid rotation {value}: expected one of {', '.join(map(str, VALID_ROTATIONS))}"
        )
    return value


def rotated_path(path: PathLike) -> Path:
    """Return the sibling path used when a rotated PDF must not overwrite *path*.

    ``report.pdf`` becomes ``report-rotated.pdf``.
    """

    source = Path(path)
    return source.with_name(f"{source.stem}{ROTATED_SUFFIX}{source.suffix or '.pdf'}")


class RotationApplicator:
    """Sets the rotation of every page of PDF files."""

    def __init__(self, backend: Optional[PDFBackend] = None) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()
        self.pages_rotated = 0

    def rotate(self, pdf_path: PathLike, angle: int, overwrite: bool = False) -> Path:
        """Rotate all pages of *pdf_path* to *angle* and return the written path.

        The whole document is serialized in memory before a single write to
        either *pdf_path* (``overwrite=True``) or :func:`rotated_path`.
        """
        degrees = validate_rotation(angle)
        source_path = Path(pdf_path)
        destination = source_path if overwrite else rotated_path(source_path)

        with translate_errors(PdfRotationError):
            source = self.backend.load(str(source_path))
            writer = self.backend.new_writer(source)
            for page in writer.pages:
                page.rotation = degrees
            data = self.backend.serialize(writer)
            destination.write_bytes(data)

        self.pages_rotated += source.num_pages
        LOGGER.debug(
            "Rotated %d page(s) of %s to %d degrees into %s",
            source.num_pages,
            source_path,
            degrees,
            destination,
        )
        return destination

    def rotate_all(
        self,
        pdf_paths: Iterable[PathLike],
        angle: int,
        overwrite: bool = False,
        *,
        log: bool = False,
    ) -> List[Path]:
        """Rotate each PDF in turn; the first failure stops the run."""
        degrees = validate_rotation(angle)
        level = logging.INFO if log else logging.DEBUG
        written: List[Path] = []
        for pdf_path in ensure_iterable(pdf_paths):
            LOGGER.log(level, "Rotating %s by %d degrees", pdf_path, degrees)
            written.append(self.rotate(pdf_path, degrees, overwrite))
        return written


__all__ = [
    "VALID_ROTATIONS",
    "ROTATED_SUFFIX",
    "RotationApplicator",
    "rotated_path",
    "validate_rotation",
]
