"""Output writer: serialize an assembled document and store it on disk."""

from __future__ import annotations

from pathlib import Path

from .document import AssemblyDocument
from .exceptions import PdfWriteError
from .utils import PathLike, ensure_path, get_logger

LOGGER = get_logger("pdf_assembler.writer")


def write_document(document: AssemblyDocument, output: PathLike) -> Path:
    """Write *document* to *output* and return the resolved path.

    The document is fully serialized before the file is opened, so a
    serialization failure never leaves a partial file behind.

    Raises:
        PdfWriteError: If serialization or the write fails
    """

    output_path = ensure_path(output)

    try:
        data = document.to_bytes()
    except Exception as exc:
        LOGGER.error("Failed to serialize PDF for %s: %s", output_path, exc)
        raise PdfWriteError(str(exc) or f"Failed to serialize PDF for {output_path}") from exc

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as exc:
        LOGGER.error("Failed to write PDF to %s: %s", output_path, exc)
        raise PdfWriteError(f"Failed to write PDF to {output_path}: {exc}") from exc

    LOGGER.info("Wrote %d page(s) to %s", document.page_count, output_path)
    return output_path


__all__ = ["write_document"]
