"""Utility helpers shared by PDF Assembler modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = "pdf_assembler") -> logging.Logger:
    """Return *name*'s logger, attaching a console handler the first time."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path*.

    This helper normalises any string-like path and expands user-home
    references. Relative paths are resolved relative to the current
    working directory.
    """

    resolved = Path(path).expanduser()
    try:
        return resolved.resolve(strict=False)
    except FileNotFoundError:  # pragma: no cover - defensive
        return resolved


def ensure_iterable(paths: Iterable[PathLike]) -> list[Path]:
    """Validate and convert an iterable of paths to :class:`Path` objects."""

    if isinstance(paths, (str, Path)):
        paths = [paths]
    return [ensure_path(path) for path in paths]


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


__all__ = ["PathLike", "LOG_FORMAT", "get_logger", "ensure_path", "ensure_iterable", "format_file_size"]
