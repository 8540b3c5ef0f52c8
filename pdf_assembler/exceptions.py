"""
Custom exceptions for PDF Assembler.

This module defines all custom exceptions used throughout the library,
together with the adapter that turns third-party failures into them.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Type


class PDFAssemblerException(Exception):
    """Base exception for all PDF Assembler errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF assembler error occurred."


class ValidationError(PDFAssemblerException):
    """Raised when the inputs of a command are unusable before any work starts."""

    @property
    def default_message(self) -> str:
        return "Invalid input."


class NoInputsError(ValidationError):
    """Raised when an input folder contains nothing to process."""

    @property
    def default_message(self) -> str:
        return "Found no input files."


class InvalidRotationError(PDFAssemblerException):
    """Raised when a rotation angle is not one of 0, 90, 180 or 270."""

    @property
    def default_message(self) -> str:
        return "Rotation must be one of 0, 90, 180 or 270 degrees."


class UnsupportedImageError(PDFAssemblerException):
    """Raised when an image path is neither PNG nor JPEG."""

    @property
    def default_message(self) -> str:
        return "Image is neither PNG nor JPG."


class ImageEmbedError(PDFAssemblerException):
    """Raised when an image cannot be decoded, embedded or drawn."""

    @property
    def default_message(self) -> str:
        return "Failed to embed image."


class InvalidPDFError(PDFAssemblerException):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(InvalidPDFError):
    """Raised when PDF is encrypted and cannot be opened with an empty password."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class PdfMergeError(PDFAssemblerException):
    """Raised when the merge operation fails."""

    @property
    def default_message(self) -> str:
        return "Failed to merge PDF files."


class PdfRotationError(PDFAssemblerException):
    """Raised when the rotation operation fails."""

    @property
    def default_message(self) -> str:
        return "Failed to rotate PDF file."


class PdfWriteError(PDFAssemblerException):
    """Raised when a document cannot be serialized or written."""

    @property
    def default_message(self) -> str:
        return "Failed to write PDF file."


def normalize_error(
    exc: BaseException,
    error_cls: Type[PDFAssemblerException] = PDFAssemblerException,
) -> PDFAssemblerException:
    """Return *exc* as a :class:`PDFAssemblerException`.

    Package errors pass through untouched. Anything else is wrapped in
    *error_cls* carrying the original text as its message, so a library
    failing with ``ValueError("bad image")`` reaches callers as
    ``error_cls("bad image")``.
    """

    if isinstance(exc, PDFAssemblerException):
        return exc
    message = str(exc) or type(exc).__name__
    return error_cls(message)


@contextmanager
def translate_errors(
    error_cls: Type[PDFAssemblerException] = PDFAssemblerException,
) -> Iterator[None]:
    """Re-raise every non-package exception raised in the block as *error_cls*."""

    try:
        yield
    except PDFAssemblerException:
        raise
    except Exception as exc:
        raise normalize_error(exc, error_cls) from exc


__all__ = [
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
    "normalize_error",
    "translate_errors",
]
