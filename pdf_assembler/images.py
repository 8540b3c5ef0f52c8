"""Raster image loading for the images-to-PDF pipeline."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from PIL import Image
from reportlab.lib.utils import ImageReader

from .exceptions import UnsupportedImageError
from .types import ImageFormat
from .utils import PathLike, get_logger

LOGGER = get_logger("pdf_assembler.images")

IMAGE_EXTENSIONS: Dict[str, ImageFormat] = {
    ".png": ImageFormat.PNG,
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
}

# Clockwise angle -> Pillow transpose (Pillow names its constants counter-clockwise).
_CLOCKWISE_TRANSPOSE = {
    90: Image.Transpose.ROTATE_270,
    180: Image.Transpose.ROTATE_180,
    270: Image.Transpose.ROTATE_90,
}


def detect_format(path: PathLike) -> ImageFormat:
    """Return the :class:`ImageFormat` implied by *path*'s extension.

    Raises:
        UnsupportedImageError: If the extension is not .png, .jpg or .jpeg
    """

    suffix = Path(path).suffix.lower()
    try:
        return IMAGE_EXTENSIONS[suffix]
    except KeyError:
        raise UnsupportedImageError(f"Image {path} is neither PNG nor JPG") from None


@dataclass(frozen=True)
class ImageAsset:
    """A decoded image ready to be drawn on a page.

    ``width`` and ``height`` are the intrinsic pixel dimensions after the
    optional rotation, which is why the page orientation is derived from
    them rather than from the file on disk.
    """

    path: Path
    format: ImageFormat
    raw_bytes: bytes
    image: Image.Image
    rotation: int = 0

    @property
    def width(self) -> int:
        return self.image.size[0]

    @property
    def height(self) -> int:
        return self.image.size[1]

    def reader(self) -> ImageReader:
        """Return the reportlab reader used to embed this asset.

        Unrotated files are embedded from their original bytes so JPEG
        data keeps its DCT encoding; rotated assets embed the rotated pixels.
        """
        if self.rotation:
            return ImageReader(self.image)
        return ImageReader(io.BytesIO(self.raw_bytes))


def rotate_pixels(image: Image.Image, degrees: int) -> Image.Image:
    """Return *image* rotated clockwise by *degrees* (a multiple of 90)."""

    degrees %= 360
    if degrees == 0:
        return image
    try:
        transpose = _CLOCKWISE_TRANSPOSE[degrees]
    except KeyError:
        raise ValueError(f"Image rotation must be a multiple of 90 degrees, got {degrees}") from None
    return image.transpose(transpose)


def decode_image(data: bytes, image_format: ImageFormat) -> Image.Image:
    """Decode *data* with the decoder for *image_format* only."""

    image = Image.open(io.BytesIO(data), formats=[image_format.value])
    image.load()
    return image


def load_image(path: PathLike, rotation: int = 0) -> ImageAsset:
    """Read, decode and optionally rotate the image stored at *path*.

    Raises:
        UnsupportedImageError: If the extension is not supported
        OSError: If the file cannot be read or decoded
    """

    image_path = Path(path)
    image_format = detect_format(image_path)
    raw_bytes = image_path.read_bytes()
    image = decode_image(raw_bytes, image_format)
    if rotation:
        LOGGER.debug("Rotating %s by %s degrees clockwise", image_path, rotation)
        image = rotate_pixels(image, rotation)
    return ImageAsset(
        path=image_path,
        format=image_format,
        raw_bytes=raw_bytes,
        image=image,
        rotation=rotation % 360,
    )


__all__ = [
    "IMAGE_EXTENSIONS",
    "ImageAsset",
    "detect_format",
    "decode_image",
    "load_image",
    "rotate_pixels",
]
