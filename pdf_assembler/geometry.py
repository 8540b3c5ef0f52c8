"""
Page geometry for PDF Assembler.

Pure functions deciding the size and orientation of a page and where an
image lands on it. Coordinates follow the PDF convention: the origin is
the bottom-left corner of the page and ``y`` grows upwards.
"""

from __future__ import annotations

from typing import Sequence

from .types import PlacementRect, Point, Size


def _as_size(value: Sequence[float]) -> Size:
    width, height = value
    return Size(float(width), float(height))


def select_orientation(orig_width: float, orig_height: float, base_page_size: Sequence[float]) -> Size:
    """Return the page size for an image of ``orig_width x orig_height``.

    Wide images (``orig_width > orig_height``) get the base size turned to
    landscape; everything else gets it in portrait. A new value is always
    returned and *base_page_size* is never modified.
    """

    base = _as_size(base_page_size)
    short_side, long_side = sorted(base)
    if orig_width > orig_height:
        return Size(long_side, short_side)
    return Size(short_side, long_side)


def scale_to_fit(orig_width: float, orig_height: float, max_width: float, max_height: float) -> Size:
    """Scale ``orig_width x orig_height`` to the largest size fitting the bounds.

    The aspect ratio is preserved and the result may be larger than the
    original: small images are scaled up to fill the box.

    Raises:
        ValueError: If any dimension is not strictly positive
    """

    if orig_width <= 0 or orig_height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {orig_width}x{orig_height}")
    if max_width <= 0 or max_height <= 0:
        raise ValueError(f"Bounding box must be positive, got {max_width}x{max_height}")

    scale = min(max_width / orig_width, max_height / orig_height)
    return Size(orig_width * scale, orig_height * scale)


def center_on(size: Sequence[float], container_size: Sequence[float]) -> Point:
    """Return the bottom-left corner that centers *size* inside *container_size*."""

    width, height = _as_size(size)
    container_width, container_height = _as_size(container_size)
    return Point((container_width - width) / 2, (container_height - height) / 2)


def placement_for(
    orig_width: float,
    orig_height: float,
    page_size: Sequence[float],
    margin: float,
) -> PlacementRect:
    """Return the centered, aspect preserving rectangle for an image on a page.

    The image is fitted into the page minus *margin* on every side.
    """

    page = _as_size(page_size)
    scaled = scale_to_fit(
        orig_width,
        orig_height,
        page.width - 2 * margin,
        page.height - 2 * margin,
    )
    origin = center_on(scaled, page)
    return PlacementRect(x=origin.x, y=origin.y, width=scaled.width, height=scaled.height)


__all__ = ["select_orientation", "scale_to_fit", "center_on", "placement_for"]
