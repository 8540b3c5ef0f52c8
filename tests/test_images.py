from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from pdf_assembler.exceptions import UnsupportedImageError
from pdf_assembler.images import detect_format, load_image, rotate_pixels
from pdf_assembler.types import ImageFormat


@pytest.mark.parametrize(
    ("name", "expected"),
    [("a.png", ImageFormat.PNG), ("b.jpg", ImageFormat.JPEG), ("c.JPEG", ImageFormat.JPEG)],
)
def test_detect_format(name: str, expected: ImageFormat) -> None:
    assert detect_format(name) is expected


@pytest.mark.parametrize("name", ["a.gif", "b.pdf", "noext"])
def test_detect_format_rejects_other_extensions(name: str) -> None:
    with pytest.raises(UnsupportedImageError, match="neither PNG nor JPG"):
        detect_format(name)


def test_load_image_reports_intrinsic_size(image_factory: Callable[..., Path]) -> None:
    asset = load_image(image_factory("wide.png", width=60, height=30))

    assert asset.format is ImageFormat.PNG
    assert (asset.width, asset.height) == (60, 30)
    assert asset.rotation == 0


@pytest.mark.parametrize(("degrees", "expected"), [(90, (30, 60)), (180, (60, 30)), (270, (30, 60))])
def test_load_image_rotates_pixels(
    image_factory: Callable[..., Path], degrees: int, expected: tuple[int, int]
) -> None:
    asset = load_image(image_factory("wide.jpg", width=60, height=30), rotation=degrees)

    assert (asset.width, asset.height) == expected
    assert asset.rotation == degrees


def test_rotate_pixels_is_clockwise() -> None:
    image = Image.new("RGB", (2, 1), "white")
    image.putpixel((0, 0), (255, 0, 0))

    rotated = rotate_pixels(image, 90)

    # Left pixel of a 2x1 strip ends up at the top after a clockwise turn.
    assert rotated.size == (1, 2)
    assert rotated.getpixel((0, 0)) == (255, 0, 0)


def test_rotate_pixels_rejects_odd_angles() -> None:
    with pytest.raises(ValueError):
        rotate_pixels(Image.new("RGB", (2, 2)), 45)


def test_load_image_uses_decoder_matching_extension(tmp_path: Path) -> None:
    disguised = tmp_path / "photo.png"
    Image.new("RGB", (10, 10)).save(disguised, format="JPEG")

    with pytest.raises(Exception):
        load_image(disguised)
