from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from PIL import Image
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    """Create a PDF of blank pages, one per entry in *rotations*."""

    def _create(filename: str, rotations: Sequence[int] = (0,), width: float = 200, height: float = 300) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        writer = PdfWriter()
        for rotation in rotations:
            page = writer.add_blank_page(width=width, height=height)
            if rotation:
                page.rotation = rotation
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def image_factory(tmp_path: Path) -> Callable[..., Path]:
    """Create a solid colour image; the format follows the file extension."""

    def _create(filename: str, width: int = 40, height: int = 20, color: str = "red") -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        image = Image.new("RGB", (width, height), color)
        fmt = "PNG" if path.suffix.lower() == ".png" else "JPEG"
        image.save(path, format=fmt)
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    return [
        pdf_factory("a.pdf", rotations=(0, 90)),
        pdf_factory("b.pdf", rotations=(180, 0, 270)),
        pdf_factory("c.pdf", rotations=(90,)),
    ]
