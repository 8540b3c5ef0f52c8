"""Single page rendering through a reportlab canvas."""

from __future__ import annotations

import io
from typing import Callable, Sequence

from pypdf import PageObject, PdfReader
from reportlab.pdfgen import canvas

Painter = Callable[[canvas.Canvas], None]


def render_page(page_size: Sequence[float], painter: Painter) -> PageObject:
    """Draw one page of *page_size* with *painter* and return it as a pypdf page.

    *painter* receives a fresh canvas whose origin is the bottom-left
    corner of the page.
    """

    width, height = page_size
    buffer = io.BytesIO()
    pdf_canvas = canvas.Canvas(buffer, pagesize=(width, height))
    painter(pdf_canvas)
    pdf_canvas.showPage()
    pdf_canvas.save()
    buffer.seek(0)
    return PdfReader(buffer).pages[0]


def draw_text(
    pdf_canvas: canvas.Canvas,
    text: str,
    position: Sequence[float],
    *,
    font_name: str,
    font_size: float,
) -> None:
    x, y = position
    pdf_canvas.setFont(font_name, font_size)
    pdf_canvas.drawString(x, y, text)


__all__ = ["Painter", "render_page", "draw_text"]
