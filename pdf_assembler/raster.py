"""Raster page builder: one image per page, centered and scaled to fit."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from reportlab.pdfgen import canvas

from .config import DEFAULT_CONFIG, LayoutConfig
from .document import AssemblyDocument
from .exceptions import ImageEmbedError, UnsupportedImageError, translate_errors
from .geometry import placement_for, select_orientation
from .images import ImageAsset, detect_format, load_image
from .rendering import draw_text, render_page
from .types import PlacementRect
from .utils import PathLike, get_logger

LOGGER = get_logger("pdf_assembler.raster")


class RasterPageBuilder:
    """Turns image files into pages of an :class:`AssemblyDocument`."""

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.skipped: List[Path] = []

    def add_images(
        self,
        document: AssemblyDocument,
        image_paths: Iterable[PathLike],
        *,
        rotation: int = 0,
        first_page_number: int = 1,
        log: bool = False,
    ) -> int:
        """Append one page per supported image and return how many were added.

        Images are processed strictly in the given order. Paths that are
        neither PNG nor JPEG are logged and skipped without consuming a
        page number; they are collected in :attr:`skipped`.

        Raises:
            ImageEmbedError: If an image cannot be read, decoded or drawn
        """
        page_number = first_page_number
        added = 0
        for image_path in image_paths:
            path = Path(image_path)
            try:
                detect_format(path)
            except UnsupportedImageError as exc:
                LOGGER.warning("%s", exc)
                self.skipped.append(path)
                continue

            with translate_errors(ImageEmbedError):
                asset = load_image(path, rotation)
                self.add_image(document, asset, page_number, log=log)
            page_number += 1
            added += 1
        return added

    def add_image(
        self,
        document: AssemblyDocument,
        asset: ImageAsset,
        page_number: int,
        *,
        log: bool = False,
    ) -> PlacementRect:
        """Append the page for a single decoded *asset* and return its placement."""
        config = self.config
        page_size = select_orientation(asset.width, asset.height, config.page_size)
        placement = placement_for(asset.width, asset.height, page_size, config.margin)

        level = logging.INFO if log else logging.DEBUG
        LOGGER.log(level, "Page %d : %sx%s", page_number, page_size.width, page_size.height)
        LOGGER.log(level, "Image Original : %sx%s", asset.width, asset.height)
        LOGGER.log(level, "Image Scaled : %.2fx%.2f", placement.width, placement.height)

        def paint(pdf_canvas: canvas.Canvas) -> None:
            pdf_canvas.drawImage(
                asset.reader(),
                placement.x,
                placement.y,
                width=placement.width,
                height=placement.height,
                mask="auto",
            )
            draw_text(
                pdf_canvas,
                f"Page {page_number}",
                config.label_position,
                font_name=config.font_name,
                font_size=config.label_font_size,
            )

        document.add_page(render_page(page_size, paint))
        return placement


__all__ = ["RasterPageBuilder"]
