"""Title page support shared by the images and merge pipelines."""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, LayoutConfig
from .document import AssemblyDocument
from .rendering import draw_text, render_page
from .utils import get_logger

LOGGER = get_logger("pdf_assembler.title")


class TitlePageBuilder:
    """Prepends a page carrying a title string."""

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def add_title_page(self, document: AssemblyDocument, title: Optional[str]) -> bool:
        """Append a title page to *document* when *title* is not blank.

        Must be called before any content page is added. Returns ``True``
        when a page was added.
        """
        if title is None or not title.strip():
            return False

        if document.page_count:
            LOGGER.warning(
                "Title page added after %d existing page(s); it will not be first",
                document.page_count,
            )

        config = self.config
        page = render_page(
            config.page_size,
            lambda pdf_canvas: draw_text(
                pdf_canvas,
                title,
                config.title_position,
                font_name=config.font_name,
                font_size=config.title_font_size,
            ),
        )
        document.add_page(page)
        LOGGER.debug("Added title page %r", title)
        return True


__all__ = ["TitlePageBuilder"]
