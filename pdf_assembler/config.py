"""
Layout configuration for PDF Assembler.

The builders never read module level defaults directly: a
:class:`LayoutConfig` is handed to them, so callers and tests can vary
the page size or margins without touching shared state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Tuple

from reportlab.lib import pagesizes

PageDimensions = Tuple[float, float]

NAMED_PAGE_SIZES = {
    "A3": pagesizes.A3,
    "A4": pagesizes.A4,
    "A5": pagesizes.A5,
    "A6": pagesizes.A6,
    "A7": pagesizes.A7,
    "LETTER": pagesizes.LETTER,
    "LEGAL": pagesizes.LEGAL,
}


def page_size_by_name(name: str) -> PageDimensions:
    """Return the ``(width, height)`` of a named portrait page size in points."""

    try:
        width, height = NAMED_PAGE_SIZES[name.strip().upper()]
    except KeyError as exc:
        known = ", ".join(sorted(NAMED_PAGE_SIZES))
        raise ValueError(f"Unknown page size '{name}'. Expected one of: {known}") from exc
    return (float(width), float(height))


@dataclass(frozen=True)
class LayoutConfig:
    """
    Immutable page layout settings shared by the page builders.

    Attributes:
        page_size: Base portrait page size in points (default A4)
        margin: Space kept free around a placed image, in points
        title_font_size: Font size of the optional title page text
        label_font_size: Font size of the "Page N" label
        title_position: Bottom-left anchor of the title text
        font_name: Standard PDF font used for every text element
    """
    page_size: PageDimensions = (float(pagesizes.A4[0]), float(pagesizes.A4[1]))
    margin: float = 50
    title_font_size: float = 30
    label_font_size: float = 14
    title_position: Tuple[float, float] = (100, 100)
    font_name: str = "Helvetica"

    @property
    def label_position(self) -> Tuple[float, float]:
        """Anchor of the page number label, half a margin from the bottom-left corner."""
        return (self.margin / 2, self.margin / 2)

    def with_overrides(self, **changes: Any) -> "LayoutConfig":
        """Return a copy with *changes* applied; ``None`` values are ignored."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


DEFAULT_CONFIG = LayoutConfig()

__all__ = ["LayoutConfig", "DEFAULT_CONFIG", "NAMED_PAGE_SIZES", "PageDimensions", "page_size_by_name"]
