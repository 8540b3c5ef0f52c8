from __future__ import annotations

import math

import pytest

from pdf_assembler.config import DEFAULT_CONFIG, LayoutConfig, page_size_by_name
from pdf_assembler.geometry import center_on, placement_for, scale_to_fit, select_orientation
from pdf_assembler.types import Point, Size

A4 = DEFAULT_CONFIG.page_size


@pytest.mark.parametrize(
    ("width", "height", "landscape"),
    [(400, 300, True), (300, 400, False), (500, 500, False), (1, 2, False), (2001, 2000, True)],
)
def test_select_orientation(width: int, height: int, landscape: bool) -> None:
    size = select_orientation(width, height, A4)

    assert (size.width > size.height) is landscape
    assert sorted(size) == sorted(A4)


def test_select_orientation_never_mutates_base_size() -> None:
    base = [100.0, 200.0]

    first = select_orientation(300, 100, base)
    second = select_orientation(100, 300, base)

    assert base == [100.0, 200.0]
    assert first == Size(200.0, 100.0)
    assert second == Size(100.0, 200.0)


def test_select_orientation_normalises_landscape_base() -> None:
    assert select_orientation(100, 300, (200, 100)) == Size(100, 200)


def test_scale_to_fit_preserves_aspect_ratio() -> None:
    size = scale_to_fit(1600, 900, 495.0, 741.0)

    assert math.isclose(size.width / size.height, 1600 / 900)
    assert math.isclose(size.width, 495.0)
    assert size.height <= 741.0


def test_scale_to_fit_binding_height() -> None:
    size = scale_to_fit(100, 1000, 500, 500)

    assert math.isclose(size.height, 500)
    assert math.isclose(size.width, 50)


def test_scale_to_fit_allows_upscaling() -> None:
    size = scale_to_fit(10, 20, 100, 100)

    assert size == Size(50, 100)


@pytest.mark.parametrize("dims", [(0, 10, 10, 10), (10, -1, 10, 10), (10, 10, 0, 10)])
def test_scale_to_fit_rejects_non_positive(dims: tuple[int, int, int, int]) -> None:
    with pytest.raises(ValueError):
        scale_to_fit(*dims)


def test_center_on() -> None:
    assert center_on((100, 50), (300, 250)) == Point(100, 100)


def test_placement_for_is_centered_inside_margins() -> None:
    margin = DEFAULT_CONFIG.margin
    page = select_orientation(3000, 1000, DEFAULT_CONFIG.page_size)

    rect = placement_for(3000, 1000, page, margin)

    assert rect.width <= page.width - 2 * margin + 1e-9
    assert rect.height <= page.height - 2 * margin + 1e-9
    assert math.isclose(rect.x, (page.width - rect.width) / 2)
    assert math.isclose(rect.y, (page.height - rect.height) / 2)
    assert math.isclose(rect.width / rect.height, 3.0)


def test_layout_config_overrides_leave_default_untouched() -> None:
    custom = DEFAULT_CONFIG.with_overrides(margin=10, page_size=(100, 200), title_font_size=None)

    assert custom.margin == 10
    assert custom.page_size == (100, 200)
    assert custom.title_font_size == DEFAULT_CONFIG.title_font_size
    assert DEFAULT_CONFIG == LayoutConfig()
    assert custom.label_position == (5, 5)


def test_page_size_by_name() -> None:
    assert page_size_by_name("letter") == (612.0, 792.0)
    assert page_size_by_name(" A4 ") == DEFAULT_CONFIG.page_size

    with pytest.raises(ValueError, match="Unknown page size"):
        page_size_by_name("B12")
