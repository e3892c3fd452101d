"""Unit tests for horizontal filmstrip sizing."""

import pytest

from filmstrip_layout.config_defaults import (
    DEFAULT_HORIZONTAL_MAX_HEIGHT,
    DEFAULT_HORIZONTAL_MIN_HEIGHT,
)
from filmstrip_layout.sizing import (
    LayoutSettings,
    compute_horizontal_layout,
    round_half_up,
)
from filmstrip_layout.type_defs import ThumbnailSize


def test_zero_height_gives_minimum() -> None:
    result = compute_horizontal_layout(0)
    assert result.thumbnail_size == ThumbnailSize(160, 90)


def test_default_argument_is_zero() -> None:
    assert compute_horizontal_layout() == compute_horizontal_layout(0)


@pytest.mark.parametrize("height", [-500, -1, 0, 50, 104])
def test_small_heights_clamp_to_minimum(height: float) -> None:
    result = compute_horizontal_layout(height)
    assert result.thumbnail_size.height == DEFAULT_HORIZONTAL_MIN_HEIGHT


@pytest.mark.parametrize("height", [215, 480, 1080, 100000])
def test_large_heights_clamp_to_maximum(height: float) -> None:
    result = compute_horizontal_layout(height)
    assert result.thumbnail_size.height == DEFAULT_HORIZONTAL_MAX_HEIGHT


def test_480_height() -> None:
    size = compute_horizontal_layout(480).thumbnail_size
    assert DEFAULT_HORIZONTAL_MIN_HEIGHT <= size.height
    assert size.height <= DEFAULT_HORIZONTAL_MAX_HEIGHT
    assert size.width == round_half_up(size.height * 16 / 9)
    assert size == ThumbnailSize(356, 200)


def test_margin_is_subtracted() -> None:
    assert compute_horizontal_layout(150).thumbnail_size == \
        ThumbnailSize(240, 135)


def test_idempotent() -> None:
    assert compute_horizontal_layout(333) == compute_horizontal_layout(333)


def test_custom_settings() -> None:
    settings = LayoutSettings(
        aspect_ratio=1.0,
        horizontal_margin=0,
        horizontal_min_height=50,
        horizontal_max_height=100,
    )
    result = compute_horizontal_layout(75, settings=settings)
    assert result.thumbnail_size == ThumbnailSize(75, 75)


def test_infinite_height_clamps_to_maximum() -> None:
    result = compute_horizontal_layout(float("inf"))
    assert result.thumbnail_size == ThumbnailSize(356, 200)


@pytest.mark.parametrize("height", [float("nan"), float("-inf")])
def test_undefined_height_clamps_to_minimum(height: float) -> None:
    result = compute_horizontal_layout(height)
    assert result.thumbnail_size == ThumbnailSize(160, 90)
