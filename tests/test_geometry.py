"""Tests for the shared geometry primitives."""

import pytest

from filmstrip_layout.constants import TILE_ASPECT_RATIO
from filmstrip_layout.sizing import geometry
from filmstrip_layout.type_defs import ThumbnailSize


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-5, 0), (0, 0), (7, 7), (10, 10), (42, 10)],
)
def test_clamp(value: float, expected: float) -> None:
    assert geometry.clamp(value, 0, 10) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-3.0, 5), (5.0, 5), (7.9, 7), (12.0, 10),
     (float("inf"), 10), (float("-inf"), 5), (float("nan"), 5)],
)
def test_floor_clamp(value: float, expected: int) -> None:
    result = geometry.floor_clamp(value, 5, 10)
    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (-0.5, 0), (7.0, 7)],
)
def test_round_half_up(value: float, expected: int) -> None:
    """Halves go up, unlike the builtin round."""
    assert geometry.round_half_up(value) == expected


def test_size_from_width_keeps_aspect() -> None:
    assert geometry.size_from_width(320, TILE_ASPECT_RATIO) == \
        ThumbnailSize(320, 180)


def test_size_from_height_keeps_aspect() -> None:
    assert geometry.size_from_height(200, TILE_ASPECT_RATIO) == \
        ThumbnailSize(356, 200)


class TestThumbnailBounds:
    def test_clamp_width_floors_and_limits(self) -> None:
        bounds = geometry.ThumbnailBounds(min_width=100, max_width=400)
        assert bounds.clamp_width(250.9) == 250
        assert bounds.clamp_width(-20) == 100
        assert bounds.clamp_width(1000) == 400
        assert bounds.clamp_width(float("inf")) == 400
        assert bounds.clamp_width(float("nan")) == 100

    def test_derived_heights(self) -> None:
        bounds = geometry.ThumbnailBounds(min_width=160, max_width=1280)
        assert bounds.min_height == 90
        assert bounds.max_height == 720


def test_default_settings_are_consistent() -> None:
    settings = geometry.DEFAULT_SETTINGS
    assert settings.tile_bounds.aspect_ratio == settings.aspect_ratio
    fixed = settings.fixed_tile_size
    assert settings.tile_bounds.min_width <= fixed.width
    assert fixed.width <= settings.tile_bounds.max_width
