"""Geometry primitives shared by the tile and horizontal sizers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from filmstrip_layout.config_defaults import (
    DEFAULT_HORIZONTAL_MAX_HEIGHT,
    DEFAULT_HORIZONTAL_MIN_HEIGHT,
    DEFAULT_TILE_FIXED_WIDTH,
    DEFAULT_TILE_MAX_WIDTH,
    DEFAULT_TILE_MIN_WIDTH,
)
from filmstrip_layout.constants import (
    HORIZONTAL_VIEW_TOP_BOTTOM_MARGIN,
    TILE_ASPECT_RATIO,
    TILE_VIEW_SIDE_MARGIN,
    TILE_VIEW_VERTICAL_MARGIN,
)
from filmstrip_layout.type_defs import ThumbnailSize


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed range [lower, upper]."""
    return max(lower, min(upper, value))


def floor_clamp(value: float, lower: int, upper: int) -> int:
    """
    Clamp value into [lower, upper] and floor it to whole pixels.

    Infinite values land on the matching bound and NaN lands on
    ``lower``, so no input can reach the int conversion unbounded.
    """
    if math.isnan(value):
        return lower
    return math.floor(clamp(value, lower, upper))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded up.

    The builtin ``round`` rounds halves to even, which would make
    ``round(0.5) == 0`` and break the width/height derivations at exact
    half pixels.
    """
    return math.floor(value + 0.5)


def size_from_width(width: int, aspect_ratio: float) -> ThumbnailSize:
    """Derive a thumbnail size whose width is fixed."""
    return ThumbnailSize(width=width,
                         height=round_half_up(width / aspect_ratio))


def size_from_height(height: int, aspect_ratio: float) -> ThumbnailSize:
    """Derive a thumbnail size whose height is fixed."""
    return ThumbnailSize(width=round_half_up(height * aspect_ratio),
                         height=height)


@dataclass(frozen=True, slots=True)
class ThumbnailBounds:
    """Width clamp range of one layout mode at a fixed aspect ratio."""

    min_width: int
    max_width: int
    aspect_ratio: float = TILE_ASPECT_RATIO

    @property
    def min_height(self) -> int:
        return round_half_up(self.min_width / self.aspect_ratio)

    @property
    def max_height(self) -> int:
        return round_half_up(self.max_width / self.aspect_ratio)

    def clamp_width(self, width: float) -> int:
        """Floor width to whole pixels and clamp it into range."""
        return floor_clamp(width, self.min_width, self.max_width)


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """
    Numeric knobs consumed by the sizers.

    Built from the validated configuration by
    :func:`filmstrip_layout.config.settings_from_config`; the defaults
    here match an empty config file.
    """

    side_margin: int = TILE_VIEW_SIDE_MARGIN
    vertical_margin: int = TILE_VIEW_VERTICAL_MARGIN
    aspect_ratio: float = TILE_ASPECT_RATIO
    tile_bounds: ThumbnailBounds = field(
        default_factory=lambda: ThumbnailBounds(
            DEFAULT_TILE_MIN_WIDTH, DEFAULT_TILE_MAX_WIDTH),
    )
    fixed_tile_size: ThumbnailSize = field(
        default_factory=lambda: size_from_width(
            DEFAULT_TILE_FIXED_WIDTH, TILE_ASPECT_RATIO),
    )
    horizontal_margin: int = HORIZONTAL_VIEW_TOP_BOTTOM_MARGIN
    horizontal_min_height: int = DEFAULT_HORIZONTAL_MIN_HEIGHT
    horizontal_max_height: int = DEFAULT_HORIZONTAL_MAX_HEIGHT


DEFAULT_SETTINGS = LayoutSettings()
