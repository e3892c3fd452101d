"""Pure sizing functions for tile and horizontal filmstrip layouts."""

from .geometry import (
    DEFAULT_SETTINGS,
    LayoutSettings,
    ThumbnailBounds,
    clamp,
    floor_clamp,
    round_half_up,
    size_from_height,
    size_from_width,
)
from .horizontal_view import (
    calculate_thumbnail_size_for_horizontal_view,
    compute_horizontal_layout,
)
from .tile_view import (
    calculate_thumbnail_size_for_tile_view,
    compute_tile_layout,
    usable_area,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "LayoutSettings",
    "ThumbnailBounds",
    "calculate_thumbnail_size_for_horizontal_view",
    "calculate_thumbnail_size_for_tile_view",
    "clamp",
    "compute_horizontal_layout",
    "compute_tile_layout",
    "floor_clamp",
    "round_half_up",
    "size_from_height",
    "size_from_width",
    "usable_area",
]
