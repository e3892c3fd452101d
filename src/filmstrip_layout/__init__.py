"""Public package exports for the filmstrip layout engine."""

from __future__ import annotations

from .events import (
    LayoutEvent,
    build_horizontal_view_event,
    build_layout_event,
    build_tile_view_event,
    set_horizontal_view_dimensions,
    set_tile_view_dimensions,
)
from .sizing import compute_horizontal_layout, compute_tile_layout
from .type_defs import (
    GridShape,
    HorizontalLayoutResult,
    LayoutFlags,
    ThumbnailSize,
    TileLayoutResult,
    ViewportSize,
)

__all__ = [
    "GridShape",
    "HorizontalLayoutResult",
    "LayoutEvent",
    "LayoutFlags",
    "ThumbnailSize",
    "TileLayoutResult",
    "ViewportSize",
    "build_horizontal_view_event",
    "build_layout_event",
    "build_tile_view_event",
    "compute_horizontal_layout",
    "compute_tile_layout",
    "set_horizontal_view_dimensions",
    "set_tile_view_dimensions",
]
