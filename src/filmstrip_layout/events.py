"""
Event payloads produced from sizing results.

The sizers stay pure; this module converts their results into the
immutable events consumed by a state store. It does no geometry of its
own. The ``set_*`` helpers compute and build in one call so a trigger
handler can dispatch their return value directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from filmstrip_layout.constants import (
    SET_HORIZONTAL_VIEW_DIMENSIONS,
    SET_TILE_VIEW_DIMENSIONS,
)
from filmstrip_layout.sizing import compute_horizontal_layout, compute_tile_layout
from filmstrip_layout.type_defs import HorizontalLayoutResult, TileLayoutResult

if TYPE_CHECKING:  # pragma: no cover
    from filmstrip_layout.sizing import LayoutSettings
    from filmstrip_layout.type_defs import GridShape, LayoutFlags, ViewportSize


@dataclass(frozen=True, slots=True)
class LayoutEvent:
    """A typed state-update event carrying one layout result."""

    type: str
    dimensions: TileLayoutResult | HorizontalLayoutResult

    def to_dict(self) -> dict[str, Any]:
        """Return the plain mapping form expected by the host store."""
        return {"type": self.type, "dimensions": self.dimensions.to_dict()}


def build_tile_view_event(result: TileLayoutResult) -> LayoutEvent:
    """Wrap a tile layout result into a tile-layout-updated event."""
    return LayoutEvent(type=SET_TILE_VIEW_DIMENSIONS, dimensions=result)


def build_horizontal_view_event(result: HorizontalLayoutResult) -> LayoutEvent:
    """Wrap a horizontal layout result into a horizontal-layout-updated event."""
    return LayoutEvent(type=SET_HORIZONTAL_VIEW_DIMENSIONS, dimensions=result)


def build_layout_event(
    result: TileLayoutResult | HorizontalLayoutResult,
) -> LayoutEvent:
    """Pick the event type matching the result record."""
    if isinstance(result, TileLayoutResult):
        return build_tile_view_event(result)
    if isinstance(result, HorizontalLayoutResult):
        return build_horizontal_view_event(result)
    msg = f"Unsupported layout result: {type(result).__name__}"
    raise TypeError(msg)


def set_tile_view_dimensions(
    grid_shape: GridShape,
    viewport: ViewportSize,
    flags: LayoutFlags,
    *,
    settings: LayoutSettings | None = None,
) -> LayoutEvent:
    """Compute the tile layout and return it as an event."""
    return build_tile_view_event(
        compute_tile_layout(grid_shape, viewport, flags, settings=settings))


def set_horizontal_view_dimensions(
    available_height: float = 0,
    *,
    settings: LayoutSettings | None = None,
) -> LayoutEvent:
    """Compute the horizontal layout and return it as an event."""
    return build_horizontal_view_event(
        compute_horizontal_layout(available_height, settings=settings))
