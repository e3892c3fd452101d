"""
Defines the value records exchanged by the layout engine.

Every record is a frozen dataclass: a layout computation never mutates
its inputs and always returns a fresh result that replaces the prior one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from filmstrip_layout.constants import CHAT_PANEL_WIDTH

LayoutMode = Literal["tile", "horizontal"]


@dataclass(frozen=True, slots=True)
class ViewportSize:
    """Raw available pixels before reserved-panel subtraction."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class LayoutFlags:
    """Mode flags that shape the tile view computation."""

    panel_open: bool = False
    panel_reserved_width: float = CHAT_PANEL_WIDTH
    responsive_disabled: bool = False


@dataclass(frozen=True, slots=True)
class GridShape:
    """
    Number of columns and rows the tile grid must arrange.

    Both values are expected to be at least 1. This is a caller
    precondition and is not checked at runtime.
    """

    columns: int
    rows: int

    def to_dict(self) -> dict[str, int]:
        """Return the payload form of the grid shape."""
        return {"columns": self.columns, "rows": self.rows}


@dataclass(frozen=True, slots=True)
class ThumbnailSize:
    """Pixel size of one thumbnail."""

    width: int
    height: int

    def to_dict(self) -> dict[str, int]:
        """Return the payload form of the thumbnail size."""
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class TileLayoutResult:
    """Tile view sizing outcome for a grid shape."""

    grid_shape: GridShape
    thumbnail_size: ThumbnailSize
    filmstrip_width: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "gridDimensions": self.grid_shape.to_dict(),
            "thumbnailSize": self.thumbnail_size.to_dict(),
            "filmstripWidth": self.filmstrip_width,
        }


@dataclass(frozen=True, slots=True)
class HorizontalLayoutResult:
    """Horizontal filmstrip sizing outcome."""

    thumbnail_size: ThumbnailSize

    def to_dict(self) -> dict[str, Any]:
        return {"thumbnailSize": self.thumbnail_size.to_dict()}


@dataclass(frozen=True, slots=True)
class Participant:
    """Minimal participant record used by pin selection."""

    id: str
    pinned: bool = False
