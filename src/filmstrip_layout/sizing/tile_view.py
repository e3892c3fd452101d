"""Thumbnail sizing for the tile (grid) view."""

from __future__ import annotations

from filmstrip_layout.logging_utils import logger
from filmstrip_layout.sizing.geometry import (
    DEFAULT_SETTINGS,
    LayoutSettings,
    size_from_width,
)
from filmstrip_layout.type_defs import (
    GridShape,
    LayoutFlags,
    ThumbnailSize,
    TileLayoutResult,
    ViewportSize,
)


def usable_area(
    viewport: ViewportSize,
    flags: LayoutFlags,
) -> tuple[float, float]:
    """Return (width, height) left for the grid once the panel is removed."""
    width = viewport.width
    if flags.panel_open:
        width -= flags.panel_reserved_width
    return max(0.0, width), max(0.0, viewport.height)


def calculate_thumbnail_size_for_tile_view(
    grid_shape: GridShape,
    usable_width: float,
    usable_height: float,
    *,
    responsive_disabled: bool = False,
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> ThumbnailSize:
    """
    Fit one thumbnail into its grid cell.

    The width allowed by the column count and the width implied by the
    row count (through the aspect ratio) are compared and the smaller
    wins, so neither axis overflows. The result is clamped into the
    configured bounds; clamping up to the minimum may overflow the
    viewport, which the consuming UI handles by scrolling.

    With ``responsive_disabled`` the configured fixed size is returned
    untouched.
    """
    if responsive_disabled:
        return settings.fixed_tile_size

    bounds = settings.tile_bounds
    # Columns/rows below 1 violate the caller contract; divide by 1 instead.
    columns = max(1, grid_shape.columns)
    rows = max(1, grid_shape.rows)

    width_limit = usable_width / columns - settings.side_margin
    height_limit = usable_height / rows - settings.vertical_margin
    candidate = min(width_limit, height_limit * bounds.aspect_ratio)

    return size_from_width(bounds.clamp_width(candidate), bounds.aspect_ratio)


def compute_tile_layout(
    grid_shape: GridShape,
    viewport: ViewportSize,
    flags: LayoutFlags,
    *,
    settings: LayoutSettings | None = None,
) -> TileLayoutResult:
    """
    Compute thumbnail size and filmstrip width for a tile grid.

    Pure and deterministic: identical arguments give identical results.
    """
    settings = settings or DEFAULT_SETTINGS
    usable_width, usable_height = usable_area(viewport, flags)
    thumbnail_size = calculate_thumbnail_size_for_tile_view(
        grid_shape,
        usable_width,
        usable_height,
        responsive_disabled=flags.responsive_disabled,
        settings=settings,
    )
    filmstrip_width = grid_shape.columns * (
        settings.side_margin + thumbnail_size.width)

    logger.debug(
        "Tile view %dx%d in %gx%g: thumbnail %dx%d, filmstrip width %d",
        grid_shape.columns, grid_shape.rows, usable_width, usable_height,
        thumbnail_size.width, thumbnail_size.height, filmstrip_width,
    )
    return TileLayoutResult(
        grid_shape=grid_shape,
        thumbnail_size=thumbnail_size,
        filmstrip_width=filmstrip_width,
    )
