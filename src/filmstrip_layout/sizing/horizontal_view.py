"""Thumbnail sizing for the single-row horizontal filmstrip."""

from __future__ import annotations

from filmstrip_layout.logging_utils import logger
from filmstrip_layout.sizing.geometry import (
    DEFAULT_SETTINGS,
    LayoutSettings,
    floor_clamp,
    size_from_height,
)
from filmstrip_layout.type_defs import HorizontalLayoutResult, ThumbnailSize


def calculate_thumbnail_size_for_horizontal_view(
    available_height: float = 0,
    *,
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> ThumbnailSize:
    """Fit the strip height, then derive width from the aspect ratio."""
    height = floor_clamp(
        available_height - settings.horizontal_margin,
        settings.horizontal_min_height,
        settings.horizontal_max_height,
    )
    return size_from_height(height, settings.aspect_ratio)


def compute_horizontal_layout(
    available_height: float = 0,
    *,
    settings: LayoutSettings | None = None,
) -> HorizontalLayoutResult:
    """
    Compute the thumbnail size for horizontal view.

    Only height is constrained: thumbnails sit in one scrollable row.
    Unknown heights should be passed as 0, which yields the minimum size.
    """
    settings = settings or DEFAULT_SETTINGS
    thumbnail_size = calculate_thumbnail_size_for_horizontal_view(
        available_height, settings=settings)
    logger.debug("Horizontal view for height %g: thumbnail %dx%d",
                 available_height, thumbnail_size.width,
                 thumbnail_size.height)
    return HorizontalLayoutResult(thumbnail_size=thumbnail_size)
