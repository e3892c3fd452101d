"""
Wireframe previews of a computed tile layout.

Draws each thumbnail slot as an outlined rectangle on a canvas the size
of the viewport, with the reserved side panel shaded. Useful to eyeball
constants while tuning a config; no video is involved.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from filmstrip_layout.constants import (
    COLOR_GREY,
    COLOR_PANEL,
    COLOR_TILE,
    COLOR_WHITE,
)
from filmstrip_layout.logging_utils import logger
from filmstrip_layout.sizing import DEFAULT_SETTINGS, usable_area

if TYPE_CHECKING:  # pragma: no cover
    from filmstrip_layout.sizing import LayoutSettings
    from filmstrip_layout.type_defs import (
        LayoutFlags,
        TileLayoutResult,
        ViewportSize,
    )

_RGB = tuple[int, int, int]
_OUTLINE_PX = 2


def tile_rects(
    result: TileLayoutResult,
    usable_width: float,
    *,
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> list[tuple[int, int, int, int]]:
    """Return (x0, y0, x1, y1) boxes for every slot, row by row."""
    w = result.thumbnail_size.width
    h = result.thumbnail_size.height
    # Center the grid horizontally; overflowing grids start at the left edge
    x_offset = max(0, (int(usable_width) - result.filmstrip_width) // 2)
    half_side = settings.side_margin // 2
    half_vertical = settings.vertical_margin // 2

    rects = []
    for row in range(result.grid_shape.rows):
        y0 = half_vertical + row * (h + settings.vertical_margin)
        for col in range(result.grid_shape.columns):
            x0 = x_offset + half_side + col * (w + settings.side_margin)
            rects.append((x0, y0, x0 + w, y0 + h))
    return rects


def render_tile_preview(  # noqa: PLR0913
    result: TileLayoutResult,
    viewport: ViewportSize,
    flags: LayoutFlags,
    *,
    settings: LayoutSettings | None = None,
    bg_color: _RGB = COLOR_GREY,
    tile_color: _RGB = COLOR_TILE,
) -> Image.Image:
    """
    Render the layout as an RGB image.

    The canvas grows past the viewport when clamped thumbnails overflow,
    so the scroll region is visible too.
    """
    settings = settings or DEFAULT_SETTINGS
    usable_width, _ = usable_area(viewport, flags)
    rects = tile_rects(result, usable_width, settings=settings)

    panel_w = int(viewport.width - usable_width)
    content_w = max([int(usable_width)] + [r[2] + settings.side_margin // 2
                                           for r in rects])
    canvas_w = max(1, content_w + panel_w)
    canvas_h = max([1, int(viewport.height)]
                   + [r[3] + settings.vertical_margin // 2 for r in rects])

    canvas = Image.new("RGB", (canvas_w, canvas_h), bg_color)
    draw = ImageDraw.Draw(canvas)
    if panel_w > 0:
        draw.rectangle((content_w, 0, canvas_w - 1, canvas_h - 1),
                       fill=COLOR_PANEL)
    for x0, y0, x1, y1 in rects:
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=tile_color,
                       outline=COLOR_WHITE, width=_OUTLINE_PX)
    return canvas


def save_tile_preview(  # noqa: PLR0913
    path: str | Path,
    result: TileLayoutResult,
    viewport: ViewportSize,
    flags: LayoutFlags,
    *,
    settings: LayoutSettings | None = None,
) -> Path:
    """Render the preview and write it as PNG, returning the final path."""
    out_path = Path(path)
    if out_path.suffix.lower() != ".png":
        out_path = out_path.with_suffix(".png")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    image = render_tile_preview(result, viewport, flags, settings=settings)
    image.save(out_path)
    logger.info("Layout preview saved to: %s", out_path)
    return out_path
