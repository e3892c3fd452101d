"""Tests for converting sizing results into store events."""

import json

import pytest

from filmstrip_layout import events
from filmstrip_layout.constants import (
    SET_HORIZONTAL_VIEW_DIMENSIONS,
    SET_TILE_VIEW_DIMENSIONS,
)
from filmstrip_layout.sizing import compute_horizontal_layout, compute_tile_layout
from filmstrip_layout.type_defs import (
    GridShape,
    HorizontalLayoutResult,
    LayoutFlags,
    ThumbnailSize,
    TileLayoutResult,
    ViewportSize,
)


def test_tile_event_carries_result_unchanged() -> None:
    result = TileLayoutResult(GridShape(2, 1), ThumbnailSize(100, 56), 240)
    event = events.build_tile_view_event(result)
    assert event.type == SET_TILE_VIEW_DIMENSIONS
    assert event.dimensions is result


def test_tile_event_payload_shape() -> None:
    result = TileLayoutResult(GridShape(2, 1), ThumbnailSize(100, 56), 240)
    assert events.build_tile_view_event(result).to_dict() == {
        "type": SET_TILE_VIEW_DIMENSIONS,
        "dimensions": {
            "gridDimensions": {"columns": 2, "rows": 1},
            "thumbnailSize": {"width": 100, "height": 56},
            "filmstripWidth": 240,
        },
    }


def test_horizontal_event_payload_shape() -> None:
    result = HorizontalLayoutResult(ThumbnailSize(160, 90))
    payload = events.build_horizontal_view_event(result).to_dict()
    assert payload == {
        "type": SET_HORIZONTAL_VIEW_DIMENSIONS,
        "dimensions": {"thumbnailSize": {"width": 160, "height": 90}},
    }
    json.dumps(payload)


def test_build_layout_event_dispatches_on_type() -> None:
    tile = TileLayoutResult(GridShape(1, 1), ThumbnailSize(120, 68), 140)
    strip = HorizontalLayoutResult(ThumbnailSize(160, 90))
    assert events.build_layout_event(tile).type == SET_TILE_VIEW_DIMENSIONS
    assert events.build_layout_event(strip).type == \
        SET_HORIZONTAL_VIEW_DIMENSIONS


def test_build_layout_event_rejects_unknown() -> None:
    with pytest.raises(TypeError, match="Unsupported layout result"):
        events.build_layout_event(ThumbnailSize(1, 1))  # type: ignore[arg-type]


def test_event_is_immutable() -> None:
    event = events.build_horizontal_view_event(
        HorizontalLayoutResult(ThumbnailSize(160, 90)))
    with pytest.raises(AttributeError):
        event.type = "OTHER"  # type: ignore[misc]


def test_set_tile_view_dimensions_matches_sizer() -> None:
    shape = GridShape(3, 2)
    viewport = ViewportSize(1920, 1080)
    flags = LayoutFlags(panel_open=True, panel_reserved_width=375)
    event = events.set_tile_view_dimensions(shape, viewport, flags)
    assert event.dimensions == compute_tile_layout(shape, viewport, flags)


def test_set_horizontal_view_dimensions_defaults_to_zero() -> None:
    event = events.set_horizontal_view_dimensions()
    assert event.dimensions == compute_horizontal_layout(0)
