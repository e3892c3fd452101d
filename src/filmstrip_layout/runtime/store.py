"""
In-memory state store and trigger adapter for layout events.

``LayoutStore`` is the minimal receiver for dispatched events: it keeps
the latest event per type and notifies subscribers. ``LayoutController``
owns the current trigger inputs (viewport, panel state, grid shape) and
recomputes on every trigger, so the sizers never read shared state.
Triggers are expected to arrive serialized on one thread.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Protocol

from filmstrip_layout.constants import (
    PIN_PARTICIPANT,
    SET_HORIZONTAL_VIEW_DIMENSIONS,
    SET_TILE_VIEW_DIMENSIONS,
)
from filmstrip_layout.events import (
    LayoutEvent,
    set_horizontal_view_dimensions,
    set_tile_view_dimensions,
)
from filmstrip_layout.logging_utils import logger
from filmstrip_layout.runtime.grid_shape import resolve_grid_shape
from filmstrip_layout.sizing import DEFAULT_SETTINGS, LayoutSettings
from filmstrip_layout.type_defs import (
    GridShape,
    HorizontalLayoutResult,
    LayoutFlags,
    TileLayoutResult,
    ViewportSize,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable


class Event(Protocol):
    """Anything the store can receive."""

    @property
    def type(self) -> str: ...


class LayoutStore:
    """Keep the most recent event of each type and broadcast updates."""

    def __init__(self) -> None:
        self._latest: dict[str, Event] = {}
        self._subscribers: list[Callable[[Event], None]] = []

    def dispatch(self, event: Event) -> None:
        """Replace the stored event of this type and notify subscribers."""
        logger.debug("Dispatching %s", event.type)
        self._latest[event.type] = event
        for callback in list(self._subscribers):
            callback(event)

    def subscribe(
        self,
        callback: Callable[[Event], None],
    ) -> Callable[[], None]:
        """Register a callback; the returned callable unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def latest(self, event_type: str) -> Event | None:
        return self._latest.get(event_type)

    @property
    def tile_view_dimensions(self) -> TileLayoutResult | None:
        event = self._latest.get(SET_TILE_VIEW_DIMENSIONS)
        return event.dimensions if isinstance(event, LayoutEvent) else None

    @property
    def horizontal_view_dimensions(self) -> HorizontalLayoutResult | None:
        event = self._latest.get(SET_HORIZONTAL_VIEW_DIMENSIONS)
        return event.dimensions if isinstance(event, LayoutEvent) else None

    @property
    def pinned_participant_id(self) -> str | None:
        event: Any = self._latest.get(PIN_PARTICIPANT)
        return None if event is None else event.participant_id

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Return the stored events as plain mappings keyed by type."""
        return {key: event.to_dict()  # type: ignore[attr-defined]
                for key, event in self._latest.items()}


class LayoutController:
    """
    Recompute and dispatch layouts in response to trigger events.

    Every trigger builds fresh results from the current inputs; nothing
    is patched in place.
    """

    def __init__(  # noqa: PLR0913
        self,
        store: LayoutStore,
        *,
        viewport: ViewportSize,
        grid_shape: GridShape,
        flags: LayoutFlags | None = None,
        settings: LayoutSettings | None = None,
        max_columns: int | None = None,
    ) -> None:
        self.store = store
        self.viewport = viewport
        self.grid_shape = grid_shape
        self.flags = flags or LayoutFlags()
        self.settings = settings or DEFAULT_SETTINGS
        self.max_columns = max_columns

    def refresh(self) -> None:
        """Dispatch both layouts for the current inputs."""
        self.store.dispatch(set_tile_view_dimensions(
            self.grid_shape, self.viewport, self.flags,
            settings=self.settings,
        ))
        self.store.dispatch(set_horizontal_view_dimensions(
            self.viewport.height, settings=self.settings,
        ))

    def on_resize(self, viewport: ViewportSize) -> None:
        self.viewport = viewport
        self.refresh()

    def on_panel_toggle(self, panel_open: bool) -> None:  # noqa: FBT001
        self.flags = replace(self.flags, panel_open=panel_open)
        # Panel width only affects tile view
        self.store.dispatch(set_tile_view_dimensions(
            self.grid_shape, self.viewport, self.flags,
            settings=self.settings,
        ))

    def on_grid_shape_change(self, grid_shape: GridShape) -> None:
        self.grid_shape = grid_shape
        self.store.dispatch(set_tile_view_dimensions(
            self.grid_shape, self.viewport, self.flags,
            settings=self.settings,
        ))

    def on_participant_count_change(self, participant_count: int) -> None:
        """Resolve a new grid shape for the count and re-layout the grid."""
        if self.max_columns is None:
            shape = resolve_grid_shape(participant_count)
        else:
            shape = resolve_grid_shape(participant_count, self.max_columns)
        logger.debug("Participant count %d resolved to %dx%d grid",
                     participant_count, shape.columns, shape.rows)
        self.on_grid_shape_change(shape)
