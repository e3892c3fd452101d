"""Runtime adapters: state store, grid shape resolver, pin selection."""

from .grid_shape import resolve_grid_shape
from .participants import (
    PinParticipantEvent,
    click_on_video,
    select_participant_by_index,
)
from .store import LayoutController, LayoutStore
from .version import resolve_project_version

__all__ = [
    "LayoutController",
    "LayoutStore",
    "PinParticipantEvent",
    "click_on_video",
    "resolve_grid_shape",
    "resolve_project_version",
    "select_participant_by_index",
]
