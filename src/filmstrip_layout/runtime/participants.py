"""Pin selection for the participant shown at a given filmstrip position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from filmstrip_layout.constants import PIN_PARTICIPANT

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from filmstrip_layout.runtime.store import LayoutStore
    from filmstrip_layout.type_defs import Participant


@dataclass(frozen=True, slots=True)
class PinParticipantEvent:
    """Request to pin a participant, or to clear the pin when id is None."""

    participant_id: str | None
    type: str = PIN_PARTICIPANT

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type,
                "participant": {"id": self.participant_id}}


def select_participant_by_index(
    participants: Sequence[Participant],
    index: int,
) -> str | None:
    """
    Return the id to pin after clicking the video at ``index``.

    Clicking a pinned participant unpins it, so ``None`` is returned.
    Raises IndexError when no participant sits at that position.
    """
    if not 0 <= index < len(participants):
        msg = (f"No participant at index {index} "
               f"({len(participants)} participants)")
        raise IndexError(msg)
    participant = participants[index]
    return None if participant.pinned else participant.id


def click_on_video(
    store: LayoutStore,
    participants: Sequence[Participant],
    index: int,
) -> PinParticipantEvent:
    """Toggle the pin of the n-th participant and dispatch the result."""
    event = PinParticipantEvent(
        participant_id=select_participant_by_index(participants, index))
    store.dispatch(event)
    return event
