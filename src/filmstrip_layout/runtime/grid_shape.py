"""Resolve a participant count into a tile view grid shape."""

from __future__ import annotations

import math

from filmstrip_layout.config_defaults import DEFAULT_MAX_COLUMNS
from filmstrip_layout.type_defs import GridShape


def resolve_grid_shape(
    participant_count: int,
    max_columns: int = DEFAULT_MAX_COLUMNS,
) -> GridShape:
    """
    Return a near-square grid able to hold every participant.

    Columns grow with the square root of the count up to ``max_columns``;
    rows absorb the rest. The shape is never smaller than 1x1.
    """
    count = max(1, participant_count)
    columns = max(1, min(math.ceil(math.sqrt(count)), max_columns))
    rows = math.ceil(count / columns)
    return GridShape(columns=columns, rows=rows)
