from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Direction of a badge punch."""

    IN = "IN"
    OUT = "OUT"


class EditableField(str, Enum):
    """Day fields a user may overwrite by hand."""

    ARRIVAL = "arrival"
    DEPARTURE = "departure"
