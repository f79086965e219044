from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_SHIFT_END, DEFAULT_SHIFT_START


@dataclass(frozen=True)
class ShiftDefaults:
    """Fallback start/end times (HH:MM) used when a punch is missing."""

    start_time: str = DEFAULT_SHIFT_START
    end_time: str = DEFAULT_SHIFT_END
