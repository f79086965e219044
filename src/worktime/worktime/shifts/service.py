from __future__ import annotations

from typing import Optional

from ..common.validators import require_hhmm
from .model import ShiftDefaults
from .repository import ShiftDefaultsRepository


class ShiftService:
    def __init__(self, defaults: ShiftDefaultsRepository, *, fallback: Optional[ShiftDefaults] = None):
        self._defaults = defaults
        self._fallback = fallback or ShiftDefaults()

    def get_defaults(self) -> ShiftDefaults:
        return self._defaults.load() or self._fallback

    def update_defaults(self, *, start_time: str, end_time: str) -> ShiftDefaults:
        defaults = ShiftDefaults(
            start_time=require_hhmm(start_time, "start_time"),
            end_time=require_hhmm(end_time, "end_time"),
        )
        self._defaults.save(defaults)
        return defaults
