from __future__ import annotations

from typing import Optional, Protocol

from .model import ShiftDefaults


class ShiftDefaultsRepository(Protocol):
    def load(self) -> Optional[ShiftDefaults]:
        raise NotImplementedError

    def save(self, defaults: ShiftDefaults) -> None:
        raise NotImplementedError
