from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked duration)."""

    @abstractmethod
    def worked_minutes(self, *, date: str, arrival: Optional[str], departure: Optional[str]) -> int:
        raise NotImplementedError
