from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DailyRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    date: str
    arrival: Optional[str] = None
    departure: Optional[str] = None
    worked_minutes: int = 0
    missing_in: bool = False
    missing_out: bool = False
    has_multiple_logs: bool = False
    manually_edited: bool = False

    @property
    def has_punches(self) -> bool:
        return bool(self.arrival or self.departure)


@dataclass(frozen=True)
class MonthlyRecord:
    """Domain entity: one employee's daily records for a YYYY-MM month."""

    employee_id: str
    month: str
    daily_records: tuple[DailyRecord, ...]
    total_minutes: int = 0

    @classmethod
    def build(cls, *, employee_id: str, month: str, daily_records) -> "MonthlyRecord":
        days = tuple(daily_records)
        return cls(
            employee_id=employee_id,
            month=month,
            daily_records=days,
            total_minutes=sum(d.worked_minutes for d in days),
        )

    def day(self, date: str) -> Optional[DailyRecord]:
        for d in self.daily_records:
            if d.date == date:
                return d
        return None
