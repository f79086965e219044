from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import MonthlyRecord


class RecordRepository(Protocol):
    """Monthly records keyed by (employee_id, month)."""

    def list_for_month(self, month: str) -> Sequence[MonthlyRecord]:
        raise NotImplementedError

    def get(self, employee_id: str, month: str) -> Optional[MonthlyRecord]:
        raise NotImplementedError

    def has_month(self, month: str) -> bool:
        raise NotImplementedError

    def replace_month(self, month: str, records: Sequence[MonthlyRecord]) -> None:
        """Drop every record of the month (manual edits included) and store `records`."""

        raise NotImplementedError

    def save(self, record: MonthlyRecord) -> None:
        raise NotImplementedError
