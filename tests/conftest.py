from __future__ import annotations

from typing import Optional, Sequence

import pytest

from worktime.container import Container, wire_container
from worktime.employees.model import Employee
from worktime.logs.model import LogEntry
from worktime.records.model import MonthlyRecord
from worktime.shifts.model import ShiftDefaults


class InMemoryLogs:
    def __init__(self, entries: Sequence[LogEntry] = ()):
        self._entries = list(entries)

    def replace_all(self, entries: Sequence[LogEntry]) -> None:
        self._entries = list(entries)

    def list_all(self) -> Sequence[LogEntry]:
        return list(self._entries)

    def count(self) -> int:
        return len(self._entries)


class InMemoryShiftDefaults:
    def __init__(self, defaults: Optional[ShiftDefaults] = None):
        self.defaults = defaults

    def load(self) -> Optional[ShiftDefaults]:
        return self.defaults

    def save(self, defaults: ShiftDefaults) -> None:
        self.defaults = defaults


class InMemoryRecords:
    def __init__(self):
        self._by_key: dict[tuple[str, str], MonthlyRecord] = {}

    def list_for_month(self, month: str) -> Sequence[MonthlyRecord]:
        items = [r for (_, m), r in self._by_key.items() if m == month]
        items.sort(key=lambda r: r.employee_id)
        return items

    def get(self, employee_id: str, month: str) -> Optional[MonthlyRecord]:
        return self._by_key.get((employee_id, month))

    def has_month(self, month: str) -> bool:
        return any(m == month for (_, m) in self._by_key)

    def replace_month(self, month: str, records: Sequence[MonthlyRecord]) -> None:
        self._by_key = {k: v for k, v in self._by_key.items() if k[1] != month}
        for r in records:
            self._by_key[(r.employee_id, r.month)] = r

    def save(self, record: MonthlyRecord) -> None:
        self._by_key[(record.employee_id, record.month)] = record


class InMemoryEmployees:
    def __init__(self):
        self._by_id: dict[str, Employee] = {}

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def upsert(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def list_all(self) -> Sequence[Employee]:
        return [self._by_id[k] for k in sorted(self._by_id)]


SAMPLE_LOG = "\n".join(
    [
        "E1\t2024-02-01 08:00:00\t1\t0",
        "E1\t2024-02-01 17:00:00\t1\t1",
        "E1\t2024-02-02 17:45:00\t1\t1",
        "E2\t2024-02-01 09:00:00\t2\t0",
        "E2\t2024-02-01 09:05:00\t2\t0",
        "E2\t2024-02-01 18:30:00\t2\t1",
        "E3\t2024-03-01 08:00:00\t3\t0",
    ]
)


@pytest.fixture
def container() -> Container:
    return wire_container(
        logs_repo=InMemoryLogs(),
        shifts_repo=InMemoryShiftDefaults(),
        records_repo=InMemoryRecords(),
        employees_repo=InMemoryEmployees(),
    )


@pytest.fixture
def sample_log() -> str:
    return SAMPLE_LOG
