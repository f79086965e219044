from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def upsert(self, employee: Employee) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
