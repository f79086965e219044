from __future__ import annotations

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def rename(self, employee_id: str, name: str) -> Employee:
        employee = Employee(
            employee_id=require_non_empty(employee_id, "employee_id"),
            name=require_non_empty(name, "name"),
            updated_at=now_local(),
        )
        self._employees.upsert(employee)
        return employee

    def names(self) -> dict[str, str]:
        return {e.employee_id: e.name for e in self._employees.list_all()}

    def display_name(self, employee_id: str) -> str:
        employee = self._employees.get(employee_id)
        return employee.name if employee else f"Employee {employee_id}"
