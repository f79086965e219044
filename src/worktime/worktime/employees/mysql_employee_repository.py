from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, name, updated_at FROM employees WHERE employee_id=%s",
                (employee_id,),
            )
            r = cur.fetchone()
            if not r:
                return None
            return Employee(employee_id=r["employee_id"], name=r["name"], updated_at=r.get("updated_at"))

    def upsert(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, updated_at)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name), updated_at=VALUES(updated_at)
                """,
                (employee.employee_id, employee.name, employee.updated_at),
            )

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, name, updated_at FROM employees ORDER BY employee_id ASC")
            return [
                Employee(employee_id=r["employee_id"], name=r["name"], updated_at=r.get("updated_at"))
                for r in cur.fetchall()
            ]
