from __future__ import annotations

from typing import Sequence

from ..core.enums import Direction
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import LogEntry
from .repository import LogRepository


class MySQLLogRepository(LogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_all(self, entries: Sequence[LogEntry]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM access_logs")
            if entries:
                cur.executemany(
                    """
                    INSERT INTO access_logs(employee_id, punched_at, direction)
                    VALUES(%s,%s,%s)
                    """,
                    [(e.employee_id, e.timestamp, e.direction.value) for e in entries],
                )

    def list_all(self) -> Sequence[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, punched_at, direction
                FROM access_logs
                ORDER BY log_id ASC
                """
            )
            return [
                LogEntry(
                    employee_id=r["employee_id"],
                    timestamp=r["punched_at"],
                    direction=Direction(r["direction"]),
                )
                for r in cur.fetchall()
            ]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM access_logs")
            row = cur.fetchone()
            return int(row["n"]) if row else 0
