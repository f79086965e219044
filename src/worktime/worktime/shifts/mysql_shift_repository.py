from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, mysql_time_to_hhmm
from .model import ShiftDefaults
from .repository import ShiftDefaultsRepository

_DEFAULTS_ROW_ID = 1


class MySQLShiftDefaultsRepository(ShiftDefaultsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Optional[ShiftDefaults]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT start_time, end_time FROM shift_defaults WHERE defaults_id=%s",
                (_DEFAULTS_ROW_ID,),
            )
            row = cur.fetchone()
            if not row:
                return None
            return ShiftDefaults(
                start_time=mysql_time_to_hhmm(row["start_time"]),
                end_time=mysql_time_to_hhmm(row["end_time"]),
            )

    def save(self, defaults: ShiftDefaults) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shift_defaults(defaults_id, start_time, end_time)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE start_time=VALUES(start_time), end_time=VALUES(end_time)
                """,
                (_DEFAULTS_ROW_ID, defaults.start_time, defaults.end_time),
            )
