"""Cursor handling and TIME conversion shared by the MySQL repositories."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Optional

from ..common.datetime_utils import format_hhmm
from .connection import DatabaseConnection

_MINUTES_PER_DAY = 24 * 60


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor) as one transaction: commit on exit, rollback on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def mysql_time_to_hhmm(value: Any) -> Optional[str]:
    """Render a TIME column as HH:MM, dropping seconds.

    mysql-connector returns TIME as a timedelta; a datetime.time or an
    'HH:MM[:SS]' string is accepted as well.
    """
    if value is None:
        return None
    if isinstance(value, time):
        return format_hhmm(value)
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) // 60 % _MINUTES_PER_DAY
        return format_hhmm(time(minutes // 60, minutes % 60))
    if isinstance(value, str):
        hours, minutes = (int(part) for part in value.strip().split(":")[:2])
        return format_hhmm(time(hours, minutes))
    raise TypeError(f"Unsupported TIME value: {value!r}")
