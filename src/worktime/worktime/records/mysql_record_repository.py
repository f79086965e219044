from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, mysql_time_to_hhmm
from .model import DailyRecord, MonthlyRecord
from .repository import RecordRepository


def _to_daily(r: dict) -> DailyRecord:
    work_date = r["work_date"]
    return DailyRecord(
        date=work_date.strftime("%Y-%m-%d") if hasattr(work_date, "strftime") else str(work_date),
        arrival=mysql_time_to_hhmm(r.get("arrival")),
        departure=mysql_time_to_hhmm(r.get("departure")),
        worked_minutes=int(r["worked_minutes"]),
        missing_in=bool(r["missing_in"]),
        missing_out=bool(r["missing_out"]),
        has_multiple_logs=bool(r["has_multiple_logs"]),
        manually_edited=bool(r["manually_edited"]),
    )


class MySQLRecordRepository(RecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _write(self, cur, record: MonthlyRecord) -> None:
        cur.execute(
            """
            INSERT INTO monthly_records(employee_id, month, total_minutes)
            VALUES(%s,%s,%s)
            ON DUPLICATE KEY UPDATE total_minutes=VALUES(total_minutes)
            """,
            (record.employee_id, record.month, int(record.total_minutes)),
        )
        cur.execute(
            "DELETE FROM daily_records WHERE employee_id=%s AND month=%s",
            (record.employee_id, record.month),
        )
        cur.executemany(
            """
            INSERT INTO daily_records(
                employee_id, month, work_date, arrival, departure, worked_minutes,
                missing_in, missing_out, has_multiple_logs, manually_edited
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            [
                (
                    record.employee_id,
                    record.month,
                    d.date,
                    d.arrival,
                    d.departure,
                    int(d.worked_minutes),
                    int(d.missing_in),
                    int(d.missing_out),
                    int(d.has_multiple_logs),
                    int(d.manually_edited),
                )
                for d in record.daily_records
            ],
        )

    def list_for_month(self, month: str) -> Sequence[MonthlyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, arrival, departure, worked_minutes,
                       missing_in, missing_out, has_multiple_logs, manually_edited
                FROM daily_records
                WHERE month=%s
                ORDER BY employee_id ASC, work_date ASC
                """,
                (month,),
            )
            by_employee: dict[str, list[DailyRecord]] = defaultdict(list)
            for r in cur.fetchall():
                by_employee[r["employee_id"]].append(_to_daily(r))

        return [
            MonthlyRecord.build(employee_id=employee_id, month=month, daily_records=days)
            for employee_id, days in sorted(by_employee.items())
        ]

    def get(self, employee_id: str, month: str) -> Optional[MonthlyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, arrival, departure, worked_minutes,
                       missing_in, missing_out, has_multiple_logs, manually_edited
                FROM daily_records
                WHERE employee_id=%s AND month=%s
                ORDER BY work_date ASC
                """,
                (employee_id, month),
            )
            rows = cur.fetchall()
        if not rows:
            return None
        return MonthlyRecord.build(employee_id=employee_id, month=month, daily_records=[_to_daily(r) for r in rows])

    def has_month(self, month: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM monthly_records WHERE month=%s LIMIT 1", (month,))
            return cur.fetchone() is not None

    def replace_month(self, month: str, records: Sequence[MonthlyRecord]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            # daily_records rows go with ON DELETE CASCADE
            cur.execute("DELETE FROM monthly_records WHERE month=%s", (month,))
            for record in records:
                self._write(cur, record)

    def save(self, record: MonthlyRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            self._write(cur, record)
