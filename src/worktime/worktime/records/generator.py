"""Monthly record generation.

Builds one MonthlyRecord per employee who punched at least once in the target
month. Every calendar day of the month gets a DailyRecord, including days
without punches. A missing IN (or OUT) is filled from the shift defaults and
flagged so the user can review it.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import DATE_FORMAT, format_hhmm, month_dates, month_key
from ..common.validators import require_month
from ..core.enums import Direction
from ..logs.model import LogEntry
from ..shifts.model import ShiftDefaults
from .calculator.base import WorkedTimeCalculator
from .calculator.wall_clock_calculator import WallClockCalculator
from .model import DailyRecord, MonthlyRecord


def _group_by_employee_and_day(entries: Iterable[LogEntry], month: str) -> dict[str, dict[date, list[LogEntry]]]:
    grouped: dict[str, dict[date, list[LogEntry]]] = defaultdict(lambda: defaultdict(list))
    for e in entries:
        if month_key(e.timestamp) != month:
            continue
        grouped[e.employee_id][e.timestamp.date()].append(e)
    return grouped


def build_daily_record(
    day: date,
    day_entries: Sequence[LogEntry],
    defaults: ShiftDefaults,
    calculator: WorkedTimeCalculator,
) -> DailyRecord:
    ins = [e for e in day_entries if e.direction == Direction.IN]
    outs = [e for e in day_entries if e.direction == Direction.OUT]

    arrival: Optional[str] = None
    departure: Optional[str] = None
    missing_in = False
    missing_out = False

    if ins:
        arrival = format_hhmm(min(e.timestamp for e in ins))
    elif outs:
        arrival = defaults.start_time
        missing_in = True

    if outs:
        departure = format_hhmm(max(e.timestamp for e in outs))
    elif ins:
        departure = defaults.end_time
        missing_out = True

    date_s = day.strftime(DATE_FORMAT)
    return DailyRecord(
        date=date_s,
        arrival=arrival,
        departure=departure,
        worked_minutes=calculator.worked_minutes(date=date_s, arrival=arrival, departure=departure),
        missing_in=missing_in,
        missing_out=missing_out,
        has_multiple_logs=len(ins) > 1 or len(outs) > 1,
    )


def generate_monthly_records(
    entries: Iterable[LogEntry],
    month: str,
    defaults: ShiftDefaults,
    *,
    calculator: Optional[WorkedTimeCalculator] = None,
) -> list[MonthlyRecord]:
    """Derive the month's records, sorted by employee ID."""

    month = require_month(month)
    calculator = calculator or WallClockCalculator()
    days = month_dates(month)
    grouped = _group_by_employee_and_day(entries, month)

    records: list[MonthlyRecord] = []
    for employee_id in sorted(grouped):
        by_day = grouped[employee_id]
        records.append(
            MonthlyRecord.build(
                employee_id=employee_id,
                month=month,
                daily_records=[build_daily_record(d, by_day.get(d, []), defaults, calculator) for d in days],
            )
        )
    return records
