from __future__ import annotations

import calendar
from datetime import date, datetime, time

from ..core.exceptions import ValidationError

MONTH_FORMAT = "%Y-%m"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), MONTH_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    return parsed.year, parsed.month


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_dates(month: str) -> list[date]:
    """Every calendar day of a YYYY-MM month, ascending."""
    year, month_num = parse_month(month)
    return [date(year, month_num, day) for day in range(1, days_in_month(year, month_num) + 1)]


def month_key(value: datetime | date) -> str:
    return value.strftime(MONTH_FORMAT)


def parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime((value or "").strip(), TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def format_hhmm(value: datetime | time) -> str:
    return value.strftime(TIME_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def current_month() -> str:
    return month_key(now_local())
