"""Access log parser.

Raw logs come from the badge reader export: one punch per line, tab separated,
``employee id / timestamp / (unused) / direction code``. Bad lines are skipped
with a warning, only an input without a single usable line is an error.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

import pandas as pd

from ..core.constants import (
    LOG_DELIMITER,
    LOG_DIRECTION_FIELD,
    LOG_EMPLOYEE_FIELD,
    LOG_MIN_FIELDS,
    LOG_TIMESTAMP_FIELD,
)
from ..core.enums import Direction
from ..core.exceptions import ParseError
from .model import LogEntry, ParseResult

DIRECTION_CODES = {
    "0": Direction.IN,
    "1": Direction.OUT,
}


class _SkipLine(Exception):
    pass


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a date-time in any format pandas recognises, or None.

    Offsets are dropped: the wall-clock time written in the log is kept.
    Text without a single digit is refused, so pandas never resolves
    words like "now" or "today" against the clock.
    """
    text = (value or "").strip()
    if not any(ch.isdigit() for ch in text):
        return None
    try:
        ts = pd.to_datetime(text)
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is pd.NaT or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


def _parse_line(line: str) -> LogEntry:
    fields = line.split(LOG_DELIMITER)
    if len(fields) < LOG_MIN_FIELDS:
        raise _SkipLine(f"expected at least {LOG_MIN_FIELDS} fields, got {len(fields)}")

    employee_id = fields[LOG_EMPLOYEE_FIELD].strip()
    if not employee_id:
        raise _SkipLine("missing employee ID")

    raw_timestamp = fields[LOG_TIMESTAMP_FIELD].strip()
    timestamp = parse_timestamp(raw_timestamp)
    if timestamp is None:
        raise _SkipLine(f"invalid timestamp '{raw_timestamp}'")

    code = fields[LOG_DIRECTION_FIELD].strip()
    direction = DIRECTION_CODES.get(code)
    if direction is None:
        raise _SkipLine(f"invalid direction code '{code}'")

    return LogEntry(employee_id=employee_id, timestamp=timestamp, direction=direction)


def parse_access_log(content: str) -> ParseResult:
    entries: list[LogEntry] = []
    warnings: list[str] = []

    for line_no, line in enumerate((content or "").splitlines(), start=1):
        if not line.strip():
            continue
        try:
            entries.append(_parse_line(line))
        except _SkipLine as e:
            warnings.append(f"Line {line_no}: {e}")

    if not entries:
        raise ParseError("no valid entries")

    return ParseResult(entries=entries, skipped_lines=len(warnings), warnings=warnings)
