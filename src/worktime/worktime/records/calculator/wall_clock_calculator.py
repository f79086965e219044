from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ...common.datetime_utils import parse_hhmm, parse_iso_date
from .base import WorkedTimeCalculator


class WallClockCalculator(WorkedTimeCalculator):
    """Standard rule: departure - arrival on the same day.

    A departure whose hour/minute is earlier than the arrival's is taken to be
    on the next day (shift crossing midnight). Equal times give 0.
    """

    def worked_minutes(self, *, date: str, arrival: Optional[str], departure: Optional[str]) -> int:
        if not arrival or not departure:
            return 0

        day = parse_iso_date(date)
        arr_t = parse_hhmm(arrival)
        dep_t = parse_hhmm(departure)

        start = datetime.combine(day, arr_t)
        end = datetime.combine(day, dep_t)
        if (dep_t.hour, dep_t.minute) < (arr_t.hour, arr_t.minute):
            end += timedelta(days=1)

        return int(round((end - start).total_seconds() / 60))
