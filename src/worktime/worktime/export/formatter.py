from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import EXPORT_HEADER, EXPORT_TOTAL_LABEL, EXPORT_WARNING_SEPARATOR
from ..records.model import DailyRecord, MonthlyRecord


def format_duration(minutes: int) -> str:
    """Minutes as H:MM (hours unpadded), e.g. 90 -> '1:30'."""
    minutes = int(minutes)
    return f"{minutes // 60}:{minutes % 60:02d}"


def warning_labels(day: DailyRecord) -> list[str]:
    labels = []
    if day.missing_in:
        labels.append("Missing IN")
    if day.missing_out:
        labels.append("Missing OUT")
    if day.has_multiple_logs:
        labels.append("Multiple logs")
    if day.manually_edited:
        labels.append("Manually edited")
    return labels


def export_filename(month: str) -> str:
    return f"work-time-{month}.csv"


def export_csv(records: Iterable[MonthlyRecord]) -> str:
    """Render records as CSV.

    Days without punches are left out. Each employee block ends with a TOTAL
    row and a blank line.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)

    for record in records:
        for day in record.daily_records:
            if not day.has_punches:
                continue
            writer.writerow(
                [
                    record.employee_id,
                    day.date,
                    day.arrival or "",
                    day.departure or "",
                    format_duration(day.worked_minutes),
                    EXPORT_WARNING_SEPARATOR.join(warning_labels(day)),
                ]
            )
        writer.writerow([record.employee_id, EXPORT_TOTAL_LABEL, "", "", format_duration(record.total_minutes), ""])
        writer.writerow([])

    return out.getvalue()
