"""Printable monthly report: one section per employee, punched days only."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common import datetime_utils
from ..common.validators import require_month
from ..core.constants import REPORT_EMPTY_TIME, REPORT_NOTE_SEPARATOR
from ..core.exceptions import ValidationError
from ..employees.service import EmployeeService
from ..export.formatter import format_duration
from .model import DailyRecord, MonthlyRecord
from .service import RecordService


@dataclass(frozen=True)
class EmployeeReport:
    employee_id: str
    title: str
    rows: list[dict]
    total_minutes: int
    total_hours: str


@dataclass(frozen=True)
class ReportData:
    month: str
    month_name: str
    generated_at: datetime
    employees: list[EmployeeReport]

    @property
    def generated_label(self) -> str:
        ts = self.generated_at
        return f"{ts:%B} {ts.day}, {ts.year} {ts:%H:%M}"


def report_notes(day: DailyRecord) -> list[str]:
    notes = []
    if day.missing_in:
        notes.append("No IN")
    if day.missing_out:
        notes.append("No OUT")
    if day.has_multiple_logs:
        notes.append("Multiple logs")
    if day.manually_edited:
        notes.append("Edited")
    return notes


def _report_row(day: DailyRecord) -> dict:
    d = datetime_utils.parse_iso_date(day.date)
    return {
        "date": day.date,
        "short_date": f"{d:%b} {d.day}",
        "weekday": f"{d:%a}",
        "arrival": day.arrival or REPORT_EMPTY_TIME,
        "departure": day.departure or REPORT_EMPTY_TIME,
        "hours": format_duration(day.worked_minutes),
        "notes": REPORT_NOTE_SEPARATOR.join(report_notes(day)),
    }


class MonthlyReportService:
    def __init__(self, records: RecordService, employees: EmployeeService):
        self._records = records
        self._employees = employees

    def build_monthly_report(self, month: str, *, employee_id: Optional[str] = None) -> ReportData:
        month = require_month(month)
        records: list[MonthlyRecord] = self._records.list_for_month(month)
        if employee_id:
            records = [r for r in records if r.employee_id == employee_id]
        if not records:
            raise ValidationError("No records to report")

        sections = [
            EmployeeReport(
                employee_id=r.employee_id,
                title=self._employees.display_name(r.employee_id),
                rows=[_report_row(d) for d in r.daily_records if d.has_punches],
                total_minutes=r.total_minutes,
                total_hours=format_duration(r.total_minutes),
            )
            for r in records
        ]
        year, month_num = datetime_utils.parse_month(month)
        return ReportData(
            month=month,
            month_name=f"{datetime(year, month_num, 1):%B %Y}",
            generated_at=datetime_utils.now_local(),
            employees=sections,
        )
