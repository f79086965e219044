from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_month, require_non_empty
from ..core.enums import EditableField
from ..core.exceptions import RegenerationRequired, ValidationError
from ..export.formatter import export_csv, export_filename
from ..logs.repository import LogRepository
from ..shifts.service import ShiftService
from .calculator.base import WorkedTimeCalculator
from .calculator.wall_clock_calculator import WallClockCalculator
from .generator import generate_monthly_records
from .model import DailyRecord, MonthlyRecord
from .reconciler import reconcile_monthly_record
from .repository import RecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str


class RecordService:
    def __init__(
        self,
        records: RecordRepository,
        logs: LogRepository,
        shifts: ShiftService,
        *,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._records = records
        self._logs = logs
        self._shifts = shifts
        self._calculator = calculator or WallClockCalculator()

    def generate(self, month: str, *, overwrite: bool = False) -> list[MonthlyRecord]:
        """Generate (or regenerate) every record of the month.

        Regenerating drops manual edits, so it needs overwrite=True once the
        month has records.
        """

        month = require_month(month)
        entries = list(self._logs.list_all())
        if not entries:
            raise ValidationError("Please upload an access log first")

        if self._records.has_month(month) and not overwrite:
            raise RegenerationRequired(month)

        records = generate_monthly_records(
            entries,
            month,
            self._shifts.get_defaults(),
            calculator=self._calculator,
        )
        self._records.replace_month(month, records)
        logger.info("Generated records for %d employees (%s)", len(records), month)
        return records

    def list_for_month(self, month: str) -> list[MonthlyRecord]:
        return list(self._records.list_for_month(require_month(month)))

    def edit_day(
        self,
        *,
        employee_id: str,
        month: str,
        day: str,
        field: EditableField | str,
        value: Optional[str],
    ) -> MonthlyRecord:
        month = require_month(month)
        employee_id = require_non_empty(employee_id, "employee_id")

        record = self._records.get(employee_id, month)
        if not record:
            raise ValidationError(f"No records for employee {employee_id} in {month}")

        updated = reconcile_monthly_record(record, day=day, field=field, value=value, calculator=self._calculator)
        self._records.save(updated)
        return updated

    def get_day(self, *, employee_id: str, month: str, day: str) -> Optional[DailyRecord]:
        record = self._records.get(employee_id, require_month(month))
        return record.day(day) if record else None

    def export(self, month: str) -> ExportFile:
        month = require_month(month)
        records = self.list_for_month(month)
        if not records:
            raise ValidationError("No records to export")
        return ExportFile(filename=export_filename(month), content=export_csv(records))
