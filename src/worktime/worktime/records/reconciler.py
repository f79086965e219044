from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..common.validators import optional_hhmm
from ..core.enums import EditableField
from ..core.exceptions import ValidationError
from .calculator.base import WorkedTimeCalculator
from .calculator.wall_clock_calculator import WallClockCalculator
from .model import DailyRecord, MonthlyRecord


def apply_manual_edit(
    day: DailyRecord,
    *,
    field: EditableField,
    value: Optional[str],
    calculator: Optional[WorkedTimeCalculator] = None,
) -> DailyRecord:
    """Overwrite arrival or departure and recompute the worked time.

    missing_in/missing_out/has_multiple_logs describe the original punches and
    are kept as they are. An empty value clears the field.
    """

    calculator = calculator or WallClockCalculator()
    try:
        field = EditableField(field)
    except ValueError:
        raise ValidationError(f"Field cannot be edited: {field!r}")
    new_value = optional_hhmm(value, field.value)

    edited = replace(day, **{field.value: new_value}, manually_edited=True)
    return replace(
        edited,
        worked_minutes=calculator.worked_minutes(
            date=edited.date,
            arrival=edited.arrival,
            departure=edited.departure,
        ),
    )


def reconcile_monthly_record(
    record: MonthlyRecord,
    *,
    day: str,
    field: EditableField,
    value: Optional[str],
    calculator: Optional[WorkedTimeCalculator] = None,
) -> MonthlyRecord:
    if record.day(day) is None:
        raise ValidationError(f"No day {day} in {record.month} for employee {record.employee_id}")

    days = [
        apply_manual_edit(d, field=field, value=value, calculator=calculator) if d.date == day else d
        for d in record.daily_records
    ]
    return MonthlyRecord.build(employee_id=record.employee_id, month=record.month, daily_records=days)
