from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .logs.mysql_log_repository import MySQLLogRepository
from .logs.repository import LogRepository
from .logs.service import LogService
from .records.calculator.wall_clock_calculator import WallClockCalculator
from .records.mysql_record_repository import MySQLRecordRepository
from .records.report import MonthlyReportService
from .records.repository import RecordRepository
from .records.service import RecordService
from .shifts.model import ShiftDefaults
from .shifts.mysql_shift_repository import MySQLShiftDefaultsRepository
from .shifts.repository import ShiftDefaultsRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    logs_repo: LogRepository
    shifts_repo: ShiftDefaultsRepository
    records_repo: RecordRepository
    employees_repo: EmployeeRepository

    log_service: LogService
    shift_service: ShiftService
    record_service: RecordService
    employee_service: EmployeeService
    report_service: MonthlyReportService


def wire_container(
    *,
    logs_repo: LogRepository,
    shifts_repo: ShiftDefaultsRepository,
    records_repo: RecordRepository,
    employees_repo: EmployeeRepository,
    shift_defaults: ShiftDefaults | None = None,
) -> Container:
    shift_service = ShiftService(shifts_repo, fallback=shift_defaults)
    record_service = RecordService(records_repo, logs_repo, shift_service, calculator=WallClockCalculator())
    employee_service = EmployeeService(employees_repo)
    return Container(
        logs_repo=logs_repo,
        shifts_repo=shifts_repo,
        records_repo=records_repo,
        employees_repo=employees_repo,
        log_service=LogService(logs_repo),
        shift_service=shift_service,
        record_service=record_service,
        employee_service=employee_service,
        report_service=MonthlyReportService(record_service, employee_service),
    )


def build_container(*, db_config: dict, shift_defaults: ShiftDefaults | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        logs_repo=MySQLLogRepository(conn),
        shifts_repo=MySQLShiftDefaultsRepository(conn),
        records_repo=MySQLRecordRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        shift_defaults=shift_defaults,
    )
