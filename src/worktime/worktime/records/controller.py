from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import current_month
from ..container import Container
from ..export.formatter import format_duration, warning_labels
from .model import DailyRecord, MonthlyRecord


def _day_to_ui(day: DailyRecord) -> dict:
    return {**asdict(day), "worked_hours": format_duration(day.worked_minutes), "warnings": warning_labels(day)}


def _to_ui(record: MonthlyRecord, names: dict[str, str]) -> dict:
    return {
        "employee_id": record.employee_id,
        "name": names.get(record.employee_id),
        "month": record.month,
        "total_minutes": record.total_minutes,
        "total_hours": format_duration(record.total_minutes),
        "daily_records": [_day_to_ui(d) for d in record.daily_records],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/records/<month>/generate", methods=["POST"], endpoint="generate_records")
    def generate_records(month: str):
        payload = request.get_json(silent=True) or {}
        records = container.record_service.generate(month, overwrite=bool(payload.get("overwrite")))
        names = container.employee_service.names()
        return jsonify({"generated": len(records), "records": [_to_ui(r, names) for r in records]}), 201

    @app.route("/api/records", methods=["GET"], endpoint="list_current_records")
    @app.route("/api/records/<month>", methods=["GET"], endpoint="list_records")
    def list_records(month: str | None = None):
        month = month or current_month()
        records = container.record_service.list_for_month(month)
        names = container.employee_service.names()
        return jsonify({"month": month, "records": [_to_ui(r, names) for r in records]})

    @app.route("/api/records/<month>/<employee_id>/<day>", methods=["PATCH"], endpoint="edit_day")
    def edit_day(month: str, employee_id: str, day: str):
        payload = request.get_json(silent=True) or {}
        record = container.record_service.edit_day(
            employee_id=employee_id,
            month=month,
            day=day,
            field=payload.get("field", ""),
            value=payload.get("value"),
        )
        return jsonify(_to_ui(record, container.employee_service.names()))

    @app.route("/api/records/<month>/export.csv", methods=["GET"], endpoint="export_records")
    def export_records(month: str):
        export = container.record_service.export(month)
        return app.response_class(
            export.content.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/records/<month>/<employee_id>/<day>", methods=["GET"], endpoint="get_day")
    def get_day(month: str, employee_id: str, day: str):
        daily = container.record_service.get_day(employee_id=employee_id, month=month, day=day)
        if daily is None:
            return jsonify({"error": f"No record for employee {employee_id} on {day}"}), 404
        return jsonify(_day_to_ui(daily))

    @app.route("/api/records/<month>/report", methods=["GET"], endpoint="monthly_report")
    def monthly_report(month: str):
        """Printable report: one section per employee, punched days only."""
        data = container.report_service.build_monthly_report(month, employee_id=request.args.get("employee_id"))
        return jsonify(
            {
                "month": data.month,
                "month_name": data.month_name,
                "generated_at": data.generated_at.isoformat(timespec="minutes"),
                "generated": data.generated_label,
                "employees": [asdict(section) for section in data.employees],
            }
        )
