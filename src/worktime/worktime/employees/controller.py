from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify(container.employee_service.names())

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="rename_employee")
    def rename_employee(employee_id: str):
        payload = request.get_json(silent=True) or {}
        employee = container.employee_service.rename(employee_id, payload.get("name", ""))
        return jsonify({"employee_id": employee.employee_id, "name": employee.name})
