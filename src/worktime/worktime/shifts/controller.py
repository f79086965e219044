from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shift-defaults", methods=["GET"], endpoint="get_shift_defaults")
    def get_shift_defaults():
        return jsonify(asdict(container.shift_service.get_defaults()))

    @app.route("/api/shift-defaults", methods=["PUT"], endpoint="update_shift_defaults")
    def update_shift_defaults():
        payload = request.get_json(silent=True) or {}
        defaults = container.shift_service.update_defaults(
            start_time=payload.get("start_time", ""),
            end_time=payload.get("end_time", ""),
        )
        return jsonify(asdict(defaults))
