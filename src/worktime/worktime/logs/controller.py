from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..container import Container


def _read_upload() -> str:
    """Log text from a multipart `file` field, a JSON `content` key or the raw body."""

    upload = request.files.get("file")
    if upload is not None:
        return upload.read().decode("utf-8-sig", errors="replace")

    if request.is_json:
        payload = request.get_json(silent=True) or {}
        return str(payload.get("content") or "")

    return request.get_data(as_text=True)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/logs", methods=["POST"], endpoint="upload_logs")
    def upload_logs():
        result = container.log_service.upload(_read_upload())
        limit = int(current_app.config["MAX_DISPLAYED_WARNINGS"])
        return jsonify(
            {
                "loaded": len(result.entries),
                "skipped_lines": result.skipped_lines,
                "warnings": result.warnings[:limit],
                "more_warnings": max(len(result.warnings) - limit, 0),
            }
        ), 201

    @app.route("/api/logs", methods=["GET"], endpoint="logs_summary")
    def logs_summary():
        return jsonify({"count": container.log_service.count()})
