from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_SHIFT_END, DEFAULT_SHIFT_START, MAX_DISPLAYED_WARNINGS
from .core.exceptions import DomainError, ParseError, RegenerationRequired, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .employees.controller import register as register_employees
from .logs.controller import register as register_logs
from .records.controller import register as register_records
from .shifts.controller import register as register_shifts
from .shifts.model import ShiftDefaults

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ParseError)
    def handle_parse(e: ParseError):
        return jsonify({"error": str(e)}), 422

    @app.errorhandler(RegenerationRequired)
    def handle_regeneration(e: RegenerationRequired):
        return jsonify({"error": str(e), "month": e.month, "confirm": "overwrite"}), 409

    @app.errorhandler(DomainError)
    def handle_domain(e: DomainError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return jsonify({"error": f"Internal error: {e}"}), 500
        return jsonify({"error": "Internal error"}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["MAX_DISPLAYED_WARNINGS"] = int(getattr(settings, "MAX_DISPLAYED_WARNINGS", MAX_DISPLAYED_WARNINGS))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            config = DBConfig.from_dict(db_config)
            conn = DatabaseConnection.get_instance(config)
            apply_schema(conn, config.database)
            logger.info("Schema ready (tables=%d)", len(list_tables(conn)))

        container = build_container(
            db_config=db_config,
            shift_defaults=ShiftDefaults(
                start_time=getattr(settings, "DEFAULT_SHIFT_START", DEFAULT_SHIFT_START),
                end_time=getattr(settings, "DEFAULT_SHIFT_END", DEFAULT_SHIFT_END),
            ),
        )

    _register_error_handlers(app)
    register_logs(app, container)
    register_shifts(app, container)
    register_records(app, container)
    register_employees(app, container)

    return app
