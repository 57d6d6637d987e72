from __future__ import annotations

import importlib
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .advisor.controller import register as register_advisor
from .metrics.controller import register as register_metrics
from .state.controller import register as register_settings
from .subjects.controller import register as register_subjects
from .users.controller import register as register_users

logger = structlog.get_logger()

_SETTINGS_KEYS = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "DATA_DIR",
    "DEFAULT_TARGET_PERCENTAGE",
    "ADVISOR_ENABLED",
    "ADVISOR_MODEL",
    "ADVISOR_TIMEOUT_SECONDS",
)


def _status_for(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, NotFoundError):
        return 404
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e), "type": type(e).__name__}), _status_for(e)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled_error", error=str(e))
        message = f"Internal error: {e}" if app.config.get("DEBUG") else "Internal error"
        return jsonify({"error": message}), 500


def create_app(*, container: Optional[Container] = None, overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for key in _SETTINGS_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]

    if app.config.get("DEBUG"):
        logger.info(
            "app_starting",
            settings=settings_module,
            data_dir=str(app.config.get("DATA_DIR")),
            advisor_enabled=bool(app.config.get("ADVISOR_ENABLED")),
        )

    container = container or build_container(app_config=app.config)
    app.extensions["bunksmart"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_subjects(app, container)
    register_metrics(app, container)
    register_settings(app, container)
    register_advisor(app, container)

    return app
