from __future__ import annotations

from functools import wraps

from flask import jsonify, request

from ..core.exceptions import ValidationError
from ..state.store import AppStateStore


def login_required(store: AppStateStore):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not store.settings.is_logged_in:
                return jsonify({"error": "Please log in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    return decorator


def setup_required(store: AppStateStore):
    """Logged in and profile completed (name filled in)."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            settings = store.settings
            if not settings.is_logged_in:
                return jsonify({"error": "Please log in to continue"}), 401
            if not settings.has_completed_setup or not (settings.profile and settings.profile.name):
                return jsonify({"error": "Please complete your profile first"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_body() -> dict:
    """Request body as a JSON object; a missing body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
