from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import json_body, setup_required
from ..container import Container
from ..core.constants import TARGET_SLIDER_MAX, TARGET_SLIDER_MIN, TARGET_SLIDER_STEP


def register(app: Flask, container: Container) -> None:
    guard = setup_required(container.store)

    def _settings_to_dict(settings) -> dict:
        return {
            "targetPercentage": settings.target_percentage,
            "isLoggedIn": settings.is_logged_in,
            "hasCompletedSetup": settings.has_completed_setup,
            "slider": {"min": TARGET_SLIDER_MIN, "max": TARGET_SLIDER_MAX, "step": TARGET_SLIDER_STEP},
        }

    @app.route("/settings", methods=["GET"], endpoint="get_settings")
    @guard
    def get_settings():
        return jsonify(_settings_to_dict(container.settings_service.get_settings()))

    @app.route("/settings/target", methods=["PUT"], endpoint="set_target")
    @guard
    def set_target():
        data = json_body()
        settings = container.settings_service.set_target(data.get("targetPercentage"))
        return jsonify(_settings_to_dict(settings))
