from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import setup_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/advisor", methods=["POST"], endpoint="advisor")
    @setup_required(container.store)
    def advisor():
        advice = container.advisor_service.get_advice(
            container.store.subjects,
            container.store.settings.target_percentage,
        )
        return jsonify({"advice": advice.text, "isFallback": advice.is_fallback})
