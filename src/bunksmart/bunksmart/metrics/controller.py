from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import setup_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guard = setup_required(container.store)

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @guard
    def dashboard():
        data = container.metrics_service.build_dashboard()
        return jsonify(
            {
                "targetPercentage": data.target_percentage,
                "overall": data.overall.to_dict(),
                "split": data.split,
                "subjects": data.subjects,
            }
        )

    @app.route("/analytics", methods=["GET"], endpoint="analytics")
    @guard
    def analytics():
        return jsonify({"subjects": container.metrics_service.build_analytics()})
