from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import json_body, setup_required
from ..container import Container
from ..metrics.calculator.standard_calculator import calculate_metrics


def register(app: Flask, container: Container) -> None:
    guard = setup_required(container.store)

    def _subject_to_dict(subject) -> dict:
        target = container.store.settings.target_percentage
        return {
            "id": subject.subject_id,
            "name": subject.name,
            "color": subject.color,
            "metrics": calculate_metrics(subject, target).to_dict(),
        }

    @app.route("/subjects", methods=["GET"], endpoint="list_subjects")
    @guard
    def list_subjects():
        return jsonify({"subjects": [_subject_to_dict(s) for s in container.subject_service.list_subjects()]})

    @app.route("/subjects", methods=["POST"], endpoint="add_subject")
    @guard
    def add_subject():
        data = json_body()
        subject = container.subject_service.add_subject(name=data.get("name", ""), color=data.get("color"))
        return jsonify(_subject_to_dict(subject)), 201

    @app.route("/subjects/reset", methods=["POST"], endpoint="reset_semester")
    @guard
    def reset_semester():
        container.subject_service.reset_semester()
        return jsonify({"status": "reset"})

    @app.route("/subjects/<subject_id>", methods=["DELETE"], endpoint="delete_subject")
    @guard
    def delete_subject(subject_id: str):
        container.subject_service.delete_subject(subject_id)
        return jsonify({"status": "deleted"})

    @app.route("/subjects/<subject_id>/attendance", methods=["POST"], endpoint="log_attendance")
    @guard
    def log_attendance(subject_id: str):
        data = json_body()
        event = container.subject_service.log_attendance(subject_id, data.get("type", ""))
        subject = container.subject_service.get_subject(subject_id)

        body = _subject_to_dict(subject)
        body["record"] = {"id": event.event_id, "timestamp": event.timestamp, "type": event.kind.value}
        return jsonify(body), 201

    @app.route("/subjects/<subject_id>/attendance/<record_id>", methods=["DELETE"], endpoint="remove_record")
    @guard
    def remove_record(subject_id: str, record_id: str):
        container.subject_service.remove_record(subject_id, record_id)
        return jsonify(_subject_to_dict(container.subject_service.get_subject(subject_id)))

    @app.route("/subjects/<subject_id>/history", methods=["GET"], endpoint="subject_history")
    @guard
    def subject_history(subject_id: str):
        return jsonify({"history": container.subject_service.get_history_ui(subject_id)})
