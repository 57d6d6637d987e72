from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import json_body, login_required
from ..container import Container


def _profile_to_dict(profile) -> dict | None:
    if not profile:
        return None
    return {
        "email": profile.email,
        "name": profile.name,
        "usn": profile.usn,
        "semester": profile.semester,
        "collegeName": profile.college_name,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        code = container.auth_service.request_signup(data.get("email", ""), data.get("password", ""))

        body = {"status": "code_sent"}
        if bool(app.config.get("DEBUG", False)):
            # No mail delivery in this app; expose the code while developing.
            body["debug_code"] = code
        return jsonify(body), 202

    @app.route("/auth/verify", methods=["POST"], endpoint="verify_signup")
    def verify_signup():
        data = json_body()
        s_user = container.auth_service.verify_signup(data.get("email", ""), data.get("code", ""))
        return jsonify({"email": s_user.email, "hasCompletedSetup": s_user.has_completed_setup}), 201

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        return jsonify({"email": s_user.email, "hasCompletedSetup": s_user.has_completed_setup})

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return jsonify({"status": "logged_out"})

    @app.route("/profile", methods=["GET"], endpoint="get_profile")
    @login_required(container.store)
    def get_profile():
        return jsonify({"profile": _profile_to_dict(container.profile_service.get_profile())})

    @app.route("/profile", methods=["POST"], endpoint="complete_profile")
    @login_required(container.store)
    def complete_profile():
        data = json_body()
        profile = container.profile_service.complete_profile(
            name=data.get("name", ""),
            usn=data.get("usn", ""),
            semester=data.get("semester", ""),
            college_name=data.get("collegeName", ""),
        )
        return jsonify({"profile": _profile_to_dict(profile)})
