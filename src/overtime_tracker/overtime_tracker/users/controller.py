from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.session import current_context, end_session, start_session
from ..common.validators import require_object
from ..core.exceptions import ValidationError
from ..container import Container


def _credentials():
    body = require_object(request.get_json(silent=True), "Request body")
    username, password = body.get("username"), body.get("password")
    for name, value in (("username", username), ("password", password)):
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{name} must be a string")
    return username, password


def register(app: Flask, container: Container) -> None:
    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        username, password = _credentials()
        user = container.auth_service.register(username, password)
        start_session(user)
        return jsonify({"success": True, "username": user.username})

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        username, password = _credentials()
        user = container.auth_service.authenticate(username, password)
        start_session(user)
        return jsonify({"success": True, "username": user.username})

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        end_session()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="api_me")
    def api_me():
        ctx = current_context()
        if ctx is None:
            return jsonify({"loggedIn": False})
        return jsonify({"loggedIn": True, "username": ctx.username})
