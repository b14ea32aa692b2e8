from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthenticationError, FetchFailure, ValidationError
from .session import end_session, login_required, start_session

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            ctx = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except (AuthenticationError, ValidationError) as e:
            return jsonify({"success": False, "message": str(e)}), 401
        except FetchFailure:
            return jsonify({"success": False, "message": "Servicio no disponible, intenta más tarde"}), 503

        start_session(ctx)
        return jsonify({"success": True, "user": ctx.to_session()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        end_session()
        return jsonify({"success": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me(ctx):
        try:
            push_enabled = container.push_service.is_enabled(ctx)
        except FetchFailure:
            push_enabled = False
        return jsonify({"user": ctx.to_session(), "push_enabled": push_enabled})
