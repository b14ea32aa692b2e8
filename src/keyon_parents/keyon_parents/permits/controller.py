from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import FetchFailure, ValidationError
from ..users.session import login_required, require_student


def register(app: Flask, container: Container) -> None:
    def _date_arg(name: str, default):
        value = request.args.get(name)
        if not value:
            return default
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"Fecha '{name}' no es válida (YYYY-MM-DD)")

    @app.route("/api/permits/bathroom", endpoint="bathroom_permits")
    @login_required
    def bathroom_permits(ctx):
        try:
            day = _date_arg("date", container.clock().date())
            permits = container.permit_service.bathroom_permits(require_student(ctx), day)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return jsonify({"available": False, "permits": []}), 503
        return jsonify({"available": True, "permits": [p.to_dict() for p in permits]})

    @app.route("/api/permits/special", endpoint="special_permits")
    @login_required
    def special_permits(ctx):
        today = container.clock().date()
        try:
            start = _date_arg("start", today.replace(day=1))
            end = _date_arg("end", today)
            permits = container.permit_service.special_permits(require_student(ctx), start, end)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return jsonify({"available": False, "permits": []}), 503
        return jsonify({"available": True, "permits": [p.to_dict() for p in permits]})
