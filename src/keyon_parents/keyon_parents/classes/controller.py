from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import FetchFailure, ValidationError
from ..users.session import login_required, require_student


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/schedule", endpoint="class_schedule")
    @login_required
    def class_schedule(ctx):
        try:
            schedule = container.class_service.weekly_schedule(require_student(ctx))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return jsonify({"available": False, "schedule": None}), 503
        return jsonify({"available": True, "schedule": {day: [s.to_dict() for s in slots] for day, slots in schedule.items()}})

    @app.route("/api/classes/attendance", endpoint="class_attendance")
    @login_required
    def class_attendance(ctx):
        try:
            value = request.args.get("date")
            try:
                day = parse_iso_date(value) if value else container.clock().date()
            except ValueError:
                raise ValidationError("Fecha no válida (YYYY-MM-DD)")
            rows = container.class_service.class_attendance(require_student(ctx), day)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return jsonify({"available": False, "classes": []}), 503
        return jsonify({"available": True, "classes": [r.to_dict() for r in rows]})
