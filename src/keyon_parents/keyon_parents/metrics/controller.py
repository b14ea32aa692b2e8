from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import FetchFailure, ValidationError
from ..users.session import login_required, require_student


def _unavailable():
    return jsonify({"available": False, "message": "Métricas no disponibles"}), 503


def register(app: Flask, container: Container) -> None:
    @app.route("/api/metrics/monthly", endpoint="metrics_monthly")
    @login_required
    def metrics_monthly(ctx):
        try:
            metrics = container.metrics_service.monthly_metrics(require_student(ctx))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return _unavailable()
        return jsonify({"available": True, "metrics": metrics.to_dict()})

    @app.route("/api/metrics/time-on-campus", endpoint="metrics_time_on_campus")
    @login_required
    def metrics_time_on_campus(ctx):
        try:
            days = request.args.get("days", type=int)
            summary = container.metrics_service.time_on_campus(require_student(ctx), days=days)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return _unavailable()
        return jsonify({"available": True, "summary": summary.to_dict()})

    @app.route("/api/metrics/compare", endpoint="metrics_compare")
    @login_required
    def metrics_compare(ctx):
        try:
            student_id = require_student(ctx)
            student = container.students_repo.get_by_id(student_id)
            if not student:
                raise ValidationError("Alumno no encontrado")
            comparison = container.group_comparator.compare(student_id, student.grade, student.section)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return _unavailable()

        if comparison is None:
            return jsonify({"available": True, "comparison": None})
        return jsonify({"available": True, "comparison": comparison.to_dict()})
