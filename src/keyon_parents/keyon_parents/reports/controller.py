from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import FetchFailure, ValidationError
from ..users.session import login_required, require_student


def register(app: Flask, container: Container) -> None:
    @app.route("/api/report.txt", endpoint="monthly_report")
    @login_required
    def monthly_report(ctx):
        try:
            text = container.report_service.monthly_text_report(require_student(ctx))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except FetchFailure:
            return jsonify({"available": False, "message": "Reporte no disponible"}), 503

        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/plain",
            headers={"Content-Disposition": "attachment; filename=reporte_asistencia.txt"},
        )
