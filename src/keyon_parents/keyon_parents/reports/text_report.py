from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import format_long_date_es
from ..metrics.model import MonthlyMetrics, TimeOnCampusSummary
from ..students.model import Student

_RULE = "═" * 43
_THIN = "─" * 41


def render_monthly_report(student: Student, metrics: MonthlyMetrics, campus: TimeOnCampusSummary, *, now: datetime) -> str:
    """Plain-text monthly attendance report for parents."""

    lines = [
        _RULE,
        "        REPORTE DE ASISTENCIA MENSUAL",
        _RULE,
        "",
        f"Fecha de generación: {format_long_date_es(now.date())}",
        "",
        "INFORMACIÓN DEL ALUMNO",
        _THIN,
        f"Nombre: {student.full_name}",
        f"No. Control: {student.display_control}",
        f"Grado y Grupo: {student.group_label}",
        f"Turno: {student.shift or 'Matutino'}",
        "",
        "ESTADÍSTICAS DEL MES",
        _THIN,
        f"✅ Días asistidos: {metrics.days_present}",
        f"❌ Faltas: {metrics.days_absent}",
        f"⏰ Retardos: {metrics.late_count}",
        f"📊 Porcentaje de asistencia: {metrics.attendance_rate}%",
        "",
        "TIEMPO EN LA ESCUELA",
        _THIN,
        f"📅 Total esta semana: {campus.total.text}",
        f"⏱️ Promedio diario: {campus.average.text}",
        "",
        _THIN,
        "Generado por Keyon Padres App",
        f"© {now.year} Keyon Access System",
        _RULE,
    ]
    return "\n".join(lines)
