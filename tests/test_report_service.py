from __future__ import annotations

from datetime import date

import pytest

from fakes import InMemoryEvents, InMemoryStudents
from keyon_parents.core.enums import EventKind
from keyon_parents.core.exceptions import FetchFailure, ValidationError
from keyon_parents.metrics.service import MetricsService
from keyon_parents.reports.service import ReportService


def _service(students, events, clock) -> ReportService:
    return ReportService(students, MetricsService(events, clock=clock), clock=clock)


def test_monthly_text_report(clock, event, student_a001):
    events = InMemoryEvents(
        [
            event("A001", date(2024, 11, 11), "07:20"),
            event("A001", date(2024, 11, 11), "14:20", EventKind.EXIT),
            event("A001", date(2024, 11, 12), "07:00"),
            event("A001", date(2024, 11, 12), "14:00", EventKind.EXIT),
        ]
    )
    svc = _service(InMemoryStudents([student_a001]), events, clock)

    text = svc.monthly_text_report("A001")
    lines = text.splitlines()

    assert "REPORTE DE ASISTENCIA MENSUAL" in lines[1]
    assert "Fecha de generación: viernes, 15 de noviembre de 2024" in lines
    assert "Nombre: Ana López García" in lines
    assert "No. Control: C-123" in lines
    assert "Grado y Grupo: 3° B" in lines
    assert "Turno: Matutino" in lines
    assert "✅ Días asistidos: 2" in lines
    assert "❌ Faltas: 9" in lines
    assert "⏰ Retardos: 1" in lines
    assert "📊 Porcentaje de asistencia: 18%" in lines
    assert "📅 Total esta semana: 14h 0m" in lines
    assert "⏱️ Promedio diario: 7h 0m" in lines
    assert "© 2024 Keyon Access System" in lines


def test_report_for_unknown_student(clock):
    svc = _service(InMemoryStudents(), InMemoryEvents(), clock)

    with pytest.raises(ValidationError):
        svc.monthly_text_report("X999")


def test_report_is_not_built_from_partial_data(clock, student_a001):
    svc = _service(InMemoryStudents([student_a001]), InMemoryEvents(failing={"A001"}), clock)

    with pytest.raises(FetchFailure):
        svc.monthly_text_report("A001")
