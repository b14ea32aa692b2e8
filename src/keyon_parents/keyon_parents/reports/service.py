from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import Clock, now_local
from ..core.exceptions import ValidationError
from ..metrics.service import MetricsService
from ..students.repository import StudentRepository
from .text_report import render_monthly_report


class ReportService:
    def __init__(self, students: StudentRepository, metrics: MetricsService, *, clock: Optional[Clock] = None):
        self._students = students
        self._metrics = metrics
        self._clock = clock or now_local

    def monthly_text_report(self, student_id: str) -> str:
        """Raises FetchFailure when any of the reads fails; no partial report."""

        student = self._students.get_by_id(student_id)
        if not student:
            raise ValidationError("Alumno no encontrado")

        metrics = self._metrics.monthly_metrics(student_id)
        campus = self._metrics.time_on_campus(student_id)
        return render_monthly_report(student, metrics, campus, now=self._clock())
