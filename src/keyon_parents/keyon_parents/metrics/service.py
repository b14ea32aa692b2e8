from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import Clock, now_local
from ..core.constants import DEFAULT_CAMPUS_WINDOW_DAYS
from ..core.exceptions import ValidationError
from .aggregator import aggregate_monthly, summarize_time_on_campus
from .classifier import DayClassifier
from .model import MonthlyMetrics, TimeOnCampusSummary
from .repository import AccessEventRepository
from .workdays import month_to_date, trailing_window


class MetricsService:
    """Use case: attendance metrics for one student.

    Every boundary ("this month", "last N days") is derived from the injected
    clock, so results are reproducible for a fixed clock and event set.
    """

    def __init__(
        self,
        events: AccessEventRepository,
        *,
        clock: Optional[Clock] = None,
        classifier: Optional[DayClassifier] = None,
        campus_window_days: int = DEFAULT_CAMPUS_WINDOW_DAYS,
    ):
        self._events = events
        self._clock = clock or now_local
        self._classifier = classifier or DayClassifier()
        self._campus_window_days = int(campus_window_days)

    def monthly_metrics(self, student_id: str) -> MonthlyMetrics:
        """Month-to-date metrics. Raises FetchFailure if the events cannot be read."""

        today = self._clock().date()
        start, end = month_to_date(today)
        events = self._events.fetch_events(student_id, start, end)
        return aggregate_monthly(
            events,
            subject_id=student_id,
            date_start=start,
            date_end=end,
            today=today,
            classifier=self._classifier,
        )

    def time_on_campus(self, student_id: str, *, days: Optional[int] = None) -> TimeOnCampusSummary:
        days = self._campus_window_days if days is None else int(days)
        if days < 0:
            raise ValidationError("El número de días no puede ser negativo")

        start, end = trailing_window(self._clock().date(), days)
        events = self._events.fetch_events(student_id, start, end)
        return summarize_time_on_campus(
            events,
            subject_id=student_id,
            date_start=start,
            date_end=end,
            classifier=self._classifier,
        )
