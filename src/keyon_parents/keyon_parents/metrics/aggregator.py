from __future__ import annotations

import math
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..core.constants import EXCELLENT_RATE, GOOD_RATE
from ..core.enums import TrendLabel
from .classifier import DayClassifier
from .model import AttendanceEvent, DayRecord, LateDay, MonthlyMetrics, TimeOnCampusSummary
from .workdays import count_working_days, month_to_date


def trend_for_rate(rate: int) -> TrendLabel:
    if rate >= EXCELLENT_RATE:
        return TrendLabel.EXCELLENT
    if rate >= GOOD_RATE:
        return TrendLabel.GOOD
    return TrendLabel.LOW


def attendance_rate(days_present: int, working_days: int) -> int:
    if working_days <= 0:
        return 100
    # Half-up: 12.5 -> 13.
    return int(math.floor(days_present * 100 / working_days + 0.5))


def group_by_date(events: Iterable[AttendanceEvent]) -> Dict[date, List[AttendanceEvent]]:
    out: Dict[date, List[AttendanceEvent]] = defaultdict(list)
    for ev in events:
        out[ev.event_date].append(ev)
    return dict(out)


def classify_range(
    events: Iterable[AttendanceEvent],
    *,
    subject_id: str,
    date_start: date,
    date_end: date,
    classifier: Optional[DayClassifier] = None,
) -> List[DayRecord]:
    """One DayRecord per date that has events; other subjects and out-of-range dates are dropped."""

    classifier = classifier or DayClassifier()
    scoped = (e for e in events if e.subject_id == subject_id and date_start <= e.event_date <= date_end)
    return [classifier.classify(d, evs) for d, evs in sorted(group_by_date(scoped).items())]


def aggregate_monthly(
    events: Iterable[AttendanceEvent],
    *,
    subject_id: str,
    date_start: date,
    date_end: date,
    today: date,
    classifier: Optional[DayClassifier] = None,
) -> MonthlyMetrics:
    days = classify_range(events, subject_id=subject_id, date_start=date_start, date_end=date_end, classifier=classifier)

    # Working days are always month-to-date, whatever range the events cover.
    working_days = count_working_days(*month_to_date(today))
    days_present = sum(1 for d in days if d.is_present)
    late_detail = tuple(LateDay(work_date=d.work_date, first_entry_time=d.first_entry_time) for d in days if d.is_late)
    rate = attendance_rate(days_present, working_days)

    return MonthlyMetrics(
        date_start=date_start,
        date_end=date_end,
        working_days=working_days,
        days_present=days_present,
        days_absent=max(0, working_days - days_present),
        late_count=len(late_detail),
        attendance_rate=rate,
        trend_label=trend_for_rate(rate),
        late_detail=late_detail,
    )


def summarize_time_on_campus(
    events: Iterable[AttendanceEvent],
    *,
    subject_id: str,
    date_start: date,
    date_end: date,
    classifier: Optional[DayClassifier] = None,
) -> TimeOnCampusSummary:
    days = classify_range(events, subject_id=subject_id, date_start=date_start, date_end=date_end, classifier=classifier)

    durations = [d.present_duration_ms for d in days if d.present_duration_ms > 0]
    total_ms = sum(durations)
    counted = len(durations)

    return TimeOnCampusSummary(
        date_start=date_start,
        date_end=date_end,
        total_duration_ms=total_ms,
        counted_days=counted,
        average_duration_ms=total_ms / counted if counted > 0 else 0,
    )
