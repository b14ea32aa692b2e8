from __future__ import annotations

from datetime import date

import pytest

from fakes import InMemoryEvents, InMemoryStudents
from keyon_parents.core.enums import EventKind
from keyon_parents.core.exceptions import FetchFailure, ValidationError
from keyon_parents.metrics.comparator import GroupComparator
from keyon_parents.metrics.service import MetricsService
from keyon_parents.students.model import Student


def _student(student_id: str) -> Student:
    return Student(student_id=student_id, first_name=student_id, last_names=None, control=None, grade=3, section="B")


def _present(event, student_id: str, *days: int):
    return [event(student_id, date(2024, 11, d), "07:00") for d in days]


def test_monthly_metrics_reads_month_to_date(clock, event):
    repo = InMemoryEvents(_present(event, "A001", 1, 4))
    svc = MetricsService(repo, clock=clock)

    metrics = svc.monthly_metrics("A001")

    assert repo.calls == [("A001", date(2024, 11, 1), date(2024, 11, 15))]
    assert metrics.days_present == 2
    assert metrics.attendance_rate == 18


def test_monthly_metrics_unavailable_raises(clock):
    svc = MetricsService(InMemoryEvents(failing={"A001"}), clock=clock)

    with pytest.raises(FetchFailure):
        svc.monthly_metrics("A001")


def test_time_on_campus_uses_configured_window(clock, event):
    repo = InMemoryEvents(
        [
            event("A001", date(2024, 11, 12), "07:00"),
            event("A001", date(2024, 11, 12), "13:00", EventKind.EXIT),
        ]
    )
    svc = MetricsService(repo, clock=clock, campus_window_days=3)

    summary = svc.time_on_campus("A001")

    assert repo.calls == [("A001", date(2024, 11, 12), date(2024, 11, 15))]
    assert summary.total.text == "6h 0m"


def test_time_on_campus_rejects_negative_days(clock):
    svc = MetricsService(InMemoryEvents(), clock=clock)

    with pytest.raises(ValidationError):
        svc.time_on_campus("A001", days=-1)


def test_group_comparison_excludes_failed_members(clock, event):
    events = _present(event, "A001", 1, 4) + _present(event, "A002", 1, 4, 5, 6)
    repo = InMemoryEvents(events, failing={"A003"})
    students = InMemoryStudents([_student("A001"), _student("A002"), _student("A003")])
    comparator = GroupComparator(MetricsService(repo, clock=clock), students, max_workers=3)

    result = comparator.compare("A001", 3, "B")

    assert result is not None
    assert result.member_count == 2
    assert result.failed_count == 1
    assert result.mean_days_present == 3.0
    assert result.mean_attendance_rate == 27.0
    assert result.rate_delta == -9.0
    assert not result.at_or_above_average


def test_group_comparison_none_when_every_member_fails(clock, event):
    repo = InMemoryEvents(_present(event, "A001", 1), failing={"A002", "A003"})
    students = InMemoryStudents([_student("A002"), _student("A003")])
    comparator = GroupComparator(MetricsService(repo, clock=clock), students)

    assert comparator.compare("A001", 3, "B") is None


def test_group_comparison_none_when_cohort_unavailable(clock):
    students = InMemoryStudents(cohort_fails=True)
    comparator = GroupComparator(MetricsService(InMemoryEvents(), clock=clock), students)

    assert comparator.compare("A001", 3, "B") is None


def test_group_comparison_requires_subject_metrics(clock):
    repo = InMemoryEvents(failing={"A001"})
    comparator = GroupComparator(MetricsService(repo, clock=clock), InMemoryStudents([_student("A001")]))

    with pytest.raises(FetchFailure):
        comparator.compare("A001", 3, "B")


def test_group_comparison_reads_subject_events_once(clock, event):
    repo = InMemoryEvents(_present(event, "A001", 1) + _present(event, "A002", 1, 4))
    students = InMemoryStudents([_student("A001"), _student("A002")])
    comparator = GroupComparator(MetricsService(repo, clock=clock), students)

    result = comparator.compare("A001", 3, "B")

    assert [call[0] for call in repo.calls].count("A001") == 1
    assert result.member_count == 2
    assert result.mean_days_present == 1.5
