from __future__ import annotations

from datetime import date, datetime, time

import pytest

from keyon_parents.core.enums import EventKind
from keyon_parents.metrics.model import AttendanceEvent
from keyon_parents.students.model import Student


@pytest.fixture
def fixed_now() -> datetime:
    # Friday; month-to-date has 11 working days.
    return datetime(2024, 11, 15, 10, 0, 0)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def event():
    def _make(subject_id: str, day: date, hhmm: str, kind: EventKind = EventKind.ENTRY) -> AttendanceEvent:
        return AttendanceEvent(
            subject_id=subject_id,
            event_date=day,
            event_time=time(*(int(p) for p in hhmm.split(":"))),
            kind=kind,
        )

    return _make


@pytest.fixture
def student_a001() -> Student:
    return Student(
        student_id="A001",
        first_name="Ana",
        last_names="López García",
        control="C-123",
        grade=3,
        section="B",
    )
