from __future__ import annotations

from datetime import date, time

import pytest

from keyon_parents.core.enums import EventKind
from keyon_parents.metrics.classifier import DayClassifier

DAY = date(2024, 11, 4)


def test_two_intervals_are_summed(event):
    events = [
        event("A001", DAY, "07:00"),
        event("A001", DAY, "12:00", EventKind.EXIT),
        event("A001", DAY, "13:00"),
        event("A001", DAY, "15:00", EventKind.EXIT),
    ]

    record = DayClassifier().classify(DAY, events)

    assert record.present_duration_ms == 7 * 3_600_000
    assert record.first_entry_time == time(7, 0)
    assert record.is_present
    assert not record.is_late


def test_second_entry_replaces_open_entry(event):
    events = [
        event("A001", DAY, "07:00"),
        event("A001", DAY, "08:00"),
        event("A001", DAY, "12:00", EventKind.EXIT),
    ]

    record = DayClassifier().classify(DAY, events)

    assert record.present_duration_ms == 4 * 3_600_000
    assert record.first_entry_time == time(7, 0)


def test_exit_without_entry_is_ignored(event):
    events = [
        event("A001", DAY, "06:50", EventKind.EXIT),
        event("A001", DAY, "07:10"),
    ]

    record = DayClassifier().classify(DAY, events)

    assert record.present_duration_ms == 0
    assert record.is_present
    assert not record.is_late


def test_events_are_ordered_by_time(event):
    events = [
        event("A001", DAY, "14:00", EventKind.EXIT),
        event("A001", DAY, "07:30"),
    ]

    record = DayClassifier().classify(DAY, events)

    assert record.first_entry_time == time(7, 30)
    assert record.present_duration_ms == int(6.5 * 3_600_000)
    assert record.is_late


def test_day_without_entries_is_absent():
    record = DayClassifier().classify(DAY, [])

    assert not record.is_present
    assert record.first_entry_time is None
    assert record.present_duration_ms == 0
    assert not record.is_late


@pytest.mark.parametrize(
    "first_entry, expected",
    [
        (time(7, 0), False),
        (time(7, 15, 0), False),
        (time(7, 15, 1), True),
        (time(7, 15, 59), True),
        (time(7, 16), True),
        (time(9, 5), True),
        (None, False),
    ],
)
def test_late_boundary(first_entry, expected):
    assert DayClassifier().is_late(first_entry) is expected


def test_custom_cutoff():
    classifier = DayClassifier(late_cutoff=time(8, 0))

    assert not classifier.is_late(time(7, 45))
    assert not classifier.is_late(time(8, 0))
    assert classifier.is_late(time(8, 0, 1))


@pytest.mark.parametrize(
    "raw, expected_hours",
    [
        ([("07:00", "entry"), ("13:00", "exit"), ("14:00", "entry"), ("15:30", "exit")], 7.5),
        ([("08:00", "exit")], 0),
        ([("07:00", "entry"), ("08:00", "entry"), ("09:00", "exit")], 1),
    ],
)
def test_duration_cases(event, raw, expected_hours):
    kinds = {"entry": EventKind.ENTRY, "exit": EventKind.EXIT}
    events = [event("A001", DAY, hhmm, kinds[k]) for hhmm, k in raw]

    assert DayClassifier().classify(DAY, events).present_duration_ms == int(expected_hours * 3_600_000)


def test_first_entry_one_second_past_cutoff_is_late(event):
    record = DayClassifier().classify(DAY, [event("A001", DAY, "07:15:01")])

    assert record.first_entry_time == time(7, 15, 1)
    assert record.is_late
