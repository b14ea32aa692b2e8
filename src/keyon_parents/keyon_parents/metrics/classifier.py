from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from ..core.constants import LATE_CUTOFF
from ..core.enums import EventKind
from .model import AttendanceEvent, DayRecord

_ONE_MS = timedelta(milliseconds=1)


def _ms_between(work_date: date, start: time, end: time) -> int:
    return (datetime.combine(work_date, end) - datetime.combine(work_date, start)) // _ONE_MS


@dataclass(frozen=True)
class DayClassifier:
    """Turns one day's entry/exit events into a DayRecord.

    Duration pairing keeps a single open-entry slot: a second ENTRY before any
    EXIT replaces the first one, so the earlier interval is not counted.
    An EXIT with no open entry is ignored and a trailing ENTRY adds nothing.
    """

    late_cutoff: time = LATE_CUTOFF

    def classify(self, work_date: date, events: Iterable[AttendanceEvent]) -> DayRecord:
        ordered = sorted(events, key=lambda e: e.event_time)

        first_entry: Optional[time] = None
        open_entry: Optional[time] = None
        total_ms = 0

        for ev in ordered:
            if ev.kind == EventKind.ENTRY:
                if first_entry is None:
                    first_entry = ev.event_time
                open_entry = ev.event_time
            elif open_entry is not None:
                total_ms += _ms_between(work_date, open_entry, ev.event_time)
                open_entry = None

        return DayRecord(
            work_date=work_date,
            first_entry_time=first_entry,
            is_late=self.is_late(first_entry),
            present_duration_ms=total_ms,
        )

    def is_late(self, first_entry: Optional[time]) -> bool:
        # HH:MM values compare like (hour, minute); seconds past the cutoff are late.
        return first_entry is not None and first_entry > self.late_cutoff
