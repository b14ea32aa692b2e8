from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AccessEventRepository(Protocol):
    def fetch_events(self, subject_id: str, date_start: date, date_end: date) -> Sequence[AttendanceEvent]:
        """Entry/exit events of one student with date in [date_start, date_end].

        Raises FetchFailure when the read fails.
        """

        raise NotImplementedError
