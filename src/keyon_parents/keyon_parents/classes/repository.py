from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ClassAttendance, ClassSlot


class ClassRepository(Protocol):
    def list_slots_for_group(self, grade: int, section: str) -> Sequence[ClassSlot]:
        raise NotImplementedError

    def list_attended_sessions(self, student_id: str, session_date: date) -> Sequence[ClassAttendance]:
        """Sessions of that date where the student was marked present."""

        raise NotImplementedError
