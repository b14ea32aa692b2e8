from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional


@dataclass(frozen=True)
class ClassSlot:
    """One entry of a group's weekly timetable (weekday: 0=Monday)."""

    weekday: int
    start_time: time
    subject: str
    teacher: Optional[str] = None
    room: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "start_time": self.start_time.strftime("%H:%M"),
            "subject": self.subject,
            "teacher": self.teacher or "",
            "room": self.room or "",
        }


@dataclass(frozen=True)
class ClassAttendance:
    session_id: int
    subject: str
    teacher: Optional[str]
    start_time: time
    attended_at: time
    status: str = "present"

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "subject": self.subject,
            "teacher": self.teacher or "",
            "start_time": self.start_time.strftime("%H:%M"),
            "attended_at": self.attended_at.strftime("%H:%M"),
            "status": self.status,
        }
