from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class BathroomPermit:
    permit_id: int
    student_id: str
    permit_date: date
    start_time: time
    end_time: Optional[time]
    granted_by: Optional[str] = None

    @property
    def minutes_out(self) -> Optional[int]:
        """None while the student has not come back."""
        if self.end_time is None:
            return None
        delta = datetime.combine(self.permit_date, self.end_time) - datetime.combine(self.permit_date, self.start_time)
        return max(int(delta.total_seconds() // 60), 0)

    def to_dict(self) -> dict:
        return {
            "id": self.permit_id,
            "date": self.permit_date.isoformat(),
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M") if self.end_time else None,
            "minutes_out": self.minutes_out,
            "granted_by": self.granted_by,
        }


@dataclass(frozen=True)
class SpecialPermit:
    """Early dismissal and other out-of-routine authorizations."""

    permit_id: int
    student_id: str
    permit_date: date
    permit_type: str
    reason: Optional[str] = None
    authorized_by: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.permit_id,
            "date": self.permit_date.isoformat(),
            "type": self.permit_type,
            "reason": self.reason or "",
            "authorized_by": self.authorized_by,
        }
