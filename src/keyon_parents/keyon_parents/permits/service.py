from __future__ import annotations

from datetime import date
from typing import List

from ..common.validators import require_date_range
from .model import BathroomPermit, SpecialPermit
from .repository import PermitRepository


class PermitService:
    def __init__(self, permits: PermitRepository):
        self._permits = permits

    def bathroom_permits(self, student_id: str, permit_date: date) -> List[BathroomPermit]:
        """Permits of the day, most recent first."""
        rows = self._permits.list_bathroom_permits(student_id, permit_date)
        return sorted(rows, key=lambda p: p.start_time, reverse=True)

    def special_permits(self, student_id: str, start: date, end: date) -> List[SpecialPermit]:
        require_date_range(start, end)
        rows = self._permits.list_special_permits(student_id, start, end)
        return [p for p in rows if start <= p.permit_date <= end]
