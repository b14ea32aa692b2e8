from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import BathroomPermit, SpecialPermit


class PermitRepository(Protocol):
    def list_bathroom_permits(self, student_id: str, permit_date: date) -> Sequence[BathroomPermit]:
        raise NotImplementedError

    def list_special_permits(self, student_id: str, start: date, end: date) -> Sequence[SpecialPermit]:
        raise NotImplementedError
