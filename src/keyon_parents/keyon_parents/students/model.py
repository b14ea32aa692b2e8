from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student followed by a parent account."""

    student_id: str
    first_name: str
    last_names: Optional[str]
    control: Optional[str]
    grade: int
    section: str
    shift: str = "Matutino"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_names or ''}".strip()

    @property
    def display_control(self) -> str:
        return self.control or self.student_id

    @property
    def group_label(self) -> str:
        return f"{self.grade}° {self.section}"
