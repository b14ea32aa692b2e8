from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Read-only access to students.

    Implementations raise FetchFailure when the upstream read fails.
    """

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def fetch_cohort_members(self, grade: int, section: str) -> Sequence[str]:
        """Ids of every student in the grade + section."""

        raise NotImplementedError
