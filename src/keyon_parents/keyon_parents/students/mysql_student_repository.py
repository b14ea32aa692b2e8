from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, fetchone, read_cursor
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with read_cursor(self._conn_factory, "el alumno") as cur:
            cur.execute(
                """
                SELECT student_id, first_name, last_names, control, grade, section, shift
                FROM students
                WHERE student_id=%s
                """,
                (student_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Student(
                student_id=str(r["student_id"]),
                first_name=r["first_name"],
                last_names=r.get("last_names"),
                control=r.get("control"),
                grade=int(r["grade"]),
                section=r["section"],
                shift=r.get("shift") or "Matutino",
            )

    def fetch_cohort_members(self, grade: int, section: str) -> Sequence[str]:
        with read_cursor(self._conn_factory, "el grupo") as cur:
            cur.execute(
                "SELECT student_id FROM students WHERE grade=%s AND section=%s ORDER BY student_id",
                (int(grade), section),
            )
            return [str(r["student_id"]) for r in fetchall(cur)]
