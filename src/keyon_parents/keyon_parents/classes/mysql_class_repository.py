from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, normalize_mysql_time, read_cursor
from .model import ClassAttendance, ClassSlot
from .repository import ClassRepository


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_slots_for_group(self, grade: int, section: str) -> Sequence[ClassSlot]:
        with read_cursor(self._conn_factory, "el horario") as cur:
            cur.execute(
                """
                SELECT weekday, start_time, subject, teacher, room
                FROM class_slots
                WHERE grade=%s AND section=%s
                ORDER BY weekday, start_time
                """,
                (int(grade), section),
            )
            return [
                ClassSlot(
                    weekday=int(r["weekday"]),
                    start_time=normalize_mysql_time(r["start_time"]),
                    subject=r["subject"],
                    teacher=r.get("teacher"),
                    room=r.get("room"),
                )
                for r in fetchall(cur)
            ]

    def list_attended_sessions(self, student_id: str, session_date: date) -> Sequence[ClassAttendance]:
        with read_cursor(self._conn_factory, "la asistencia a clases") as cur:
            cur.execute(
                """
                SELECT s.session_id, s.subject, s.teacher, s.start_time, a.attended_at
                FROM class_sessions s
                JOIN class_session_attendance a ON a.session_id = s.session_id
                WHERE s.session_date=%s AND a.student_id=%s
                ORDER BY s.start_time
                """,
                (session_date, student_id),
            )
            return [
                ClassAttendance(
                    session_id=int(r["session_id"]),
                    subject=r["subject"],
                    teacher=r.get("teacher"),
                    start_time=normalize_mysql_time(r["start_time"]),
                    attended_at=normalize_mysql_time(r["attended_at"]),
                )
                for r in fetchall(cur)
            ]
