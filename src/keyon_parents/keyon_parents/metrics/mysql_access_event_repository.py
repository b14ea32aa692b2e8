from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, normalize_mysql_time, read_cursor
from .model import AttendanceEvent
from .repository import AccessEventRepository


class MySQLAccessEventRepository(AccessEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_events(self, subject_id: str, date_start: date, date_end: date) -> Sequence[AttendanceEvent]:
        with read_cursor(self._conn_factory, "los registros de acceso") as cur:
            cur.execute(
                """
                SELECT student_id, event_date, event_time, kind
                FROM access_events
                WHERE student_id=%s AND event_date BETWEEN %s AND %s
                ORDER BY event_date, event_time
                """,
                (subject_id, date_start, date_end),
            )
            rows = fetchall(cur)
            return [
                AttendanceEvent(
                    subject_id=str(r["student_id"]),
                    event_date=r["event_date"],
                    event_time=normalize_mysql_time(r["event_time"]),
                    kind=EventKind(r["kind"]),
                )
                for r in rows
            ]
