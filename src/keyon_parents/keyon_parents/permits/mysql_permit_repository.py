from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, normalize_mysql_time, read_cursor
from .model import BathroomPermit, SpecialPermit
from .repository import PermitRepository


class MySQLPermitRepository(PermitRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_bathroom_permits(self, student_id: str, permit_date: date) -> Sequence[BathroomPermit]:
        with read_cursor(self._conn_factory, "los permisos de baño") as cur:
            cur.execute(
                """
                SELECT permit_id, student_id, permit_date, start_time, end_time, granted_by
                FROM bathroom_permits
                WHERE student_id=%s AND permit_date=%s
                ORDER BY start_time DESC
                """,
                (student_id, permit_date),
            )
            return [
                BathroomPermit(
                    permit_id=int(r["permit_id"]),
                    student_id=str(r["student_id"]),
                    permit_date=r["permit_date"],
                    start_time=normalize_mysql_time(r["start_time"]),
                    end_time=normalize_mysql_time(r.get("end_time")),
                    granted_by=r.get("granted_by"),
                )
                for r in fetchall(cur)
            ]

    def list_special_permits(self, student_id: str, start: date, end: date) -> Sequence[SpecialPermit]:
        with read_cursor(self._conn_factory, "los permisos especiales") as cur:
            cur.execute(
                """
                SELECT permit_id, student_id, permit_date, permit_type, reason, authorized_by
                FROM special_permits
                WHERE student_id=%s AND permit_date BETWEEN %s AND %s
                ORDER BY permit_date
                """,
                (student_id, start, end),
            )
            return [
                SpecialPermit(
                    permit_id=int(r["permit_id"]),
                    student_id=str(r["student_id"]),
                    permit_date=r["permit_date"],
                    permit_type=r["permit_type"],
                    reason=r.get("reason"),
                    authorized_by=r.get("authorized_by"),
                )
                for r in fetchall(cur)
            ]
