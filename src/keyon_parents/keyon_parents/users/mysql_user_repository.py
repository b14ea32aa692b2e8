from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, fetchone, read_cursor
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "user_id, username, full_name, password_hash, role, student_id, is_active"


def _to_user(row: dict) -> User:
    return User(
        user_id=str(row["user_id"]),
        username=row["username"],
        full_name=row["full_name"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        student_id=row.get("student_id"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with read_cursor(self._conn_factory, "el usuario") as cur:
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with read_cursor(self._conn_factory, "el usuario") as cur:
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def list_ids_for_group(self, grade: int, section: str) -> Sequence[str]:
        with read_cursor(self._conn_factory, "los usuarios del grupo") as cur:
            cur.execute(
                """
                SELECT u.user_id
                FROM users u
                JOIN students s ON s.student_id = u.student_id
                WHERE s.grade=%s AND s.section=%s AND u.is_active=1
                ORDER BY u.user_id
                """,
                (int(grade), section),
            )
            return [str(r["user_id"]) for r in fetchall(cur)]
