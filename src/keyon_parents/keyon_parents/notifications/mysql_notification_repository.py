from __future__ import annotations

import json
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import NotificationCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, fetchone, load_json_column, read_cursor, write_cursor
from .model import Notification
from .repository import NotificationRepository, PushRepository


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(
        self,
        *,
        recipient_id: str,
        title: str,
        body: str,
        category: NotificationCategory,
        data: dict,
        sender_name: str,
        sender_id: str,
        created_at: datetime,
    ) -> int:
        with write_cursor(self._conn_factory, "la notificación") as cur:
            cur.execute(
                """
                INSERT INTO notifications(recipient_id, title, body, category, data, is_read, created_at, sender_name, sender_id)
                VALUES(%s,%s,%s,%s,%s,0,%s,%s,%s)
                """,
                (recipient_id, title, body, category.value, json.dumps(data or {}), created_at, sender_name, sender_id),
            )
            return int(cur.lastrowid)

    def list_unread(self, recipient_id: str, *, limit: int) -> Sequence[Notification]:
        with read_cursor(self._conn_factory, "las notificaciones") as cur:
            cur.execute(
                """
                SELECT notification_id, recipient_id, title, body, category, data, is_read,
                       created_at, read_at, sender_name, sender_id
                FROM notifications
                WHERE recipient_id=%s AND is_read=0
                ORDER BY created_at DESC
                LIMIT %s
                """,
                (recipient_id, int(limit)),
            )
            return [
                Notification(
                    notification_id=int(r["notification_id"]),
                    recipient_id=str(r["recipient_id"]),
                    title=r["title"],
                    body=r["body"],
                    category=NotificationCategory(r["category"]),
                    created_at=r["created_at"],
                    sender_name=r["sender_name"],
                    sender_id=r["sender_id"],
                    data=load_json_column(r.get("data")),
                    is_read=bool(r["is_read"]),
                    read_at=r.get("read_at"),
                )
                for r in fetchall(cur)
            ]

    def mark_read(self, *, recipient_id: str, notification_id: int, read_at: datetime) -> bool:
        with write_cursor(self._conn_factory, "la lectura") as cur:
            cur.execute(
                """
                UPDATE notifications SET is_read=1, read_at=%s
                WHERE notification_id=%s AND recipient_id=%s AND is_read=0
                """,
                (read_at, int(notification_id), recipient_id),
            )
            return cur.rowcount > 0

    def mark_all_read(self, *, recipient_id: str, read_at: datetime) -> int:
        with write_cursor(self._conn_factory, "la lectura") as cur:
            cur.execute(
                "UPDATE notifications SET is_read=1, read_at=%s WHERE recipient_id=%s AND is_read=0",
                (read_at, recipient_id),
            )
            return int(cur.rowcount)


class MySQLPushRepository(PushRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_player_id(self, user_id: str) -> Optional[str]:
        with read_cursor(self._conn_factory, "la suscripción push") as cur:
            cur.execute(
                "SELECT push_player_id FROM users WHERE user_id=%s AND notifications_active=1",
                (user_id,),
            )
            row = fetchone(cur)
            return row.get("push_player_id") if row else None

    def save_player_id(self, *, user_id: str, player_id: str, updated_at: datetime) -> None:
        with write_cursor(self._conn_factory, "la suscripción push") as cur:
            cur.execute(
                """
                UPDATE users SET push_player_id=%s, notifications_active=1, push_updated_at=%s
                WHERE user_id=%s
                """,
                (player_id, updated_at, user_id),
            )

    def clear_player_id(self, *, user_id: str) -> None:
        with write_cursor(self._conn_factory, "la suscripción push") as cur:
            cur.execute(
                "UPDATE users SET push_player_id=NULL, notifications_active=0 WHERE user_id=%s",
                (user_id,),
            )

    def enqueue(
        self,
        *,
        player_id: str,
        recipient_id: str,
        title: str,
        message: str,
        data: dict,
        created_at: datetime,
    ) -> int:
        with write_cursor(self._conn_factory, "el envío push") as cur:
            cur.execute(
                """
                INSERT INTO push_queue(player_id, recipient_id, title, message, data, sent, created_at)
                VALUES(%s,%s,%s,%s,%s,0,%s)
                """,
                (player_id, recipient_id, title, message, json.dumps(data or {}), created_at),
            )
            return int(cur.lastrowid)
