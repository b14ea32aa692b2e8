from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import NotificationCategory
from .model import Notification


class NotificationRepository(Protocol):
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
        raise NotImplementedError

    def list_unread(self, recipient_id: str, *, limit: int) -> Sequence[Notification]:
        """Newest first."""

        raise NotImplementedError

    def mark_read(self, *, recipient_id: str, notification_id: int, read_at: datetime) -> bool:
        raise NotImplementedError

    def mark_all_read(self, *, recipient_id: str, read_at: datetime) -> int:
        raise NotImplementedError


class PushRepository(Protocol):
    """Push-provider subscriptions and the outgoing push queue."""

    def get_player_id(self, user_id: str) -> Optional[str]:
        raise NotImplementedError

    def save_player_id(self, *, user_id: str, player_id: str, updated_at: datetime) -> None:
        raise NotImplementedError

    def clear_player_id(self, *, user_id: str) -> None:
        raise NotImplementedError

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
        raise NotImplementedError
