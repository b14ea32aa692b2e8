from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from ..core.enums import NotificationCategory


@dataclass(frozen=True)
class RenderedNotification:
    title: str
    body: str
    category: NotificationCategory


@dataclass(frozen=True)
class Notification:
    """A notification stored for one recipient."""

    notification_id: int
    recipient_id: str
    title: str
    body: str
    category: NotificationCategory
    created_at: datetime
    sender_name: str
    sender_id: str
    data: dict = field(default_factory=dict)
    is_read: bool = False
    read_at: Optional[datetime] = None


@dataclass(frozen=True)
class FanOutResult:
    """Per-recipient outcome of a bulk send."""

    sent: Tuple[str, ...] = ()
    failed: Tuple[str, ...] = ()

    @property
    def sent_count(self) -> int:
        return len(self.sent)

    @property
    def total(self) -> int:
        return len(self.sent) + len(self.failed)

    def to_dict(self) -> dict:
        return {"sent": self.sent_count, "total": self.total, "failed": list(self.failed)}
