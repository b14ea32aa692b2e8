from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_short_date_es
from ..core.enums import NotificationCategory

_ICONS = {
    NotificationCategory.ATTENDANCE: "📋",
    NotificationCategory.REPORT: "📊",
    NotificationCategory.MESSAGE: "💬",
    NotificationCategory.ALERT: "⚠️",
    NotificationCategory.REMINDER: "⏰",
    NotificationCategory.GRADE: "📝",
    NotificationCategory.HOMEWORK: "📚",
    NotificationCategory.EVENT: "📅",
    NotificationCategory.GENERAL: "🔔",
}


def icon_for(category: NotificationCategory) -> str:
    return _ICONS.get(category, "🔔")


def badge_text(unread_count: int) -> str:
    if unread_count <= 0:
        return ""
    return "9+" if unread_count > 9 else str(unread_count)


def format_relative(created_at: Optional[datetime], now: datetime) -> str:
    if created_at is None:
        return ""

    seconds = (now - created_at).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if minutes < 1:
        return "Ahora"
    if minutes < 60:
        return f"Hace {minutes} min"
    if hours < 24:
        return f"Hace {hours} h"
    if days < 7:
        return f"Hace {days} días"
    return format_short_date_es(created_at.date())
