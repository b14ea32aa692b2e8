from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access checks."""

    PARENT = "parent"
    STAFF = "staff"


class EventKind(str, Enum):
    """Direction of an access-point crossing as stored in the database."""

    ENTRY = "ENTRY"
    EXIT = "EXIT"


class TrendLabel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    LOW = "low"


class NotificationCategory(str, Enum):
    """Category stored with a notification; drives the icon in the UI."""

    ATTENDANCE = "attendance"
    REPORT = "report"
    MESSAGE = "message"
    ALERT = "alert"
    REMINDER = "reminder"
    GRADE = "grade"
    HOMEWORK = "homework"
    EVENT = "event"
    GENERAL = "general"
