from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from keyon_parents.core.enums import NotificationCategory
from keyon_parents.core.exceptions import ValidationError
from keyon_parents.notifications.formatting import badge_text, format_relative, icon_for
from keyon_parents.notifications.payloads import (
    PAYLOAD_TYPES,
    ClassUpcoming,
    Late,
    Message,
    parse_payload,
)


def test_late_render():
    rendered = Late(minutes=5).render()

    assert rendered.title == "⚠️ Llegaste tarde"
    assert rendered.body == "Llegaste 5 minutos tarde a clase"
    assert rendered.category == NotificationCategory.ALERT


def test_message_preview_is_truncated():
    rendered = Message(sender="Prof. Ruiz", preview="x" * 150).render()

    assert rendered.title == "💬 Mensaje de Prof. Ruiz"
    assert len(rendered.body) == 100


def test_every_kind_is_registered():
    assert set(PAYLOAD_TYPES) == {
        "attendance_recorded",
        "late",
        "absence",
        "bathroom_exit",
        "class_upcoming",
        "student_absent",
        "message",
        "report",
        "event",
    }


def test_parse_payload_converts_int_fields():
    payload = parse_payload("class_upcoming", {"class_name": "Historia", "minutes": "10"})

    assert payload == ClassUpcoming(class_name="Historia", minutes=10)
    assert payload.render().body == "Tu clase de Historia comienza en 10 minutos"


@pytest.mark.parametrize(
    "kind, fields",
    [
        ("unknown", {}),
        ("late", {}),
        ("late", {"minutes": "diez"}),
    ],
)
def test_parse_payload_rejects_bad_input(kind, fields):
    with pytest.raises(ValidationError):
        parse_payload(kind, fields)


@pytest.mark.parametrize("count, expected", [(0, ""), (-1, ""), (1, "1"), (9, "9"), (10, "9+"), (42, "9+")])
def test_badge_text(count, expected):
    assert badge_text(count) == expected


def test_icon_for_category():
    assert icon_for(NotificationCategory.MESSAGE) == "💬"
    assert icon_for(NotificationCategory.GENERAL) == "🔔"


@pytest.mark.parametrize(
    "ago, expected",
    [
        (timedelta(seconds=30), "Ahora"),
        (timedelta(minutes=5), "Hace 5 min"),
        (timedelta(hours=3), "Hace 3 h"),
        (timedelta(days=2), "Hace 2 días"),
        (timedelta(days=10), "5 nov"),
    ],
)
def test_format_relative(fixed_now, ago, expected):
    assert format_relative(fixed_now - ago, fixed_now) == expected


def test_format_relative_without_timestamp():
    assert format_relative(None, datetime(2024, 11, 15)) == ""
