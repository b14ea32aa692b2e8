from __future__ import annotations

from datetime import date, datetime, time
from typing import Callable

Clock = Callable[[], datetime]

WEEKDAY_KEYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_WEEKDAYS_ES = ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo")
_MONTHS_ES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str) -> time:
    """Parse 'HH:MM' or 'HH:MM:SS' into time."""
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value.strip(), fmt).time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_start(day: date) -> date:
    return day.replace(day=1)


def format_long_date_es(day: date) -> str:
    """e.g. 'viernes, 15 de noviembre de 2024'."""
    return f"{_WEEKDAYS_ES[day.weekday()]}, {day.day} de {_MONTHS_ES[day.month - 1]} de {day.year}"


def format_short_date_es(day: date) -> str:
    """e.g. '15 nov'."""
    return f"{day.day} {_MONTHS_ES[day.month - 1][:3]}"
