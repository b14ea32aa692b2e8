from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Tuple

from ..common.datetime_utils import month_start


def iter_dates(start: date, end: date) -> Iterator[date]:
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def count_working_days(start: date, end: date) -> int:
    """Monday-Friday dates in [start, end]; no holiday calendar."""
    return sum(1 for d in iter_dates(start, end) if d.weekday() < 5)


def month_to_date(today: date) -> Tuple[date, date]:
    return month_start(today), today


def trailing_window(today: date, days: int) -> Tuple[date, date]:
    """``days`` back from today, both ends inclusive."""
    return today - timedelta(days=days), today
