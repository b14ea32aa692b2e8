from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional, Tuple

from ..core.constants import MS_PER_HOUR, MS_PER_MINUTE
from ..core.enums import EventKind, TrendLabel


@dataclass(frozen=True)
class AttendanceEvent:
    """One raw crossing of an access point by a student."""

    subject_id: str
    event_date: date
    event_time: time
    kind: EventKind


@dataclass(frozen=True)
class DayRecord:
    """Classification of one calendar day for one student (never persisted)."""

    work_date: date
    first_entry_time: Optional[time]
    is_late: bool
    present_duration_ms: int

    @property
    def is_present(self) -> bool:
        return self.first_entry_time is not None


@dataclass(frozen=True)
class LateDay:
    work_date: date
    first_entry_time: time


@dataclass(frozen=True)
class DurationParts:
    hours: int
    minutes: int

    @classmethod
    def from_ms(cls, ms: float) -> "DurationParts":
        ms = int(ms)
        return cls(hours=ms // MS_PER_HOUR, minutes=(ms % MS_PER_HOUR) // MS_PER_MINUTE)

    @property
    def text(self) -> str:
        return f"{self.hours}h {self.minutes}m"


@dataclass(frozen=True)
class MonthlyMetrics:
    date_start: date
    date_end: date
    working_days: int
    days_present: int
    days_absent: int
    late_count: int
    attendance_rate: int
    trend_label: TrendLabel
    late_detail: Tuple[LateDay, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "date_start": self.date_start.isoformat(),
            "date_end": self.date_end.isoformat(),
            "working_days": self.working_days,
            "days_present": self.days_present,
            "days_absent": self.days_absent,
            "late_count": self.late_count,
            "attendance_rate": self.attendance_rate,
            "trend_label": self.trend_label.value,
            "late_detail": [
                {"date": d.work_date.isoformat(), "time": d.first_entry_time.strftime("%H:%M")}
                for d in self.late_detail
            ],
        }


@dataclass(frozen=True)
class TimeOnCampusSummary:
    date_start: date
    date_end: date
    total_duration_ms: int
    counted_days: int
    average_duration_ms: float

    @property
    def total(self) -> DurationParts:
        return DurationParts.from_ms(self.total_duration_ms)

    @property
    def average(self) -> DurationParts:
        return DurationParts.from_ms(self.average_duration_ms)

    def to_dict(self) -> dict:
        return {
            "date_start": self.date_start.isoformat(),
            "date_end": self.date_end.isoformat(),
            "total_duration_ms": self.total_duration_ms,
            "average_duration_ms": self.average_duration_ms,
            "counted_days": self.counted_days,
            "total": {"hours": self.total.hours, "minutes": self.total.minutes, "text": self.total.text},
            "average": {"hours": self.average.hours, "minutes": self.average.minutes, "text": self.average.text},
        }


@dataclass(frozen=True)
class GroupComparison:
    """Student metrics next to the mean of the cohort members that succeeded."""

    subject: MonthlyMetrics
    mean_days_present: float
    mean_days_absent: float
    mean_late_count: float
    mean_attendance_rate: float
    member_count: int
    failed_count: int

    @property
    def rate_delta(self) -> float:
        return self.subject.attendance_rate - self.mean_attendance_rate

    @property
    def at_or_above_average(self) -> bool:
        return self.subject.attendance_rate >= self.mean_attendance_rate

    def to_dict(self) -> dict:
        return {
            "subject": self.subject.to_dict(),
            "group": {
                "days_present": self.mean_days_present,
                "days_absent": self.mean_days_absent,
                "late_count": self.mean_late_count,
                "attendance_rate": self.mean_attendance_rate,
                "member_count": self.member_count,
                "failed_count": self.failed_count,
            },
            "rate_delta": self.rate_delta,
            "at_or_above_average": self.at_or_above_average,
        }
