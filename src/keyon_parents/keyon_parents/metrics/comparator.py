from __future__ import annotations

import logging
from typing import Optional

from ..common.fanout import run_all_settled
from ..core.constants import DEFAULT_FANOUT_WORKERS
from ..core.exceptions import FetchFailure
from ..students.repository import StudentRepository
from .model import GroupComparison
from .service import MetricsService

logger = logging.getLogger(__name__)


class GroupComparator:
    """Compares a student's month-to-date metrics with the cohort mean.

    Cohort members are computed concurrently; members whose read fails are
    left out of the mean instead of counting as zero attendance.
    """

    def __init__(self, metrics: MetricsService, students: StudentRepository, *, max_workers: int = DEFAULT_FANOUT_WORKERS):
        self._metrics = metrics
        self._students = students
        self._max_workers = int(max_workers)

    def compare(self, student_id: str, grade: int, section: str) -> Optional[GroupComparison]:
        # The student's own metrics are required; FetchFailure propagates.
        subject = self._metrics.monthly_metrics(student_id)

        try:
            member_ids = self._students.fetch_cohort_members(grade, section)
        except FetchFailure as e:
            logger.warning("cohort %s%s unavailable: %s", grade, section, e)
            return None

        others = [m for m in member_ids if m != student_id]
        results = run_all_settled(self._metrics.monthly_metrics, others, max_workers=self._max_workers)
        succeeded = [r.value for r in results if r.ok]
        if len(others) < len(member_ids):
            succeeded.append(subject)
        failed = [r for r in results if not r.ok]
        for r in failed:
            logger.warning("cohort member %s excluded from mean: %s", r.key, r.error)

        if not succeeded:
            return None

        n = len(succeeded)
        return GroupComparison(
            subject=subject,
            mean_days_present=sum(m.days_present for m in succeeded) / n,
            mean_days_absent=sum(m.days_absent for m in succeeded) / n,
            mean_late_count=sum(m.late_count for m in succeeded) / n,
            mean_attendance_rate=sum(m.attendance_rate for m in succeeded) / n,
            member_count=n,
            failed_count=len(failed),
        )
