from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .common.datetime_utils import Clock, now_local
from .core.constants import DEFAULT_CAMPUS_WINDOW_DAYS, DEFAULT_FANOUT_WORKERS, LATE_CUTOFF
from .database.connection import DBConfig, DatabaseConnection
from .metrics.classifier import DayClassifier
from .metrics.comparator import GroupComparator
from .metrics.mysql_access_event_repository import MySQLAccessEventRepository
from .metrics.repository import AccessEventRepository
from .metrics.service import MetricsService
from .notifications.mysql_notification_repository import MySQLNotificationRepository, MySQLPushRepository
from .notifications.repository import NotificationRepository, PushRepository
from .notifications.service import NotificationService, PushService
from .permits.mysql_permit_repository import MySQLPermitRepository
from .permits.repository import PermitRepository
from .permits.service import PermitService
from .reports.service import ReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    clock: Clock

    users_repo: UserRepository
    students_repo: StudentRepository
    events_repo: AccessEventRepository
    permits_repo: PermitRepository
    classes_repo: ClassRepository
    notifications_repo: NotificationRepository
    push_repo: PushRepository

    auth_service: AuthService
    metrics_service: MetricsService
    group_comparator: GroupComparator
    report_service: ReportService
    permit_service: PermitService
    class_service: ClassService
    notification_service: NotificationService
    push_service: PushService


def wire_container(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    events_repo: AccessEventRepository,
    permits_repo: PermitRepository,
    classes_repo: ClassRepository,
    notifications_repo: NotificationRepository,
    push_repo: PushRepository,
    clock: Optional[Clock] = None,
    late_cutoff: time = LATE_CUTOFF,
    campus_window_days: int = DEFAULT_CAMPUS_WINDOW_DAYS,
    fanout_workers: int = DEFAULT_FANOUT_WORKERS,
) -> Container:
    clock = clock or now_local

    metrics_service = MetricsService(
        events_repo,
        clock=clock,
        classifier=DayClassifier(late_cutoff=late_cutoff),
        campus_window_days=campus_window_days,
    )

    return Container(
        clock=clock,
        users_repo=users_repo,
        students_repo=students_repo,
        events_repo=events_repo,
        permits_repo=permits_repo,
        classes_repo=classes_repo,
        notifications_repo=notifications_repo,
        push_repo=push_repo,
        auth_service=AuthService(users_repo),
        metrics_service=metrics_service,
        group_comparator=GroupComparator(metrics_service, students_repo, max_workers=fanout_workers),
        report_service=ReportService(students_repo, metrics_service, clock=clock),
        permit_service=PermitService(permits_repo),
        class_service=ClassService(classes_repo, students_repo),
        notification_service=NotificationService(
            notifications_repo, push_repo, users_repo, clock=clock, max_workers=fanout_workers
        ),
        push_service=PushService(push_repo, clock=clock),
    )


def build_container(
    *,
    db_config: dict,
    clock: Optional[Clock] = None,
    late_cutoff: time = LATE_CUTOFF,
    campus_window_days: int = DEFAULT_CAMPUS_WINDOW_DAYS,
    fanout_workers: int = DEFAULT_FANOUT_WORKERS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        events_repo=MySQLAccessEventRepository(conn),
        permits_repo=MySQLPermitRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        push_repo=MySQLPushRepository(conn),
        clock=clock,
        late_cutoff=late_cutoff,
        campus_window_days=campus_window_days,
        fanout_workers=fanout_workers,
    )
