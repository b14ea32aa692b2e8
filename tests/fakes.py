from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from keyon_parents.classes.model import ClassAttendance, ClassSlot
from keyon_parents.core.exceptions import FetchFailure, StorageError
from keyon_parents.metrics.model import AttendanceEvent
from keyon_parents.notifications.model import Notification
from keyon_parents.permits.model import BathroomPermit, SpecialPermit
from keyon_parents.students.model import Student
from keyon_parents.users.model import User


class InMemoryEvents:
    def __init__(self, events=(), *, failing=()):
        self.events: List[AttendanceEvent] = list(events)
        self.failing = set(failing)
        self.calls = []

    def fetch_events(self, subject_id: str, date_start: date, date_end: date) -> Sequence[AttendanceEvent]:
        self.calls.append((subject_id, date_start, date_end))
        if subject_id in self.failing:
            raise FetchFailure(f"events for {subject_id}")
        return [e for e in self.events if e.subject_id == subject_id and date_start <= e.event_date <= date_end]


class InMemoryStudents:
    def __init__(self, students=(), *, cohort_fails: bool = False):
        self.by_id: Dict[str, Student] = {s.student_id: s for s in students}
        self.cohort_fails = cohort_fails

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self.by_id.get(student_id)

    def fetch_cohort_members(self, grade: int, section: str) -> Sequence[str]:
        if self.cohort_fails:
            raise FetchFailure("cohort")
        return [s.student_id for s in self.by_id.values() if s.grade == grade and s.section == section]


class InMemoryUsers:
    def __init__(self, users=(), *, groups: Optional[dict] = None, group_fails: bool = False):
        self.by_id: Dict[str, User] = {u.user_id: u for u in users}
        self.groups = groups or {}
        self.group_fails = group_fails

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.by_id.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.by_id.values() if u.username == username), None)

    def list_ids_for_group(self, grade: int, section: str) -> Sequence[str]:
        if self.group_fails:
            raise FetchFailure("group")
        return list(self.groups.get((grade, section), []))


class InMemoryNotifications:
    def __init__(self, *, failing=()):
        self.items: List[Notification] = []
        self.failing = set(failing)
        self._id = 0

    def add(self, *, recipient_id, title, body, category, data, sender_name, sender_id, created_at) -> int:
        if recipient_id in self.failing:
            raise StorageError(f"notification for {recipient_id}")
        self._id += 1
        self.items.append(
            Notification(
                notification_id=self._id,
                recipient_id=recipient_id,
                title=title,
                body=body,
                category=category,
                created_at=created_at,
                sender_name=sender_name,
                sender_id=sender_id,
                data=dict(data),
            )
        )
        return self._id

    def list_unread(self, recipient_id: str, *, limit: int) -> Sequence[Notification]:
        rows = [n for n in self.items if n.recipient_id == recipient_id and not n.is_read]
        rows.sort(key=lambda n: n.created_at, reverse=True)
        return rows[:limit]

    def mark_read(self, *, recipient_id: str, notification_id: int, read_at: datetime) -> bool:
        for i, n in enumerate(self.items):
            if n.notification_id == notification_id and n.recipient_id == recipient_id and not n.is_read:
                self.items[i] = dataclasses.replace(n, is_read=True, read_at=read_at)
                return True
        return False

    def mark_all_read(self, *, recipient_id: str, read_at: datetime) -> int:
        count = 0
        for i, n in enumerate(self.items):
            if n.recipient_id == recipient_id and not n.is_read:
                self.items[i] = dataclasses.replace(n, is_read=True, read_at=read_at)
                count += 1
        return count


class InMemoryPush:
    def __init__(self, players: Optional[dict] = None, *, enqueue_fails: bool = False):
        self.players: Dict[str, str] = dict(players or {})
        self.queue: List[dict] = []
        self.enqueue_fails = enqueue_fails

    def get_player_id(self, user_id: str) -> Optional[str]:
        return self.players.get(user_id)

    def save_player_id(self, *, user_id: str, player_id: str, updated_at: datetime) -> None:
        self.players[user_id] = player_id

    def clear_player_id(self, *, user_id: str) -> None:
        self.players.pop(user_id, None)

    def enqueue(self, *, player_id, recipient_id, title, message, data, created_at) -> None:
        if self.enqueue_fails:
            raise StorageError(f"push for {recipient_id}")
        self.queue.append({"player_id": player_id, "recipient_id": recipient_id, "title": title, "message": message})


class InMemoryPermits:
    def __init__(self, bathroom=(), special=()):
        self.bathroom: List[BathroomPermit] = list(bathroom)
        self.special: List[SpecialPermit] = list(special)

    def list_bathroom_permits(self, student_id: str, permit_date: date) -> Sequence[BathroomPermit]:
        return [p for p in self.bathroom if p.student_id == student_id and p.permit_date == permit_date]

    def list_special_permits(self, student_id: str, start: date, end: date) -> Sequence[SpecialPermit]:
        return [p for p in self.special if p.student_id == student_id]


class InMemoryClasses:
    def __init__(self, slots: Optional[dict] = None, attended: Optional[dict] = None):
        self.slots: Dict[tuple, List[ClassSlot]] = slots or {}
        self.attended: Dict[tuple, List[ClassAttendance]] = attended or {}

    def list_slots_for_group(self, grade: int, section: str) -> Sequence[ClassSlot]:
        return list(self.slots.get((grade, section), []))

    def list_attended_sessions(self, student_id: str, session_date: date) -> Sequence[ClassAttendance]:
        return list(self.attended.get((student_id, session_date), []))
