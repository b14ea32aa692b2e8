from __future__ import annotations

from datetime import date
from typing import Dict, List

from ..common.datetime_utils import WEEKDAY_KEYS
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import ClassAttendance, ClassSlot
from .repository import ClassRepository

SCHOOL_DAYS = 5


class ClassService:
    def __init__(self, classes: ClassRepository, students: StudentRepository):
        self._classes = classes
        self._students = students

    def weekly_schedule(self, student_id: str) -> Dict[str, List[ClassSlot]]:
        """Timetable of the student's group keyed 'monday'..'friday'."""

        student = self._students.get_by_id(student_id)
        if not student:
            raise ValidationError("Alumno no encontrado")

        schedule: Dict[str, List[ClassSlot]] = {key: [] for key in WEEKDAY_KEYS[:SCHOOL_DAYS]}
        for slot in self._classes.list_slots_for_group(student.grade, student.section):
            if 0 <= slot.weekday < SCHOOL_DAYS:
                schedule[WEEKDAY_KEYS[slot.weekday]].append(slot)

        for slots in schedule.values():
            slots.sort(key=lambda s: s.start_time)
        return schedule

    def class_attendance(self, student_id: str, session_date: date) -> List[ClassAttendance]:
        return list(self._classes.list_attended_sessions(student_id, session_date))
