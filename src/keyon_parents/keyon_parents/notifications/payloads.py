"""Closed family of notification payloads.

Each kind carries only its own fields and knows how to render itself into a
title, body and category. ``parse_payload`` maps the API's ``kind`` tag back
to one of them.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Type

from ..core.enums import NotificationCategory
from ..core.exceptions import ValidationError
from .model import RenderedNotification

MESSAGE_PREVIEW_CHARS = 100


class NotificationPayload(ABC):
    kind: ClassVar[str]

    @abstractmethod
    def render(self) -> RenderedNotification:
        raise NotImplementedError


@dataclass(frozen=True)
class AttendanceRecorded(NotificationPayload):
    kind: ClassVar[str] = "attendance_recorded"
    class_name: str

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            "✅ Asistencia Registrada",
            f"Tu asistencia en {self.class_name} ha sido registrada",
            NotificationCategory.ATTENDANCE,
        )


@dataclass(frozen=True)
class Late(NotificationPayload):
    kind: ClassVar[str] = "late"
    minutes: int

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            "⚠️ Llegaste tarde",
            f"Llegaste {self.minutes} minutos tarde a clase",
            NotificationCategory.ALERT,
        )


@dataclass(frozen=True)
class Absence(NotificationPayload):
    kind: ClassVar[str] = "absence"
    on_date: str
    class_name: str

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            "❌ Falta registrada",
            f"No asististe a {self.class_name} el {self.on_date}",
            NotificationCategory.ALERT,
        )


@dataclass(frozen=True)
class BathroomExit(NotificationPayload):
    kind: ClassVar[str] = "bathroom_exit"
    duration: str

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            "🚻 Salida al baño",
            f"Tiempo fuera: {self.duration}. Recuerda regresar pronto.",
            NotificationCategory.REMINDER,
        )


@dataclass(frozen=True)
class ClassUpcoming(NotificationPayload):
    kind: ClassVar[str] = "class_upcoming"
    class_name: str
    minutes: int

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            "⏰ Clase próxima",
            f"Tu clase de {self.class_name} comienza en {self.minutes} minutos",
            NotificationCategory.REMINDER,
        )


@dataclass(frozen=True)
class StudentAbsent(NotificationPayload):
    kind: ClassVar[str] = "student_absent"
    student_name: str
    class_name: str

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            "📋 Alumno ausente",
            f"{self.student_name} no asistió a {self.class_name}",
            NotificationCategory.ATTENDANCE,
        )


@dataclass(frozen=True)
class Message(NotificationPayload):
    kind: ClassVar[str] = "message"
    sender: str
    preview: str

    def render(self) -> RenderedNotification:
        return RenderedNotification(
            f"💬 Mensaje de {self.sender}",
            self.preview[:MESSAGE_PREVIEW_CHARS],
            NotificationCategory.MESSAGE,
        )


@dataclass(frozen=True)
class Report(NotificationPayload):
    kind: ClassVar[str] = "report"
    title: str

    def render(self) -> RenderedNotification:
        return RenderedNotification("📊 Nuevo reporte disponible", self.title, NotificationCategory.REPORT)


@dataclass(frozen=True)
class Event(NotificationPayload):
    kind: ClassVar[str] = "event"
    title: str
    event_date: str

    def render(self) -> RenderedNotification:
        return RenderedNotification(f"📅 {self.title}", f"Fecha: {self.event_date}", NotificationCategory.EVENT)


PAYLOAD_TYPES: Dict[str, Type[NotificationPayload]] = {
    cls.kind: cls
    for cls in (
        AttendanceRecorded,
        Late,
        Absence,
        BathroomExit,
        ClassUpcoming,
        StudentAbsent,
        Message,
        Report,
        Event,
    )
}


def parse_payload(kind: str, fields: Mapping[str, object]) -> NotificationPayload:
    cls = PAYLOAD_TYPES.get(kind)
    if cls is None:
        raise ValidationError(f"Tipo de notificación desconocido: {kind}")

    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name not in fields:
            raise ValidationError(f"Falta el campo '{f.name}'")
        value = fields[f.name]
        try:
            kwargs[f.name] = int(value) if f.type == "int" else str(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Campo '{f.name}' no es válido")
    return cls(**kwargs)
