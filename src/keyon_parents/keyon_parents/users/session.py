from __future__ import annotations

from dataclasses import asdict, dataclass
from functools import wraps
from typing import Mapping, Optional

from flask import jsonify, session

from ..core.constants import SYSTEM_SENDER
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError

SESSION_KEY = "ctx"


@dataclass(frozen=True)
class SessionContext:
    """Identity of the logged-in user, passed explicitly to services.

    Lives from login to logout; stored in the Flask session between requests.
    """

    user_id: str
    full_name: str
    role: Role
    student_id: Optional[str] = None

    def to_session(self) -> dict:
        data = asdict(self)
        data["role"] = self.role.value
        return data

    @classmethod
    def from_session(cls, data: Optional[Mapping]) -> Optional["SessionContext"]:
        if not data or not data.get("user_id"):
            return None
        return cls(
            user_id=str(data["user_id"]),
            full_name=str(data.get("full_name") or ""),
            role=Role(data.get("role", Role.PARENT.value)),
            student_id=data.get("student_id"),
        )

    @property
    def sender_name(self) -> str:
        return self.full_name or SYSTEM_SENDER


def current_context() -> Optional[SessionContext]:
    return SessionContext.from_session(session.get(SESSION_KEY))


def start_session(ctx: SessionContext) -> None:
    session.clear()
    session[SESSION_KEY] = ctx.to_session()


def end_session() -> None:
    session.clear()


def login_required(view):
    """Inject ``ctx`` (the SessionContext) into the view or answer 401."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_context()
        if ctx is None:
            return jsonify({"success": False, "message": "Inicia sesión para continuar"}), 401
        return view(ctx, *args, **kwargs)

    return wrapper


def require_student(ctx: SessionContext) -> str:
    if not ctx.student_id:
        raise ValidationError("La cuenta no tiene un alumno vinculado")
    return ctx.student_id


def require_staff(ctx: SessionContext) -> None:
    if ctx.role != Role.STAFF:
        raise AuthorizationError("No tienes permiso para esta acción")
