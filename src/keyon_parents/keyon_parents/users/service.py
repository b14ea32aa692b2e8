from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .repository import UserRepository
from .session import SessionContext

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate a parent (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionContext:
        username = require_non_empty(username, "Usuario")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            raise AuthenticationError("Usuario o contraseña incorrectos")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Usuario o contraseña incorrectos")

        logger.info("user %s logged in", user.user_id)
        return SessionContext(
            user_id=user.user_id,
            full_name=user.full_name,
            role=user.role,
            student_id=user.student_id,
        )
