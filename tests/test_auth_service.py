from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from fakes import InMemoryUsers
from keyon_parents.core.enums import Role
from keyon_parents.core.exceptions import AuthenticationError, ValidationError
from keyon_parents.users.model import User
from keyon_parents.users.service import AuthService
from keyon_parents.users.session import SessionContext


def _user(**overrides) -> User:
    fields = dict(
        user_id="P001",
        username="padre.demo",
        full_name="Padre Demo",
        password_hash=generate_password_hash("padre123"),
        role=Role.PARENT,
        student_id="A001",
    )
    fields.update(overrides)
    return User(**fields)


def test_login_returns_session_context():
    ctx = AuthService(InMemoryUsers([_user()])).authenticate("padre.demo", "padre123")

    assert ctx == SessionContext(user_id="P001", full_name="Padre Demo", role=Role.PARENT, student_id="A001")
    assert SessionContext.from_session(ctx.to_session()) == ctx


@pytest.mark.parametrize(
    "user, password",
    [
        (_user(), "wrong"),
        (_user(is_active=False), "padre123"),
        (_user(password_hash="CHANGE_ME"), "padre123"),
    ],
)
def test_login_rejected(user, password):
    with pytest.raises(AuthenticationError):
        AuthService(InMemoryUsers([user])).authenticate("padre.demo", password)


def test_unknown_user_rejected():
    with pytest.raises(AuthenticationError):
        AuthService(InMemoryUsers()).authenticate("nadie", "x")


def test_blank_username():
    with pytest.raises(ValidationError):
        AuthService(InMemoryUsers()).authenticate("  ", "x")


def test_sender_name_falls_back_to_system():
    assert SessionContext(user_id="S1", full_name="", role=Role.STAFF).sender_name == "Sistema"
