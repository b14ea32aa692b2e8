from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account of the parents app.

    Note: plain data object (no DB access code).
    """

    user_id: str
    username: str
    full_name: str
    password_hash: str
    role: Role
    student_id: Optional[str]
    is_active: bool = True
