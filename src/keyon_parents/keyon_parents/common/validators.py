from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no es válido")
    return value.strip()


def require_date_range(start: date, end: date) -> None:
    if start > end:
        raise ValidationError("La fecha inicial no puede ser posterior a la final")


def clean_recipient_id(value: object) -> Optional[str]:
    """Normalize a recipient id; None when it is blank or a stringified null."""

    if not isinstance(value, str):
        return None
    v = value.strip()
    if not v or v in {"undefined", "null"}:
        return None
    return v
