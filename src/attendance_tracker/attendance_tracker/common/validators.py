from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_role(value: str | None) -> Role:
    try:
        return Role(value or "")
    except ValueError:
        raise ValidationError("Unknown account type")
