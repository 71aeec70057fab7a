"""Field checks run before any mutation."""

from __future__ import annotations

from typing import Any

from .exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(message: str, *values: Any) -> None:
    """Raise ``ValidationError(message)`` if any value is missing or blank."""
    if any(is_blank(value) for value in values):
        raise ValidationError(message)


def require_password(password: str | None) -> None:
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


__all__ = ["MIN_PASSWORD_LENGTH", "is_blank", "require_fields", "require_password"]
