from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return value
