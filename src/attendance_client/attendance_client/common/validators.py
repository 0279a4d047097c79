from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no válido")
    return value.strip()


def require_float_in_range(value, field_name: str, low: float, high: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no válido") from None
    if not low <= number <= high:
        raise ValidationError(f"{field_name} fuera de rango")
    return number
