from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def as_text(value, field_name: str) -> str:
    """Stripped text of a form/JSON field; missing -> ''. Numbers, lists etc. are rejected."""

    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip()


def require_non_empty(value: str, field_name: str) -> str:
    text = as_text(value, field_name)
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def require_choice(value: str, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(as_text(value, field_name).lower())
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def parse_optional_amount(value, field_name: str) -> Optional[float]:
    """Empty -> None; otherwise a non-negative number."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount


def require_amount(value, field_name: str) -> float:
    amount = parse_optional_amount(value, field_name)
    if amount is None:
        raise ValidationError(f"{field_name} is required")
    return amount
