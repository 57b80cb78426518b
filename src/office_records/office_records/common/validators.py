from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

from ..core.exceptions import AuthorizationError, ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_choice(value: Optional[str], enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValidationError(f"Invalid {field_name} (expected one of: {allowed})")


def require_role(current_role, *allowed) -> None:
    if current_role not in allowed:
        raise AuthorizationError("You are not authorized to perform this action")


def pick_fields(data: Optional[Mapping[str, Any]], allowed: Iterable[str]) -> Dict[str, Any]:
    """Keep only the updatable columns present in a partial update payload."""
    if not data:
        raise ValidationError("No fields to update")
    fields = {k: data[k] for k in allowed if k in data}
    if not fields:
        raise ValidationError("No fields to update")
    return fields
