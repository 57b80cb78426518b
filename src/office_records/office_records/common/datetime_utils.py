from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def iso(value: Any) -> Optional[str]:
    """Serialize date/datetime columns the way the JSON API returns them."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def parse_optional_date(value: Any, field_name: str = "date") -> Optional[date]:
    """Parse a request value (YYYY-MM-DD, possibly with a time part) or return None when blank."""
    if not value:
        return None
    try:
        return parse_iso_date(str(value)[:10])
    except ValueError:
        raise ValidationError(f"Invalid {field_name} (YYYY-MM-DD)")
