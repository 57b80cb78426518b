from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AdminRole


@dataclass(frozen=True)
class Admin:
    """A login account (row of lists_of_admins).

    Note: password holds a werkzeug hash, never the plain value.
    """

    admin_id: int
    name: str
    email: str
    username: str
    password: str
    role: AdminRole
    date_assigned: Optional[datetime] = None

    def to_public(self) -> dict:
        return {
            "admin_id": self.admin_id,
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "role": self.role.value,
            "date_assigned": self.date_assigned.isoformat() if self.date_assigned else None,
        }
