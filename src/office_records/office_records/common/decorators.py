from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import session

from ..core.enums import AdminRole
from ..core.exceptions import AuthenticationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            raise AuthenticationError("Not authenticated")
        return view(*args, **kwargs)

    return wrapper


def current_role() -> Optional[AdminRole]:
    try:
        return AdminRole(session.get("role"))
    except ValueError:
        return None


def current_admin_id() -> int:
    return int(session["admin_id"])


def current_employee_id() -> Optional[str]:
    return session.get("employee_id")
