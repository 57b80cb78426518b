from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_choice, require_min_length, require_non_empty, require_role
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import AdminRole
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..notifications.mail import Mailer
from ..roles.repository import RoleRepository
from .model import Admin
from .repository import AdminRepository

logger = logging.getLogger(__name__)

_REDIRECTS = {
    AdminRole.HOD: "/pages/hod-admin",
    AdminRole.SUPER_ADMIN: "/pages/super-admin",
    AdminRole.REGISTRY: "/pages/registry",
    AdminRole.HUMAN_RESOURCE: "/pages/hr",
    AdminRole.BOSS: "/pages/boss",
    AdminRole.EMPLOYEE: "/pages/employee-profile",
}


def redirect_path_for(role) -> str:
    try:
        return _REDIRECTS.get(AdminRole(role), "/dashboard")
    except ValueError:
        return "/dashboard"


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    admin_id: int
    name: str
    email: str
    username: str
    role: AdminRole
    role_id: Optional[int] = None
    role_name: Optional[str] = None
    department_id: Optional[int] = None
    department_name: Optional[str] = None
    employee_id: Optional[str] = None
    position: Optional[str] = None

    def to_session(self) -> dict:
        data = asdict(self)
        data["role"] = self.role.value
        return data


_PROFILE_FIELDS = ("role_id", "role_name", "department_id", "department_name", "employee_id", "position")


class AuthService:
    """Use case: authenticate an admin (login)."""

    def __init__(self, admins: AdminRepository, roles: RoleRepository):
        self._admins = admins
        self._roles = roles

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = require_non_empty(username, "Username")
        password = require_non_empty(password, "Password")

        admin = self._admins.get_by_username(username)
        if not admin:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(admin.password, password)
        except ValueError:
            # placeholder or corrupted hash values
            ok = False
        if not ok:
            raise AuthenticationError("Invalid credentials")

        user = SessionUser(
            admin_id=admin.admin_id,
            name=admin.name,
            email=admin.email,
            username=admin.username,
            role=admin.role,
        )
        if admin.role in (AdminRole.HOD, AdminRole.EMPLOYEE):
            profile = self._roles.get_profile_for_admin(admin.admin_id)
            if profile:
                user = replace(user, **{k: profile.get(k) for k in _PROFILE_FIELDS})

        logger.info("admin %s logged in as %s", admin.username, admin.role.value)
        return user


class AdminService:
    """Use case: the Super Admin console."""

    def __init__(self, admins: AdminRepository, mailer: Mailer):
        self._admins = admins
        self._mailer = mailer

    def list_admins(self) -> Sequence[Admin]:
        return self._admins.list_all()

    def create_admin(
        self,
        *,
        current_role: AdminRole,
        name: str,
        email: str,
        role: str,
        username: str,
        password: str,
    ) -> int:
        require_role(current_role, AdminRole.SUPER_ADMIN)
        email = require_non_empty(email, "Email")
        name = require_non_empty(name, "Name")
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        admin_role = require_choice(role, AdminRole, "role")

        if self._admins.get_by_username(username):
            raise ValidationError("Username already exists")
        if self._admins.get_by_email(email):
            raise ValidationError("Email already exists")

        admin_id = self._admins.create(
            name=name,
            email=email,
            username=username,
            password_hash=generate_password_hash(password),
            role=admin_role,
        )
        logger.info("admin %s created with role %s", username, admin_role.value)
        self._mailer.admin_created(to=email, name=name, username=username, password=password, role=admin_role.value)
        return admin_id

    def update_admin(
        self,
        *,
        current_role: AdminRole,
        email: str,
        name: str,
        role: str,
        username: str,
        password: Optional[str] = None,
    ) -> None:
        require_role(current_role, AdminRole.SUPER_ADMIN)
        email = require_non_empty(email, "Email")
        name = require_non_empty(name, "Name")
        username = require_non_empty(username, "Username")
        admin_role = require_choice(role, AdminRole, "role")

        password_hash = None
        if password:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(password)

        existing = self._admins.get_by_username(username)
        if existing and existing.email != email:
            raise ValidationError("Username already exists")

        if not self._admins.update_by_email(
            email, name=name, role=admin_role, username=username, password_hash=password_hash
        ):
            raise NotFoundError("Admin not found")
        self._mailer.admin_updated(to=email)

    def delete_admin(self, *, current_role: AdminRole, email: str) -> None:
        require_role(current_role, AdminRole.SUPER_ADMIN)
        email = require_non_empty(email, "Email")

        admin = self._admins.get_by_email(email)
        if not admin or not self._admins.delete_by_email(email):
            raise NotFoundError("Admin not found")
        logger.info("admin %s removed", admin.username)
        self._mailer.admin_removed(to=email, name=admin.name, role=admin.role.value)

    def update_admin_login(self, *, email: str, username: str, password: str) -> None:
        email = require_non_empty(email, "Email")
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        existing = self._admins.get_by_username(username)
        if existing and existing.email != email:
            raise ValidationError("Username already exists")

        if not self._admins.update_login(email, username=username, password_hash=generate_password_hash(password)):
            raise NotFoundError("Admin not found")
        self._mailer.admin_updated(to=email)

    def admin_analytics(self) -> dict:
        counts = self._admins.count_by_role()
        return {role.value: int(counts.get(role.value, 0)) for role in AdminRole}
