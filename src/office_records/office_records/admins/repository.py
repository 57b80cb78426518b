from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AdminRole
from .model import Admin


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Admin]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Admin]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, username: str, password_hash: str, role: AdminRole) -> int:
        raise NotImplementedError

    def update_by_email(
        self,
        email: str,
        *,
        name: str,
        role: AdminRole,
        username: str,
        password_hash: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def update_login(self, email: str, *, username: str, password_hash: str) -> bool:
        raise NotImplementedError

    def delete_by_email(self, email: str) -> bool:
        """False when no admin has this email; ValidationError while other rows still reference it."""
        raise NotImplementedError

    def count_by_role(self) -> dict:
        raise NotImplementedError
