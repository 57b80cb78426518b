from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence


class RoleRepository(Protocol):
    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def get_profile_for_admin(self, admin_id: int) -> Optional[dict]:
        """roles_table row linked to a login, joined with its employee and department."""
        raise NotImplementedError

    def create(self, role: Dict[str, Any]) -> int:
        raise NotImplementedError

    def update(self, role_id: int, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, role_id: int) -> bool:
        raise NotImplementedError
