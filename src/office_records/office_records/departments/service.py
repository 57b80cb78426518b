from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import optional_text, pick_fields, require_non_empty, require_role
from ..core.enums import AdminRole
from ..core.exceptions import NotFoundError
from .repository import DepartmentRepository

HR_ROLES = (AdminRole.HUMAN_RESOURCE, AdminRole.SUPER_ADMIN)

_UPDATABLE = ("name", "description", "head_of_department", "location")


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def fetch_departments(self) -> Sequence[dict]:
        return self._departments.list_all()

    def add_department(
        self,
        *,
        current_role: AdminRole,
        name: str,
        created_by: int,
        description: Optional[str] = None,
        head_of_department: Optional[str] = None,
        location: Optional[str] = None,
    ) -> int:
        require_role(current_role, *HR_ROLES)
        return self._departments.create(
            name=require_non_empty(name, "Department name"),
            description=optional_text(description),
            head_of_department=optional_text(head_of_department),
            location=optional_text(location),
            created_by=int(created_by),
        )

    def update_department(self, *, current_role: AdminRole, department_id: int, data: dict) -> None:
        require_role(current_role, *HR_ROLES)
        fields = pick_fields(data, _UPDATABLE)
        if "name" in fields:
            fields["name"] = require_non_empty(fields["name"], "Department name")
        if not self._departments.update(int(department_id), fields):
            raise NotFoundError("Department not found")

    def delete_department(self, *, current_role: AdminRole, department_id: int) -> None:
        require_role(current_role, *HR_ROLES)
        if not self._departments.delete(int(department_id)):
            raise NotFoundError("Department not found")
