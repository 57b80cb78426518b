from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import optional_text, pick_fields, require_choice, require_non_empty, require_role
from ..core.enums import AdminRole, EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.service import HR_ROLES
from ..employees.repository import EmployeeRepository
from .repository import RoleRepository

_UPDATABLE = ("role_name", "employee_id", "department_id", "admin_id", "description", "status")


class RoleService:
    """Job roles of employees; a role row may also link an employee to a login."""

    def __init__(self, roles: RoleRepository, employees: EmployeeRepository):
        self._roles = roles
        self._employees = employees

    def _require_employee(self, employee_id: str) -> dict:
        employee = self._employees.get_by_id(require_non_empty(employee_id, "Employee"))
        if not employee:
            raise ValidationError("Employee not found")
        return employee

    def fetch_roles(self) -> Sequence[dict]:
        return self._roles.list_all()

    def add_role(
        self,
        *,
        current_role: AdminRole,
        role_name: str,
        employee_id: str,
        assigned_by: int,
        department_id: Optional[int] = None,
        description: Optional[str] = None,
        status: str = EmployeeStatus.ACTIVE.value,
        admin_id: Optional[int] = None,
    ) -> int:
        require_role(current_role, *HR_ROLES)
        role_name = require_non_empty(role_name, "Role name")
        employee = self._require_employee(employee_id)
        if not department_id:
            department_id = employee.get("department_id")

        return self._roles.create(
            {
                "role_name": role_name,
                "employee_id": employee["employee_id"],
                "department_id": int(department_id) if department_id else None,
                "admin_id": int(admin_id) if admin_id else None,
                "description": optional_text(description),
                "assigned_by": int(assigned_by),
                "status": require_choice(status or EmployeeStatus.ACTIVE.value, EmployeeStatus, "status").value,
            }
        )

    def update_role(self, *, current_role: AdminRole, role_id: int, data: dict) -> None:
        require_role(current_role, *HR_ROLES)
        fields = pick_fields(data, _UPDATABLE)
        if "role_name" in fields:
            fields["role_name"] = require_non_empty(fields["role_name"], "Role name")
        if "employee_id" in fields:
            self._require_employee(fields["employee_id"])
        if "status" in fields:
            fields["status"] = require_choice(fields["status"], EmployeeStatus, "status").value
        if not self._roles.update(int(role_id), fields):
            raise NotFoundError("Role not found")

    def delete_role(self, *, current_role: AdminRole, role_id: int) -> None:
        require_role(current_role, *HR_ROLES)
        if not self._roles.delete(int(role_id)):
            raise NotFoundError("Role not found")
