from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..common.validators import optional_text, pick_fields, require_choice, require_non_empty, require_role
from ..core.enums import AdminRole, EmployeeStatus
from ..core.exceptions import NotFoundError
from ..departments.service import HR_ROLES
from .repository import EmployeeRepository

_UPDATABLE = ("name", "position", "department_id", "email", "phone", "status")


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def fetch_employees(self) -> Sequence[dict]:
        return self._employees.list_all()

    def fetch_department_employees(self, department_id: int) -> Sequence[dict]:
        return self._employees.list_by_department(int(department_id))

    def fetch_employee_details(self, employee_id: str) -> dict:
        details = self._employees.get_details(employee_id)
        if not details:
            raise NotFoundError("Employee not found")
        return details

    def add_employee(
        self,
        *,
        current_role: AdminRole,
        name: str,
        position: str,
        email: str,
        created_by: int,
        department_id: Optional[int] = None,
        phone: Optional[str] = None,
        status: str = EmployeeStatus.ACTIVE.value,
    ) -> str:
        require_role(current_role, *HR_ROLES)
        employee_id = str(uuid.uuid4())
        self._employees.create(
            {
                "employee_id": employee_id,
                "name": require_non_empty(name, "Name"),
                "position": require_non_empty(position, "Position"),
                "department_id": int(department_id) if department_id else None,
                "email": require_non_empty(email, "Email"),
                "phone": optional_text(phone),
                "status": require_choice(status or EmployeeStatus.ACTIVE.value, EmployeeStatus, "status").value,
                "created_by": int(created_by),
            }
        )
        return employee_id

    def update_employee(self, *, current_role: AdminRole, employee_id: str, data: dict) -> None:
        require_role(current_role, *HR_ROLES)
        fields = pick_fields(data, _UPDATABLE)
        for key, label in (("name", "Name"), ("position", "Position"), ("email", "Email")):
            if key in fields:
                fields[key] = require_non_empty(fields[key], label)
        if "status" in fields:
            fields["status"] = require_choice(fields["status"], EmployeeStatus, "status").value
        if "department_id" in fields:
            fields["department_id"] = int(fields["department_id"]) if fields["department_id"] else None
        if not self._employees.update(employee_id, fields):
            raise NotFoundError("Employee not found")

    def delete_employee(self, *, current_role: AdminRole, employee_id: str) -> None:
        require_role(current_role, *HR_ROLES)
        if not self._employees.delete(employee_id):
            raise NotFoundError("Employee not found")
