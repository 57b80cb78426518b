from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[dict]:
        raise NotImplementedError

    def get_details(self, employee_id: str) -> Optional[dict]:
        raise NotImplementedError

    def list_by_department(self, department_id: int) -> Sequence[dict]:
        raise NotImplementedError

    def create(self, employee: Dict[str, Any]) -> None:
        raise NotImplementedError

    def update(self, employee_id: str, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError

    def count_by_status(self, status: str) -> int:
        raise NotImplementedError
