from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence


class TaskRepository(Protocol):
    def list_assigned_by(self, admin_id: int) -> Sequence[dict]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, status: Optional[str] = None) -> Sequence[dict]:
        raise NotImplementedError

    def get_by_id(self, task_id: str) -> Optional[dict]:
        raise NotImplementedError

    def create(self, task: Dict[str, Any]) -> None:
        raise NotImplementedError

    def update(self, task_id: str, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def count_for_employee(self, employee_id: str, *, status: str) -> int:
        raise NotImplementedError
