from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[dict]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        description: Optional[str],
        head_of_department: Optional[str],
        location: Optional[str],
        created_by: int,
    ) -> int:
        raise NotImplementedError

    def update(self, department_id: int, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, department_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
