from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence


class PerformanceRepository(Protocol):
    def list_by_reviewer(self, reviewer_id: int) -> Sequence[dict]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[dict]:
        raise NotImplementedError

    def create(self, review: Dict[str, Any]) -> None:
        raise NotImplementedError

    def update(self, review_id: str, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def count_pending(self, *, employee_id: Optional[str] = None) -> int:
        raise NotImplementedError
