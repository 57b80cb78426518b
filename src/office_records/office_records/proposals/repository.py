from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence


class ProposalRepository(Protocol):
    def create(self, proposal: Dict[str, Any]) -> None:
        raise NotImplementedError

    def get_by_id(self, proposal_id: str) -> Optional[dict]:
        raise NotImplementedError

    def list_by_department(self, department_id: int) -> Sequence[dict]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[dict]:
        raise NotImplementedError

    def review(self, proposal_id: str, *, status: str, reviewer_id: int, review_note: Optional[str]) -> bool:
        raise NotImplementedError

    def count_pending_in_department(self, department_id: int) -> int:
        raise NotImplementedError
