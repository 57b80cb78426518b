from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveApplication


class LeaveRepository(Protocol):
    def create(self, leave: LeaveApplication) -> None:
        raise NotImplementedError

    def get_by_id(self, leave_id: str) -> Optional[LeaveApplication]:
        """The application with the employee's name and email filled in."""
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveApplication]:
        raise NotImplementedError

    def decide(self, leave_id: str, *, status: LeaveStatus, admin_id: int, comment: Optional[str]) -> bool:
        """Set the decision and copy it to the approved/rejected table in one transaction."""
        raise NotImplementedError

    def list_decided(self, status: LeaveStatus) -> Sequence[dict]:
        raise NotImplementedError

    def count_by_status(self, status: LeaveStatus) -> int:
        raise NotImplementedError
