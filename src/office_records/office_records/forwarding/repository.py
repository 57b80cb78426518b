from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ForwardStatus, RecordStatus
from .model import Forward, Review


class ForwardingRepository(Protocol):
    """Writes here touch several tables; each method is one transaction."""

    def get_forward(self, forward_id: str) -> Optional[Forward]:
        raise NotImplementedError

    def create_forward(self, forward: Forward, *, record_status: RecordStatus) -> None:
        """Insert the forward and move its record to record_status."""
        raise NotImplementedError

    def apply_review(
        self,
        review: Review,
        *,
        forward_status: ForwardStatus,
        record_status: Optional[RecordStatus],
        next_forward: Optional[Forward] = None,
    ) -> bool:
        """Close a pending forward with a review, set the record status and optionally route onwards.

        Returns False (and writes nothing) when the forward is no longer pending.
        """
        raise NotImplementedError

    def set_forward_status(
        self, forward_id: str, *, forward_status: ForwardStatus, record_id: str, record_status: RecordStatus
    ) -> bool:
        """Decide a pending forward; False when it is missing or already decided."""
        raise NotImplementedError

    def list_boss_records(self) -> Sequence[dict]:
        """Pending forwards addressed to the Boss."""
        raise NotImplementedError

    def list_reviewed(self) -> Sequence[dict]:
        raise NotImplementedError

    def list_department_records(self, department_name: str) -> Sequence[dict]:
        raise NotImplementedError

    def list_employee_records(self, employee_id: str) -> Sequence[dict]:
        raise NotImplementedError
