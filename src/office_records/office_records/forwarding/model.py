from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso
from ..core.enums import ForwardStatus, RecipientType


@dataclass(frozen=True)
class Forward:
    """One routing step of a record (row of forwarded_records)."""

    forward_id: str
    record_id: str
    file_id: str
    forwarded_by: int
    forwarded_to: str
    recipient_type: RecipientType
    status: ForwardStatus
    notes: Optional[str] = None
    department_id: Optional[int] = None
    employee_id: Optional[str] = None
    forward_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "forward_id": self.forward_id,
            "record_id": self.record_id,
            "file_id": self.file_id,
            "forwarded_by": self.forwarded_by,
            "forwarded_to": self.forwarded_to,
            "recipient_type": self.recipient_type.value,
            "notes": self.notes,
            "forward_date": iso(self.forward_date),
            "status": self.status.value,
            "department_id": self.department_id,
            "employee_id": self.employee_id,
        }


@dataclass(frozen=True)
class Review:
    """A decision on a forward (row of reviews_records)."""

    review_id: str
    record_id: str
    forward_id: str
    reviewed_by: str
    review_action: str
    review_note: Optional[str] = None
    department: Optional[str] = None
    department_person: Optional[str] = None
