from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import iso
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveApplication:
    leave_id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    evidence_url: Optional[str] = None
    evidence_name: Optional[str] = None
    application_date: Optional[datetime] = None
    approved_by: Optional[int] = None
    boss_comment: Optional[str] = None
    employee_name: Optional[str] = None
    employee_email: Optional[str] = None

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict:
        return {
            "leave_id": self.leave_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "leave_type": self.leave_type.value,
            "start_date": iso(self.start_date),
            "end_date": iso(self.end_date),
            "days": self.days,
            "reason": self.reason,
            "status": self.status.value,
            "evidence_url": self.evidence_url,
            "evidence_name": self.evidence_name,
            "application_date": iso(self.application_date),
            "approved_by": self.approved_by,
            "boss_comment": self.boss_comment,
        }
