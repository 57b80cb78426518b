from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional, Sequence

from ..common.uploads import Attachment
from ..common.validators import optional_text, require_choice, require_non_empty, require_role
from ..core.enums import AdminRole, LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.mail import Mailer
from ..records.service import validate_attachment
from .model import LeaveApplication
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

LEAVE_APPROVERS = (AdminRole.BOSS, AdminRole.HUMAN_RESOURCE, AdminRole.SUPER_ADMIN)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, mailer: Mailer):
        self._leaves = leaves
        self._mailer = mailer

    def submit_leave(
        self,
        *,
        employee_id: Optional[str],
        leave_type: str,
        start_date: Optional[date],
        end_date: Optional[date],
        reason: str,
        evidence: Optional[Attachment] = None,
    ) -> LeaveApplication:
        employee_id = require_non_empty(employee_id, "Employee")
        ltype = require_choice(leave_type, LeaveType, "leave type")
        if not start_date or not end_date:
            raise ValidationError("Start date and end date are required")
        if end_date < start_date:
            raise ValidationError("End date cannot be before start date")
        reason = require_non_empty(reason, "Reason")
        evidence = validate_attachment(evidence)

        leave = LeaveApplication(
            leave_id=str(uuid.uuid4()),
            employee_id=employee_id,
            leave_type=ltype,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            evidence_url=evidence.url if evidence else None,
            evidence_name=evidence.name if evidence else None,
        )
        self._leaves.create(leave)
        logger.info("leave %s submitted by employee %s", leave.leave_id, employee_id)
        return leave

    def fetch_leave_applications(self, *, current_role: AdminRole) -> Sequence[dict]:
        require_role(current_role, *LEAVE_APPROVERS)
        return self._leaves.list_all()

    def fetch_employee_leaves(self, employee_id: Optional[str]) -> Sequence[LeaveApplication]:
        return self._leaves.list_by_employee(require_non_empty(employee_id, "Employee"))

    def update_leave_status(
        self,
        *,
        current_role: AdminRole,
        leave_id: str,
        status: str,
        admin_id: int,
        comment: Optional[str] = None,
    ) -> None:
        require_role(current_role, *LEAVE_APPROVERS)
        decision = require_choice(status, LeaveStatus, "status")
        if decision == LeaveStatus.PENDING:
            raise ValidationError("Status must be approved or rejected")

        leave = self._leaves.get_by_id(leave_id)
        if not leave:
            raise NotFoundError("Leave application not found")
        if leave.status != LeaveStatus.PENDING:
            raise ValidationError(f"Leave application has already been {leave.status.value}")

        comment = optional_text(comment)
        if not self._leaves.decide(leave_id, status=decision, admin_id=int(admin_id), comment=comment):
            raise ValidationError("Leave application has already been decided")
        logger.info("leave %s %s by admin %s", leave_id, decision.value, admin_id)

        self._mailer.leave_decided(
            to=leave.employee_email or "",
            employee_name=leave.employee_name or "",
            leave_id=leave.leave_id,
            leave_type=leave.leave_type.value,
            start_date=leave.start_date,
            end_date=leave.end_date,
            status=decision.value,
            comment=comment,
        )

    def fetch_approved_leaves(self, *, current_role: AdminRole) -> Sequence[dict]:
        require_role(current_role, *LEAVE_APPROVERS)
        return self._leaves.list_decided(LeaveStatus.APPROVED)

    def fetch_rejected_leaves(self, *, current_role: AdminRole) -> Sequence[dict]:
        require_role(current_role, *LEAVE_APPROVERS)
        return self._leaves.list_decided(LeaveStatus.REJECTED)
