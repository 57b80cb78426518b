from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.validators import optional_text, require_choice, require_non_empty, require_role
from ..core.enums import (
    AdminRole,
    EmployeeReviewAction,
    ForwardStatus,
    RecipientType,
    RecordStatus,
    ReviewAction,
)
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..files.service import REGISTRY_ROLES
from ..records.model import Record
from ..records.repository import RecordRepository
from .model import Forward, Review
from .repository import ForwardingRepository

logger = logging.getLogger(__name__)

# Records in these states are closed to further routing.
CLOSED_STATUSES = frozenset({RecordStatus.APPROVED, RecordStatus.REJECTED, RecordStatus.ARCHIVED})

BOSS_OUTCOMES = {
    ReviewAction.APPROVE: RecordStatus.APPROVED,
    ReviewAction.REJECT: RecordStatus.REJECTED,
    ReviewAction.SENDBACK: RecordStatus.REVIEWED,
    ReviewAction.MINUTE: RecordStatus.FORWARDED,
}

HOD_OUTCOMES = {
    ForwardStatus.APPROVED: RecordStatus.APPROVED,
    ForwardStatus.REJECTED: RecordStatus.REJECTED,
}

EMPLOYEE_OUTCOMES = {
    EmployeeReviewAction.ACCEPT: ForwardStatus.ACCEPTED,
    EmployeeReviewAction.REJECT: ForwardStatus.DECLINED,
}

ALREADY_REVIEWED = "This record has already been reviewed"


def _require_pending(forward: Forward) -> None:
    if forward.status != ForwardStatus.PENDING:
        raise ValidationError(ALREADY_REVIEWED)


class ForwardingService:
    """Moves records along Registry -> Boss -> department (HOD) -> employee."""

    def __init__(self, forwarding: ForwardingRepository, records: RecordRepository, employees: EmployeeRepository):
        self._forwarding = forwarding
        self._records = records
        self._employees = employees

    def _forwardable_record(self, record_id: str) -> Record:
        record = self._records.get_by_id(require_non_empty(record_id, "Record"))
        if not record:
            raise NotFoundError("Record not found")
        if record.status in CLOSED_STATUSES:
            raise ValidationError(f"A record that is {record.status.value} cannot be forwarded")
        return record

    def _forward(self, forward_id: str, recipient_type: RecipientType) -> Forward:
        forward = self._forwarding.get_forward(require_non_empty(forward_id, "Forward"))
        if not forward or forward.recipient_type != recipient_type:
            raise NotFoundError("Forwarded record not found")
        return forward

    def forward_record(
        self,
        *,
        current_role: AdminRole,
        record_id: str,
        forwarded_by: int,
        forwarded_to: str,
        recipient_type: str,
        notes: Optional[str] = None,
        department_id: Optional[int] = None,
        employee_id: Optional[str] = None,
    ) -> Forward:
        require_role(current_role, *REGISTRY_ROLES)
        rtype = require_choice(recipient_type, RecipientType, "recipient type")
        forwarded_to = require_non_empty(forwarded_to, "Recipient")
        record = self._forwardable_record(record_id)

        forward = Forward(
            forward_id=str(uuid.uuid4()),
            record_id=record.id,
            file_id=record.file_id,
            forwarded_by=int(forwarded_by),
            forwarded_to=forwarded_to,
            recipient_type=rtype,
            status=ForwardStatus.PENDING,
            notes=optional_text(notes),
            department_id=int(department_id) if department_id else None,
            employee_id=optional_text(employee_id),
        )
        self._forwarding.create_forward(forward, record_status=RecordStatus.FORWARDED)
        logger.info("record %s forwarded to %s (%s)", record.unique_number, forwarded_to, rtype.value)
        return forward

    def fetch_boss_records(self, *, current_role: AdminRole) -> Sequence[dict]:
        require_role(current_role, AdminRole.BOSS, AdminRole.SUPER_ADMIN)
        return self._forwarding.list_boss_records()

    def submit_review(
        self,
        *,
        current_role: AdminRole,
        record_id: str,
        forward_id: str,
        reviewed_by: str,
        review_action: str,
        review_note: Optional[str] = None,
        department: Optional[str] = None,
        department_person: Optional[str] = None,
    ) -> str:
        require_role(current_role, AdminRole.BOSS)
        action = require_choice(review_action, ReviewAction, "review action")
        reviewed_by = require_non_empty(reviewed_by, "Reviewer")
        department = optional_text(department)

        forward = self._forward(forward_id, RecipientType.BOSS)
        if forward.record_id != record_id:
            raise ValidationError("Forward does not belong to this record")
        _require_pending(forward)

        next_forward = None
        if action == ReviewAction.MINUTE:
            if not department:
                raise ValidationError("Department is required to minute a record")
            next_forward = Forward(
                forward_id=str(uuid.uuid4()),
                record_id=forward.record_id,
                file_id=forward.file_id,
                forwarded_by=forward.forwarded_by,
                forwarded_to=department,
                recipient_type=RecipientType.DEPARTMENT,
                status=ForwardStatus.PENDING,
                notes=optional_text(review_note),
            )

        review = Review(
            review_id=str(uuid.uuid4()),
            record_id=forward.record_id,
            forward_id=forward.forward_id,
            reviewed_by=reviewed_by,
            review_action=action.value,
            review_note=optional_text(review_note),
            department=department,
            department_person=optional_text(department_person),
        )
        if not self._forwarding.apply_review(
            review,
            forward_status=ForwardStatus.REVIEWED,
            record_status=BOSS_OUTCOMES[action],
            next_forward=next_forward,
        ):
            raise ValidationError(ALREADY_REVIEWED)
        logger.info("record %s reviewed by %s: %s", forward.record_id, reviewed_by, action.value)
        return review.review_id

    def fetch_reviewed_records(self) -> Sequence[dict]:
        return self._forwarding.list_reviewed()

    def fetch_department_records(self, *, current_role: AdminRole, department_name: str) -> Sequence[dict]:
        require_role(current_role, AdminRole.HOD, AdminRole.SUPER_ADMIN)
        return self._forwarding.list_department_records(require_non_empty(department_name, "Department"))

    def update_forward_status(self, *, current_role: AdminRole, forward_id: str, status: str) -> None:
        require_role(current_role, AdminRole.HOD)
        forward_status = require_choice((status or "").strip().lower(), ForwardStatus, "status")
        if forward_status not in HOD_OUTCOMES:
            raise ValidationError("Status must be approved or rejected")

        forward = self._forward(forward_id, RecipientType.DEPARTMENT)
        _require_pending(forward)
        if not self._forwarding.set_forward_status(
            forward.forward_id,
            forward_status=forward_status,
            record_id=forward.record_id,
            record_status=HOD_OUTCOMES[forward_status],
        ):
            raise ValidationError(ALREADY_REVIEWED)
        logger.info("department forward %s %s", forward.forward_id, forward_status.value)

    def forward_record_to_employee(
        self,
        *,
        current_role: AdminRole,
        record_id: str,
        file_id: str,
        forwarded_by: int,
        employee_id: str,
        department_id: Optional[int],
        notes: Optional[str] = None,
    ) -> Forward:
        require_role(current_role, AdminRole.HOD)
        employee = self._employees.get_by_id(require_non_empty(employee_id, "Employee"))
        if not employee:
            raise NotFoundError("Employee not found")
        record = self._forwardable_record(record_id)
        if file_id and record.file_id != file_id:
            raise ValidationError("Record does not belong to this file")

        forward = Forward(
            forward_id=str(uuid.uuid4()),
            record_id=record.id,
            file_id=record.file_id,
            forwarded_by=int(forwarded_by),
            forwarded_to=employee["name"],
            recipient_type=RecipientType.EMPLOYEE,
            status=ForwardStatus.PENDING,
            notes=optional_text(notes),
            department_id=int(department_id) if department_id else employee.get("department_id"),
            employee_id=employee["employee_id"],
        )
        self._forwarding.create_forward(forward, record_status=RecordStatus.FORWARDED)
        logger.info("record %s forwarded to employee %s", record.unique_number, employee["employee_id"])
        return forward

    def fetch_employee_records(self, *, employee_id: Optional[str]) -> Sequence[dict]:
        return self._forwarding.list_employee_records(require_non_empty(employee_id, "Employee"))

    def review_forwarded_record(
        self,
        *,
        current_role: AdminRole,
        forward_id: str,
        employee_id: str,
        employee_name: str,
        review_action: str,
        review_note: Optional[str] = None,
    ) -> str:
        require_role(current_role, AdminRole.EMPLOYEE)
        action = require_choice(review_action, EmployeeReviewAction, "review action")
        forward = self._forward(forward_id, RecipientType.EMPLOYEE)
        if forward.employee_id != employee_id:
            raise AuthorizationError("This record was not forwarded to you")
        _require_pending(forward)

        review = Review(
            review_id=str(uuid.uuid4()),
            record_id=forward.record_id,
            forward_id=forward.forward_id,
            reviewed_by=require_non_empty(employee_name, "Employee name"),
            review_action=action.value,
            review_note=optional_text(review_note),
        )
        if not self._forwarding.apply_review(review, forward_status=EMPLOYEE_OUTCOMES[action], record_status=None):
            raise ValidationError(ALREADY_REVIEWED)
        logger.info("employee %s %s forward %s", employee_id, action.value.lower(), forward.forward_id)
        return review.review_id
