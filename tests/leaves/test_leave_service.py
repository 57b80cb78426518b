from __future__ import annotations

from datetime import date

import pytest

from src.office_records.office_records.common.uploads import Attachment
from src.office_records.office_records.core.enums import AdminRole, LeaveStatus
from src.office_records.office_records.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_records.office_records.leaves.service import LeaveService
from tests.fakes import FakeEmployees, FakeLeaves, RecordingMailer


def make_service():
    employees = FakeEmployees()
    employees.add("emp-1", "Kofi Mensah", department_id=1, email="kofi@example.com")
    leaves = FakeLeaves(employees)
    mailer = RecordingMailer()
    return LeaveService(leaves, mailer), leaves, mailer


def submit(service, **overrides):
    data = dict(
        employee_id="emp-1",
        leave_type="annual",
        start_date=date(2025, 3, 10),
        end_date=date(2025, 3, 14),
        reason="Family visit",
    )
    data.update(overrides)
    return service.submit_leave(**data)


def test_submit_leave_is_pending():
    service, leaves, _ = make_service()
    leave = submit(service)
    assert leave.status == LeaveStatus.PENDING
    assert leave.days == 5
    assert [l.leave_id for l in service.fetch_employee_leaves("emp-1")] == [leave.leave_id]


def test_submit_leave_keeps_evidence():
    service, _, _ = make_service()
    evidence = Attachment(name="note.pdf", size=2048, content_type="application/pdf", url="data:application/pdf;base64,AA==")
    leave = submit(service, leave_type="sick", evidence=evidence)
    assert leave.evidence_name == "note.pdf"
    assert leave.evidence_url.startswith("data:application/pdf")


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"end_date": date(2025, 3, 1)}, "End date cannot be before start date"),
        ({"reason": "   "}, "Reason is required"),
        ({"start_date": None}, "Start date and end date are required"),
        ({"leave_type": "holiday"}, "Invalid leave type"),
        ({"employee_id": None}, "Employee is required"),
    ],
)
def test_submit_leave_validation(overrides, message):
    service, leaves, _ = make_service()
    with pytest.raises(ValidationError, match=message):
        submit(service, **overrides)
    assert leaves.rows == {}


def test_approve_records_decision_and_mails_employee():
    service, leaves, mailer = make_service()
    leave = submit(service)

    service.update_leave_status(
        current_role=AdminRole.BOSS, leave_id=leave.leave_id, status="approved", admin_id=3, comment="Enjoy"
    )

    assert leaves.rows[leave.leave_id].status == LeaveStatus.APPROVED
    assert leaves.rows[leave.leave_id].approved_by == 3
    assert len(leaves.approved) == 1 and leaves.rejected == []
    assert leaves.approved[0]["decided_by"] == 3

    assert len(mailer.sent) == 1
    receiver, subject, body = mailer.sent[0]
    assert receiver == "kofi@example.com"
    assert "approved" in subject
    assert "Enjoy" in body


def test_reject_goes_to_rejected_list():
    service, leaves, _ = make_service()
    leave = submit(service)
    service.update_leave_status(current_role=AdminRole.HUMAN_RESOURCE, leave_id=leave.leave_id, status="rejected", admin_id=4)

    assert leaves.rows[leave.leave_id].status == LeaveStatus.REJECTED
    assert leaves.approved == []
    assert [r["leave_id"] for r in service.fetch_rejected_leaves(current_role=AdminRole.HUMAN_RESOURCE)] == [
        leave.leave_id
    ]


def test_second_decision_is_refused():
    service, leaves, mailer = make_service()
    leave = submit(service)
    service.update_leave_status(current_role=AdminRole.BOSS, leave_id=leave.leave_id, status="approved", admin_id=3)

    with pytest.raises(ValidationError, match="already been approved"):
        service.update_leave_status(current_role=AdminRole.BOSS, leave_id=leave.leave_id, status="rejected", admin_id=3)
    assert len(leaves.approved) == 1
    assert leaves.rejected == []
    assert len(mailer.sent) == 1


def test_decision_must_be_final_status():
    service, _, _ = make_service()
    leave = submit(service)
    with pytest.raises(ValidationError):
        service.update_leave_status(current_role=AdminRole.BOSS, leave_id=leave.leave_id, status="pending", admin_id=3)


def test_unknown_leave():
    service, _, _ = make_service()
    with pytest.raises(NotFoundError):
        service.update_leave_status(current_role=AdminRole.BOSS, leave_id="missing", status="approved", admin_id=3)


def test_mail_failure_does_not_undo_decision():
    employees = FakeEmployees()
    employees.add("emp-1", "Kofi Mensah")
    leaves = FakeLeaves(employees)
    service = LeaveService(leaves, RecordingMailer(fail_with="SMTP server not reachable"))
    leave = submit(service)

    service.update_leave_status(current_role=AdminRole.BOSS, leave_id=leave.leave_id, status="approved", admin_id=3)
    assert leaves.rows[leave.leave_id].status == LeaveStatus.APPROVED


@pytest.mark.parametrize("role", [AdminRole.REGISTRY, AdminRole.HOD, AdminRole.EMPLOYEE])
def test_only_approvers_decide(role):
    service, _, _ = make_service()
    leave = submit(service)
    with pytest.raises(AuthorizationError):
        service.update_leave_status(current_role=role, leave_id=leave.leave_id, status="approved", admin_id=3)
    with pytest.raises(AuthorizationError):
        service.fetch_leave_applications(current_role=role)
