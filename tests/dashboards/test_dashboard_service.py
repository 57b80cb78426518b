from __future__ import annotations

from datetime import date

import pytest

from src.office_records.office_records.core.enums import AdminRole
from src.office_records.office_records.core.exceptions import AuthorizationError
from tests.fakes import fake_container

HOD_EMPLOYEE = "emp-hod"


@pytest.fixture()
def c():
    c = fake_container()
    employees = c.employees_repo
    employees.add(HOD_EMPLOYEE, "Hana Head", department_id=1)
    employees.add("emp-1", "Ama", department_id=1)
    employees.add("emp-2", "Kwame", department_id=1, status="inactive")
    employees.add("emp-3", "Yaw", department_id=2)

    c.department_service.add_department(current_role=AdminRole.HUMAN_RESOURCE, name="Finance", created_by=1)
    c.department_service.add_department(current_role=AdminRole.HUMAN_RESOURCE, name="Audit", created_by=1)

    leave = dict(leave_type="annual", start_date=date(2025, 5, 1), end_date=date(2025, 5, 2), reason="Rest")
    first = c.leave_service.submit_leave(employee_id="emp-1", **leave)
    c.leave_service.submit_leave(employee_id="emp-3", **leave)
    c.leave_service.update_leave_status(
        current_role=AdminRole.HUMAN_RESOURCE, leave_id=first.leave_id, status="approved", admin_id=1
    )

    review = dict(current_role=AdminRole.HOD, reviewer_id=7, rating=3, feedback="ok", goals="more")
    c.performance_service.add_review(employee_id=HOD_EMPLOYEE, **review)
    c.performance_service.add_review(employee_id="emp-1", **review)
    c.performance_service.add_review(employee_id="emp-1", status="completed", **review)

    c.proposal_service.submit_proposal(employee_id="emp-1", subject="Shelving", content="More shelves")
    reviewed = c.proposal_service.submit_proposal(employee_id="emp-2", subject="Scanner", content="Buy one")
    c.proposal_service.submit_proposal(employee_id="emp-3", subject="Other dept", content="x")
    c.proposal_service.review_proposal(
        current_role=AdminRole.HOD, proposal_id=reviewed, status="approved", reviewer_id=7
    )

    task = dict(current_role=AdminRole.HOD, assigned_by=7, due_date=date(2025, 6, 1))
    c.task_service.add_task(title="Report", employee_id=HOD_EMPLOYEE, **task)
    c.task_service.add_task(title="Audit", employee_id=HOD_EMPLOYEE, status="completed", **task)
    c.task_service.add_task(title="Filing", employee_id="emp-1", **task)
    return c


def test_hr_summary_counts(c):
    summary = c.dashboard_service.hr_summary(current_role=AdminRole.HUMAN_RESOURCE)
    assert summary == {
        "activeEmployees": 3,
        "pendingLeaves": 1,
        "upcomingReviews": 2,
        "departments": 2,
    }


def test_hod_summary_is_scoped_to_department_and_employee(c):
    summary = c.dashboard_service.hod_summary(
        current_role=AdminRole.HOD, department_id=1, employee_id=HOD_EMPLOYEE
    )
    assert summary == {
        "totalEmployees": 3,
        "pendingProposals": 1,
        "upcomingReviews": 1,
        "pendingTasks": 1,
    }


def test_hod_summary_without_department_link(c):
    summary = c.dashboard_service.hod_summary(current_role=AdminRole.HOD, department_id=None, employee_id=None)
    assert summary == {"totalEmployees": 0, "pendingProposals": 0, "upcomingReviews": 0, "pendingTasks": 0}


@pytest.mark.parametrize(
    "method,role",
    [("hr_summary", AdminRole.REGISTRY), ("boss_summary", AdminRole.HOD), ("super_admin_summary", AdminRole.BOSS)],
)
def test_dashboards_are_role_scoped(c, method, role):
    with pytest.raises(AuthorizationError):
        getattr(c.dashboard_service, method)(current_role=role)


def test_hod_dashboard_needs_hod(c):
    with pytest.raises(AuthorizationError):
        c.dashboard_service.hod_summary(current_role=AdminRole.HUMAN_RESOURCE, department_id=1, employee_id=None)
