"""In-memory stand-ins for the MySQL repositories, shared by the service and API tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from werkzeug.security import generate_password_hash

from src.office_records.office_records.admins.model import Admin
from src.office_records.office_records.container import assemble
from src.office_records.office_records.core.enums import (
    AdminRole,
    FileType,
    ForwardStatus,
    LeaveStatus,
    RecipientType,
    RecordStatus,
)
from src.office_records.office_records.notifications.mail import Mailer, MailSettings


class RecordingMailer(Mailer):
    """Mailer that keeps outgoing messages instead of talking SMTP."""

    def __init__(self, fail_with: Optional[str] = None):
        super().__init__(MailSettings(host="localhost", port=25, sender="test@localhost", enabled=False))
        self.sent: list[tuple[str, str, str]] = []
        self._fail_with = fail_with

    def _send(self, receiver, subject, body):
        self.sent.append((receiver, subject, body))
        return self._fail_with


class FakeAdmins:
    def __init__(self):
        self._rows: dict[int, Admin] = {}
        self._next_id = 1

    def add(self, *, name, email, username, password, role: AdminRole) -> Admin:
        admin_id = self.create(
            name=name, email=email, username=username, password_hash=generate_password_hash(password), role=role
        )
        return self._rows[admin_id]

    def get_by_id(self, admin_id):
        return self._rows.get(int(admin_id))

    def get_by_username(self, username):
        return next((a for a in self._rows.values() if a.username == username), None)

    def get_by_email(self, email):
        return next((a for a in self._rows.values() if a.email == email), None)

    def list_all(self):
        return list(self._rows.values())

    def create(self, *, name, email, username, password_hash, role):
        admin_id = self._next_id
        self._next_id += 1
        self._rows[admin_id] = Admin(
            admin_id=admin_id,
            name=name,
            email=email,
            username=username,
            password=password_hash,
            role=role,
            date_assigned=datetime(2025, 1, 1, 9, 0, 0),
        )
        return admin_id

    def update_by_email(self, email, *, name, role, username, password_hash):
        admin = self.get_by_email(email)
        if not admin:
            return False
        self._rows[admin.admin_id] = replace(
            admin, name=name, role=role, username=username, password=password_hash or admin.password
        )
        return True

    def update_login(self, email, *, username, password_hash):
        admin = self.get_by_email(email)
        if not admin:
            return False
        self._rows[admin.admin_id] = replace(admin, username=username, password=password_hash)
        return True

    def delete_by_email(self, email):
        admin = self.get_by_email(email)
        if not admin:
            return False
        del self._rows[admin.admin_id]
        return True

    def count_by_role(self):
        out: dict = {}
        for a in self._rows.values():
            out[a.role.value] = out.get(a.role.value, 0) + 1
        return out


class FakeRoles:
    def __init__(self):
        self.rows: dict[int, dict] = {}
        self.profiles: dict[int, dict] = {}
        self._next_id = 1

    def list_all(self):
        return list(self.rows.values())

    def get_profile_for_admin(self, admin_id):
        return self.profiles.get(int(admin_id))

    def create(self, role):
        role_id = self._next_id
        self._next_id += 1
        self.rows[role_id] = dict(role, role_id=role_id)
        return role_id

    def update(self, role_id, fields):
        if int(role_id) not in self.rows:
            return False
        self.rows[int(role_id)].update(fields)
        return True

    def delete(self, role_id):
        return self.rows.pop(int(role_id), None) is not None


class FakeDepartments:
    def __init__(self):
        self.rows: dict[int, dict] = {}
        self._next_id = 1

    def list_all(self):
        return sorted(self.rows.values(), key=lambda d: d["name"])

    def get_by_id(self, department_id):
        return self.rows.get(int(department_id))

    def create(self, *, name, description, head_of_department, location, created_by):
        department_id = self._next_id
        self._next_id += 1
        self.rows[department_id] = {
            "department_id": department_id,
            "name": name,
            "description": description,
            "head_of_department": head_of_department,
            "location": location,
            "created_by": created_by,
        }
        return department_id

    def update(self, department_id, fields):
        if int(department_id) not in self.rows:
            return False
        self.rows[int(department_id)].update(fields)
        return True

    def delete(self, department_id):
        return self.rows.pop(int(department_id), None) is not None

    def count(self):
        return len(self.rows)


class FakeEmployees:
    def __init__(self):
        self.rows: dict[str, dict] = {}

    def add(self, employee_id, name, *, department_id=None, email=None, status="active"):
        self.rows[employee_id] = {
            "employee_id": employee_id,
            "name": name,
            "position": "Officer",
            "department_id": department_id,
            "email": email or f"{employee_id}@example.com",
            "phone": None,
            "status": status,
            "department_name": "Unassigned",
        }
        return self.rows[employee_id]

    def list_all(self):
        return list(self.rows.values())

    def get_by_id(self, employee_id):
        return self.rows.get(employee_id)

    def get_details(self, employee_id):
        return self.rows.get(employee_id)

    def list_by_department(self, department_id):
        return [e for e in self.rows.values() if e["department_id"] == int(department_id)]

    def create(self, employee):
        self.rows[employee["employee_id"]] = dict(employee, department_name="Unassigned")

    def update(self, employee_id, fields):
        if employee_id not in self.rows:
            return False
        self.rows[employee_id].update(fields)
        return True

    def delete(self, employee_id):
        return self.rows.pop(employee_id, None) is not None

    def count_by_status(self, status):
        return sum(1 for e in self.rows.values() if e["status"] == status)


class FakeFiles:
    def __init__(self, records: "FakeRecords"):
        self.rows: dict = {}
        self._records = records

    def last_sequence(self, admin_id):
        return max((int(f.file_number.rsplit("-", 1)[-1]) for f in self.rows.values()
                    if f.admin_id == int(admin_id)), default=0)

    def reference_exists(self, reference_number):
        return any(f.reference_number == reference_number for f in self.rows.values())

    def create(self, entry):
        self.rows[entry.id] = entry

    def get_by_id(self, file_id):
        entry = self.rows.get(file_id)
        if not entry:
            return None
        return replace(entry, records=[r for r in self._records.rows.values() if r.file_id == file_id])

    def list_by_admin(self, admin_id):
        files = [self.get_by_id(f.id) for f in self.rows.values() if f.admin_id == int(admin_id)]
        return sorted(files, key=lambda f: f.date_created, reverse=True)

    def update(self, file_id, fields):
        entry = self.rows.get(file_id)
        if not entry:
            return False
        changes = dict(fields)
        if "type" in changes:
            changes["type"] = FileType(changes["type"])
        self.rows[file_id] = replace(entry, **changes)
        return True

    def delete(self, file_id):
        if file_id not in self.rows:
            return False
        for record_id in [r.id for r in self._records.rows.values() if r.file_id == file_id]:
            self._records.delete(record_id)
        del self.rows[file_id]
        return True

    def count_all(self):
        return len(self.rows)


class FakeRecords:
    def __init__(self):
        self.rows: dict = {}
        self.forwards: Optional["FakeForwarding"] = None

    def count_by_file(self, file_id):
        return sum(1 for r in self.rows.values() if r.file_id == file_id)

    def create(self, record):
        self.rows[record.id] = record

    def get_by_id(self, record_id):
        return self.rows.get(record_id)

    def update(self, record_id, fields):
        record = self.rows.get(record_id)
        if not record:
            return False
        renames = {"from": "sender", "to": "recipient"}
        changes = {renames.get(k, k): v for k, v in fields.items()}
        if "status" in changes:
            changes["status"] = RecordStatus(changes["status"])
        self.rows[record_id] = replace(record, **changes)
        return True

    def delete(self, record_id):
        if record_id not in self.rows:
            return False
        del self.rows[record_id]
        if self.forwards is not None:
            self.forwards.forwards = {k: f for k, f in self.forwards.forwards.items() if f.record_id != record_id}
        return True

    def search(self, query, *, status, limit):
        q = query.lower()
        hits = [
            r.to_dict()
            for r in self.rows.values()
            if any(q in (v or "").lower() for v in (r.subject, r.sender, r.recipient, r.reference,
                                                     r.unique_number, r.tracking_number))
            and (not status or r.status.value == status)
        ]
        return hits[:limit]

    def recent(self, limit):
        return [r.to_dict() for r in sorted(self.rows.values(), key=lambda r: r.date, reverse=True)][:limit]

    def count_by_status(self):
        out: dict = {}
        for r in self.rows.values():
            out[r.status.value] = out.get(r.status.value, 0) + 1
        return out

    def set_status(self, record_id, status: RecordStatus):
        self.rows[record_id] = replace(self.rows[record_id], status=status)


class FakeForwarding:
    def __init__(self, records: FakeRecords):
        self.forwards: dict = {}
        self.reviews: list = []
        self._records = records
        records.forwards = self

    def get_forward(self, forward_id):
        return self.forwards.get(forward_id)

    def create_forward(self, forward, *, record_status):
        self.forwards[forward.forward_id] = forward
        self._records.set_status(forward.record_id, record_status)

    def _is_pending(self, forward_id):
        forward = self.forwards.get(forward_id)
        return forward is not None and forward.status == ForwardStatus.PENDING

    def apply_review(self, review, *, forward_status, record_status, next_forward=None):
        if not self._is_pending(review.forward_id):
            return False
        self.reviews.append(review)
        self.forwards[review.forward_id] = replace(self.forwards[review.forward_id], status=forward_status)
        if record_status is not None:
            self._records.set_status(review.record_id, record_status)
        if next_forward is not None:
            self.forwards[next_forward.forward_id] = next_forward
        return True

    def set_forward_status(self, forward_id, *, forward_status, record_id, record_status):
        if not self._is_pending(forward_id):
            return False
        self.forwards[forward_id] = replace(self.forwards[forward_id], status=forward_status)
        self._records.set_status(record_id, record_status)
        return True

    def _listing(self, predicate):
        return [
            dict(f.to_dict(), subject=self._records.rows[f.record_id].subject)
            for f in self.forwards.values()
            if predicate(f)
        ]

    def list_boss_records(self):
        return self._listing(
            lambda f: f.recipient_type == RecipientType.BOSS
            and f.status == ForwardStatus.PENDING
            and self._records.rows[f.record_id].status == RecordStatus.FORWARDED
        )

    def list_reviewed(self):
        return [{"review_id": r.review_id, "record_id": r.record_id, "review_action": r.review_action}
                for r in self.reviews]

    def list_department_records(self, department_name):
        return self._listing(
            lambda f: f.recipient_type == RecipientType.DEPARTMENT and f.forwarded_to == department_name
        )

    def list_employee_records(self, employee_id):
        return self._listing(lambda f: f.recipient_type == RecipientType.EMPLOYEE and f.employee_id == employee_id)


class FakeLeaves:
    def __init__(self, employees: FakeEmployees):
        self.rows: dict = {}
        self.approved: list[dict] = []
        self.rejected: list[dict] = []
        self._employees = employees

    def create(self, leave):
        self.rows[leave.leave_id] = leave

    def get_by_id(self, leave_id):
        leave = self.rows.get(leave_id)
        if not leave:
            return None
        employee = self._employees.get_by_id(leave.employee_id) or {}
        return replace(leave, employee_name=employee.get("name"), employee_email=employee.get("email"))

    def list_all(self):
        return [leave.to_dict() for leave in self.rows.values()]

    def list_by_employee(self, employee_id):
        return [leave for leave in self.rows.values() if leave.employee_id == employee_id]

    def decide(self, leave_id, *, status, admin_id, comment):
        leave = self.rows.get(leave_id)
        if not leave or leave.status != LeaveStatus.PENDING:
            return False
        self.rows[leave_id] = replace(
            leave, status=status, approved_by=admin_id, boss_comment=comment or leave.boss_comment
        )
        target = self.approved if status == LeaveStatus.APPROVED else self.rejected
        target.append({"leave_id": leave_id, "employee_id": leave.employee_id, "decided_by": admin_id,
                       "comment": comment})
        return True

    def list_decided(self, status):
        return list(self.approved if status == LeaveStatus.APPROVED else self.rejected)

    def count_by_status(self, status):
        return sum(1 for leave in self.rows.values() if leave.status == status)


class FakeTasks:
    def __init__(self):
        self.rows: dict[str, dict] = {}

    def list_assigned_by(self, admin_id):
        return sorted((t for t in self.rows.values() if t["assigned_by"] == int(admin_id)),
                      key=lambda t: t["due_date"])

    def list_for_employee(self, employee_id, *, status=None):
        return [t for t in self.rows.values()
                if t["employee_id"] == employee_id and (status is None or t["status"] == status)]

    def get_by_id(self, task_id):
        return self.rows.get(task_id)

    def create(self, task):
        self.rows[task["task_id"]] = dict(task)

    def update(self, task_id, fields):
        if task_id not in self.rows:
            return False
        self.rows[task_id].update(fields)
        return True

    def count_for_employee(self, employee_id, *, status):
        return len(self.list_for_employee(employee_id, status=status))


class FakePerformance:
    def __init__(self):
        self.rows: dict[str, dict] = {}

    def list_by_reviewer(self, reviewer_id):
        return [dict(r) for r in self.rows.values() if r["reviewer_id"] == int(reviewer_id)]

    def list_by_employee(self, employee_id):
        return [dict(r) for r in self.rows.values() if r["employee_id"] == employee_id]

    def create(self, review):
        self.rows[review["review_id"]] = dict(review)

    def update(self, review_id, fields):
        if review_id not in self.rows:
            return False
        self.rows[review_id].update(fields)
        return True

    def count_pending(self, *, employee_id=None):
        return sum(1 for r in self.rows.values()
                   if r["status"] == "pending" and (employee_id is None or r["employee_id"] == employee_id))


class FakeProposals:
    def __init__(self, employees: FakeEmployees):
        self.rows: dict[str, dict] = {}
        self._employees = employees

    def create(self, proposal):
        self.rows[proposal["proposal_id"]] = dict(proposal)

    def get_by_id(self, proposal_id):
        return self.rows.get(proposal_id)

    def _department_of(self, proposal):
        employee = self._employees.get_by_id(proposal["employee_id"]) or {}
        return employee.get("department_id")

    def list_by_department(self, department_id):
        return [p for p in self.rows.values() if self._department_of(p) == int(department_id)]

    def list_by_employee(self, employee_id):
        return [p for p in self.rows.values() if p["employee_id"] == employee_id]

    def review(self, proposal_id, *, status, reviewer_id, review_note):
        if proposal_id not in self.rows:
            return False
        self.rows[proposal_id].update(status=status, reviewed_by=reviewer_id, review_note=review_note)
        return True

    def count_pending_in_department(self, department_id):
        return sum(1 for p in self.list_by_department(department_id) if p["status"] == "pending")


def fake_container(mailer: Optional[Mailer] = None):
    """A fully wired container over fresh in-memory repositories."""
    records = FakeRecords()
    employees = FakeEmployees()
    return assemble(
        conn=None,
        mailer=mailer or RecordingMailer(),
        admins_repo=FakeAdmins(),
        roles_repo=FakeRoles(),
        departments_repo=FakeDepartments(),
        employees_repo=employees,
        files_repo=FakeFiles(records),
        records_repo=records,
        forwarding_repo=FakeForwarding(records),
        leaves_repo=FakeLeaves(employees),
        tasks_repo=FakeTasks(),
        performance_repo=FakePerformance(),
        proposals_repo=FakeProposals(employees),
    )
