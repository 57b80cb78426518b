from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveApplication
from .repository import LeaveRepository

_DECISION_TABLES = {
    LeaveStatus.APPROVED: "approved_leaves_table",
    LeaveStatus.REJECTED: "rejected_leaves_table",
}


def _to_leave(row: dict) -> LeaveApplication:
    return LeaveApplication(
        leave_id=row["leave_id"],
        employee_id=row["employee_id"],
        leave_type=LeaveType(row["leave_type"]),
        start_date=row["start_date"],
        end_date=row["end_date"],
        reason=row["reason"],
        status=LeaveStatus(row["status"]),
        evidence_url=row.get("evidence_url"),
        evidence_name=row.get("evidence_name"),
        application_date=row.get("application_date"),
        approved_by=row.get("approved_by"),
        boss_comment=row.get("boss_comment"),
        employee_name=row.get("employee_name"),
        employee_email=row.get("employee_email"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, leave: LeaveApplication) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_applications_table
                    (leave_id, employee_id, leave_type, start_date, end_date, reason, status,
                     evidence_url, evidence_name)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    leave.leave_id,
                    leave.employee_id,
                    leave.leave_type.value,
                    leave.start_date,
                    leave.end_date,
                    leave.reason,
                    leave.status.value,
                    leave.evidence_url,
                    leave.evidence_name,
                ),
            )

    def get_by_id(self, leave_id: str) -> Optional[LeaveApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT l.*, e.name AS employee_name, e.email AS employee_email
                FROM leave_applications_table l
                JOIN employees_table e ON e.employee_id = l.employee_id
                WHERE l.leave_id=%s
                """,
                (leave_id,),
            )
            row = fetchone(cur)
            return _to_leave(row) if row else None

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT l.*, e.name AS employee_name, e.email AS employee_email, e.position,
                       COALESCE(d.name, 'Unassigned') AS department_name
                FROM leave_applications_table l
                JOIN employees_table e ON e.employee_id = l.employee_id
                LEFT JOIN departments_table d ON d.department_id = e.department_id
                ORDER BY l.application_date DESC
                """
            )
            out = []
            for row in fetchall(cur):
                item = _to_leave(row).to_dict()
                item["position"] = row.get("position")
                item["department_name"] = row.get("department_name")
                out.append(item)
            return out

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT * FROM leave_applications_table WHERE employee_id=%s ORDER BY application_date DESC",
                (employee_id,),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def decide(self, leave_id: str, *, status: LeaveStatus, admin_id: int, comment: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_applications_table
                SET status=%s, approved_by=%s, updated_at=CURRENT_TIMESTAMP,
                    boss_comment=COALESCE(%s, boss_comment)
                WHERE leave_id=%s AND status=%s
                """,
                (status.value, int(admin_id), comment, leave_id, LeaveStatus.PENDING.value),
            )
            if cur.rowcount == 0:
                return False
            cur.execute(
                f"""
                INSERT INTO {_DECISION_TABLES[status]} (leave_id, employee_id, decided_by, comment)
                SELECT leave_id, employee_id, %s, %s FROM leave_applications_table WHERE leave_id=%s
                """,
                (int(admin_id), comment, leave_id),
            )
            return True

    def list_decided(self, status: LeaveStatus) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT t.id, t.leave_id, t.employee_id, t.decided_by, t.comment, t.decided_at,
                       l.leave_type, l.start_date, l.end_date, l.reason,
                       e.name AS employee_name, a.name AS decided_by_name
                FROM {_DECISION_TABLES[status]} t
                JOIN leave_applications_table l ON l.leave_id = t.leave_id
                JOIN employees_table e ON e.employee_id = t.employee_id
                LEFT JOIN lists_of_admins a ON a.admin_id = t.decided_by
                ORDER BY t.decided_at DESC
                """
            )
            return fetchall(cur)

    def count_by_status(self, status: LeaveStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM leave_applications_table WHERE status=%s", (status.value,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0
