from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import ProposalStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import ProposalRepository

_SELECT = """
    SELECT p.proposal_id, p.employee_id, e.name AS employee_name, e.department_id, p.subject, p.content,
           p.submission_date, p.status, p.reviewed_by, p.review_date, p.review_note
    FROM proposals_table p
    JOIN employees_table e ON e.employee_id = p.employee_id
"""


class MySQLProposalRepository(ProposalRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, proposal: Dict[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO proposals_table (proposal_id, employee_id, subject, content, status)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (
                    proposal["proposal_id"],
                    proposal["employee_id"],
                    proposal["subject"],
                    proposal["content"],
                    proposal["status"],
                ),
            )

    def get_by_id(self, proposal_id: str) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.proposal_id=%s", (proposal_id,))
            return fetchone(cur)

    def list_by_department(self, department_id: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE e.department_id=%s ORDER BY p.submission_date DESC", (int(department_id),)
            )
            return fetchall(cur)

    def list_by_employee(self, employee_id: str) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.employee_id=%s ORDER BY p.submission_date DESC", (employee_id,))
            return fetchall(cur)

    def review(self, proposal_id: str, *, status: str, reviewer_id: int, review_note: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE proposals_table
                SET status=%s, reviewed_by=%s, review_date=CURRENT_TIMESTAMP, review_note=%s
                WHERE proposal_id=%s
                """,
                (status, int(reviewer_id), review_note, proposal_id),
            )
            return cur.rowcount > 0

    def count_pending_in_department(self, department_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS total
                FROM proposals_table p
                JOIN employees_table e ON e.employee_id = p.employee_id
                WHERE e.department_id=%s AND p.status=%s
                """,
                (int(department_id), ProposalStatus.PENDING.value),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0
