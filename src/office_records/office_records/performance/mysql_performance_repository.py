from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import ReviewStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .repository import PerformanceRepository

_SELECT = """
    SELECT pr.review_id, pr.employee_id, e.name AS employee_name, pr.reviewer_id, a.name AS reviewer_name,
           pr.subject, pr.content, pr.rating, pr.status, pr.review_date, pr.created_at, pr.updated_at
    FROM performance_reviews_table pr
    JOIN employees_table e ON e.employee_id = pr.employee_id
    LEFT JOIN lists_of_admins a ON a.admin_id = pr.reviewer_id
"""


class MySQLPerformanceRepository(PerformanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_by_reviewer(self, reviewer_id: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE pr.reviewer_id=%s ORDER BY pr.review_date DESC", (int(reviewer_id),))
            return fetchall(cur)

    def list_by_employee(self, employee_id: str) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE pr.employee_id=%s ORDER BY pr.review_date DESC", (employee_id,))
            return fetchall(cur)

    def create(self, review: Dict[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO performance_reviews_table
                    (review_id, employee_id, reviewer_id, subject, content, rating, status)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    review["review_id"],
                    review["employee_id"],
                    review["reviewer_id"],
                    review["subject"],
                    review["content"],
                    review["rating"],
                    review["status"],
                ),
            )

    def update(self, review_id: str, fields: Dict[str, Any]) -> bool:
        sql, params = build_update(
            "performance_reviews_table", fields, key_column="review_id", key_value=review_id,
            touch_column="updated_at",
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def count_pending(self, *, employee_id: Optional[str] = None) -> int:
        sql = "SELECT COUNT(*) AS total FROM performance_reviews_table WHERE status=%s"
        params: list = [ReviewStatus.PENDING.value]
        if employee_id:
            sql += " AND employee_id=%s"
            params.append(employee_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0
