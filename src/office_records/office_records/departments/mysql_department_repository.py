from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .repository import DepartmentRepository


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT d.department_id, d.name, d.description, d.head_of_department, d.location,
                       d.created_by, d.date_created, a.name AS created_by_name
                FROM departments_table d
                LEFT JOIN lists_of_admins a ON a.admin_id = d.created_by
                ORDER BY d.name
                """
            )
            return fetchall(cur)

    def get_by_id(self, department_id: int) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM departments_table WHERE department_id=%s", (int(department_id),))
            return fetchone(cur)

    def create(
        self,
        *,
        name: str,
        description: Optional[str],
        head_of_department: Optional[str],
        location: Optional[str],
        created_by: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO departments_table (name, description, head_of_department, location, created_by)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (name, description, head_of_department, location, int(created_by)),
            )
            return int(cur.lastrowid)

    def update(self, department_id: int, fields: Dict[str, Any]) -> bool:
        sql, params = build_update(
            "departments_table", fields, key_column="department_id", key_value=int(department_id)
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, department_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments_table WHERE department_id=%s", (int(department_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM departments_table")
            row = fetchone(cur)
            return int(row["total"]) if row else 0
