from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .repository import TaskRepository

_SELECT = """
    SELECT t.task_id, t.task_id AS id, t.title, t.description, t.employee_id, e.name AS employee_name,
           t.assigned_by, a.name AS assigner_name, t.due_date, t.priority, t.status,
           t.created_at, t.updated_at
    FROM tasks_table t
    JOIN employees_table e ON e.employee_id = t.employee_id
    LEFT JOIN lists_of_admins a ON a.admin_id = t.assigned_by
"""


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_assigned_by(self, admin_id: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE t.assigned_by=%s ORDER BY t.due_date ASC", (int(admin_id),))
            return fetchall(cur)

    def list_for_employee(self, employee_id: str, *, status: Optional[str] = None) -> Sequence[dict]:
        sql = _SELECT + " WHERE t.employee_id=%s"
        params: list = [employee_id]
        if status:
            sql += " AND t.status=%s"
            params.append(status)
        sql += " ORDER BY t.due_date ASC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return fetchall(cur)

    def get_by_id(self, task_id: str) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE t.task_id=%s", (task_id,))
            return fetchone(cur)

    def create(self, task: Dict[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks_table
                    (task_id, title, description, employee_id, assigned_by, due_date, priority, status)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    task["task_id"],
                    task["title"],
                    task.get("description"),
                    task["employee_id"],
                    task["assigned_by"],
                    task["due_date"],
                    task["priority"],
                    task["status"],
                ),
            )

    def update(self, task_id: str, fields: Dict[str, Any]) -> bool:
        sql, params = build_update(
            "tasks_table", fields, key_column="task_id", key_value=task_id, touch_column="updated_at"
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def count_for_employee(self, employee_id: str, *, status: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM tasks_table WHERE employee_id=%s AND status=%s",
                (employee_id, status),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0
