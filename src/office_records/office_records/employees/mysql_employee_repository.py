from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.name, e.position, e.department_id, e.email, e.phone, e.status,
           e.created_by, e.created_at, e.updated_at,
           COALESCE(d.name, 'Unassigned') AS department_name
    FROM employees_table e
    LEFT JOIN departments_table d ON d.department_id = e.department_id
"""


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY e.name")
            return fetchall(cur)

    def get_by_id(self, employee_id: str) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (employee_id,))
            return fetchone(cur)

    def get_details(self, employee_id: str) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.name, e.position, e.department_id, e.email, e.phone, e.status,
                       e.created_at, COALESCE(d.name, 'Unassigned') AS department_name,
                       r.role_id, r.role_name, r.description AS role_description
                FROM employees_table e
                LEFT JOIN departments_table d ON d.department_id = e.department_id
                LEFT JOIN roles_table r ON r.employee_id = e.employee_id
                WHERE e.employee_id=%s
                ORDER BY r.date_assigned DESC
                LIMIT 1
                """,
                (employee_id,),
            )
            return fetchone(cur)

    def list_by_department(self, department_id: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.department_id=%s ORDER BY e.name", (int(department_id),))
            return fetchall(cur)

    def create(self, employee: Dict[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees_table
                    (employee_id, name, position, department_id, email, phone, status, created_by)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    employee["employee_id"],
                    employee["name"],
                    employee["position"],
                    employee.get("department_id"),
                    employee["email"],
                    employee.get("phone"),
                    employee["status"],
                    employee.get("created_by"),
                ),
            )

    def update(self, employee_id: str, fields: Dict[str, Any]) -> bool:
        sql, params = build_update(
            "employees_table", fields, key_column="employee_id", key_value=employee_id, touch_column="updated_at"
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees_table WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0

    def count_by_status(self, status: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees_table WHERE status=%s", (status,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0
