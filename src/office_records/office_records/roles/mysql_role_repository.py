from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .repository import RoleRepository


class MySQLRoleRepository(RoleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.role_id, r.role_name, r.employee_id, r.department_id, r.admin_id, r.description,
                       r.assigned_by, r.status, r.date_assigned,
                       e.name AS employee_name, d.name AS department_name, a.name AS assigned_by_name
                FROM roles_table r
                JOIN employees_table e ON e.employee_id = r.employee_id
                LEFT JOIN departments_table d ON d.department_id = r.department_id
                LEFT JOIN lists_of_admins a ON a.admin_id = r.assigned_by
                ORDER BY r.date_assigned DESC
                """
            )
            return fetchall(cur)

    def get_profile_for_admin(self, admin_id: int) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.role_id, r.role_name, r.department_id, d.name AS department_name,
                       r.employee_id, e.position
                FROM roles_table r
                JOIN employees_table e ON e.employee_id = r.employee_id
                LEFT JOIN departments_table d ON d.department_id = r.department_id
                WHERE r.admin_id=%s
                ORDER BY r.date_assigned DESC
                LIMIT 1
                """,
                (int(admin_id),),
            )
            return fetchone(cur)

    def create(self, role: Dict[str, Any]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO roles_table
                    (role_name, employee_id, department_id, admin_id, description, assigned_by, status)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    role["role_name"],
                    role["employee_id"],
                    role.get("department_id"),
                    role.get("admin_id"),
                    role.get("description"),
                    role["assigned_by"],
                    role["status"],
                ),
            )
            return int(cur.lastrowid)

    def update(self, role_id: int, fields: Dict[str, Any]) -> bool:
        sql, params = build_update("roles_table", fields, key_column="role_id", key_value=int(role_id))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, role_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM roles_table WHERE role_id=%s", (int(role_id),))
            return cur.rowcount > 0
