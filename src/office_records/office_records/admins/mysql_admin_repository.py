from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AdminRole
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Admin
from .repository import AdminRepository

_COLUMNS = "admin_id, name, email, username, password, role, date_assigned"


def _to_admin(row: dict) -> Admin:
    return Admin(
        admin_id=int(row["admin_id"]),
        name=row["name"],
        email=row["email"],
        username=row["username"],
        password=row["password"],
        role=AdminRole(row["role"]),
        date_assigned=row.get("date_assigned"),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM lists_of_admins WHERE {column}=%s", (value,))
            row = fetchone(cur)
            return _to_admin(row) if row else None

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        return self._get_one("admin_id", int(admin_id))

    def get_by_username(self, username: str) -> Optional[Admin]:
        return self._get_one("username", username)

    def get_by_email(self, email: str) -> Optional[Admin]:
        return self._get_one("email", email)

    def list_all(self) -> Sequence[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM lists_of_admins ORDER BY date_assigned DESC")
            return [_to_admin(r) for r in fetchall(cur)]

    def create(self, *, name: str, email: str, username: str, password_hash: str, role: AdminRole) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO lists_of_admins (name, email, role, username, password)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (name, email, role.value, username, password_hash),
            )
            return int(cur.lastrowid)

    def update_by_email(
        self,
        email: str,
        *,
        name: str,
        role: AdminRole,
        username: str,
        password_hash: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if password_hash:
                cur.execute(
                    "UPDATE lists_of_admins SET name=%s, role=%s, username=%s, password=%s WHERE email=%s",
                    (name, role.value, username, password_hash, email),
                )
            else:
                cur.execute(
                    "UPDATE lists_of_admins SET name=%s, role=%s, username=%s WHERE email=%s",
                    (name, role.value, username, email),
                )
            return cur.rowcount > 0

    def update_login(self, email: str, *, username: str, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE lists_of_admins SET username=%s, password=%s WHERE email=%s",
                (username, password_hash, email),
            )
            return cur.rowcount > 0

    def delete_by_email(self, email: str) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM lists_of_admins WHERE email=%s", (email,))
                return cur.rowcount > 0
        except mysql.connector.IntegrityError:
            # files, forwards, tasks, reviews or departments still reference this admin
            raise ValidationError("Admin still owns records")

    def count_by_role(self) -> dict:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role, COUNT(*) AS total FROM lists_of_admins GROUP BY role")
            return {r["role"]: int(r["total"]) for r in fetchall(cur)}
