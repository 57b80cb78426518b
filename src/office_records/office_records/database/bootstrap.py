from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

logger = logging.getLogger(__name__)


DEMO_HOD_EMPLOYEE_ID = "00000000-0000-4000-8000-000000000001"
DEMO_STAFF_EMPLOYEE_ID = "00000000-0000-4000-8000-000000000002"


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "office_records")),
    )


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a .sql file on ';', skipping '--' comments and quoted text."""
    statement: list[str] = []
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            statement.append(ch)
            if ch == "\\" and i + 1 < len(sql):
                statement.append(sql[i + 1])
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
            statement.append(ch)
        elif sql.startswith("--", i):
            end = sql.find("\n", i)
            i = len(sql) if end == -1 else end
            continue
        elif ch == ";":
            text = "".join(statement).strip()
            statement = []
            if text:
                yield text
        else:
            statement.append(ch)
        i += 1

    text = "".join(statement).strip()
    if text:
        yield text


def _run_script(cur, sql: str) -> int:
    count = 0
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)
        count += 1
    return count


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _apply_sql_file(db_config: dict, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = _connect(_as_target(db_config))
    try:
        count = _run_script(conn.cursor(), sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("applied %d statements from %s", count, Path(path).name)
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> int:
    ensure_database_exists(db_config)
    return _apply_sql_file(db_config, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> int:
    return _apply_sql_file(db_config, seed_path)


def ensure_super_admin(
    db_config: dict,
    *,
    username: str = "superadmin",
    password: str = "admin123",
    email: str = "superadmin@localhost",
) -> None:
    """Make sure at least one Super Admin can log in to create the other admins."""
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT admin_id FROM lists_of_admins WHERE role=%s LIMIT 1", ("Super Admin",))
        if cur.fetchone():
            return

        cur.execute(
            """
            INSERT INTO lists_of_admins (name, email, username, password, role)
            VALUES (%s, %s, %s, %s, %s)
            """,
            ("Super Admin", email, username, generate_password_hash(password), "Super Admin"),
        )
        conn.commit()
    finally:
        conn.close()


def ensure_demo_users(db_config: dict) -> None:
    """Seed one login per role and link the HOD and Employee logins to seed.sql employees."""
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_admin(name: str, username: str, password: str, role: str) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT admin_id FROM lists_of_admins WHERE username=%s", (username,))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    "UPDATE lists_of_admins SET name=%s, password=%s, role=%s WHERE username=%s",
                    (name, password_hash, role, username),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO lists_of_admins (name, email, username, password, role)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (name, f"{username}@localhost", username, password_hash, role),
                )

        upsert_admin("Registry Demo", "registry", "registry123", "Registry")
        upsert_admin("Boss Demo", "boss", "boss123", "Boss")
        upsert_admin("HR Demo", "hr", "hr123456", "Human Resource")
        upsert_admin("HOD Demo", "hod", "hod123", "HOD")
        upsert_admin("Employee Demo", "employee", "employee123", "Employee")

        def link_role(username: str, role_name: str, employee_id: str) -> None:
            cur.execute("SELECT admin_id FROM lists_of_admins WHERE username=%s", (username,))
            admin = cur.fetchone()
            cur.execute("SELECT department_id FROM employees_table WHERE employee_id=%s", (employee_id,))
            employee = cur.fetchone()
            if not admin or not employee:
                return
            cur.execute("SELECT role_id FROM roles_table WHERE admin_id=%s", (admin["admin_id"],))
            if cur.fetchone():
                return
            cur.execute(
                """
                INSERT INTO roles_table (role_name, employee_id, department_id, admin_id, assigned_by, status)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (role_name, employee_id, employee["department_id"], admin["admin_id"], admin["admin_id"], "active"),
            )

        link_role("hod", "Head of Department", DEMO_HOD_EMPLOYEE_ID)
        link_role("employee", "Staff", DEMO_STAFF_EMPLOYEE_ID)

        conn.commit()
    finally:
        conn.close()

    ensure_super_admin(db_config)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
