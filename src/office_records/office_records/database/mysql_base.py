from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Run a unit of work in one transaction.

    Commits when the block exits cleanly, rolls back on any exception and always
    hands the connection back to the pool.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def build_update(
    table: str,
    fields: Dict[str, Any],
    *,
    key_column: str,
    key_value: Any,
    touch_column: Optional[str] = None,
) -> Tuple[str, Sequence[Any]]:
    """Build a partial UPDATE for the given column->value mapping.

    Column names come from service code (never from the request), values are bound.
    """
    assignments = [f"`{col}`=%s" for col in fields]
    if touch_column:
        assignments.append(f"`{touch_column}`=CURRENT_TIMESTAMP")
    sql = f"UPDATE {table} SET {', '.join(assignments)} WHERE {key_column}=%s"
    return sql, tuple(fields.values()) + (key_value,)
