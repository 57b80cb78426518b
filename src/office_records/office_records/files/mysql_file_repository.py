from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Optional, Sequence

from ..core.enums import FileType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from ..records.model import record_from_row
from .model import FileEntry
from .repository import FileRepository


def _to_file(row: dict, records=None) -> FileEntry:
    return FileEntry(
        id=row["id"],
        file_number=row["fileNumber"],
        name=row["name"],
        type=FileType(row["type"]),
        date_created=row["dateCreated"],
        reference_number=row["referenceNumber"],
        admin_id=int(row["admin_id"]),
        records=list(records or []),
    )


class MySQLFileRepository(FileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def last_sequence(self, admin_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT MAX(CAST(SUBSTRING_INDEX(fileNumber, '-', -1) AS UNSIGNED)) AS last_seq
                FROM files_table WHERE admin_id=%s
                """,
                (int(admin_id),),
            )
            row = fetchone(cur)
            return int(row["last_seq"]) if row and row["last_seq"] is not None else 0

    def reference_exists(self, reference_number: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM files_table WHERE referenceNumber=%s LIMIT 1", (reference_number,))
            return fetchone(cur) is not None

    def create(self, entry: FileEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO files_table (id, fileNumber, name, type, dateCreated, referenceNumber, admin_id)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    entry.id,
                    entry.file_number,
                    entry.name,
                    entry.type.value,
                    entry.date_created,
                    entry.reference_number,
                    entry.admin_id,
                ),
            )

    def get_by_id(self, file_id: str) -> Optional[FileEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM files_table WHERE id=%s", (file_id,))
            row = fetchone(cur)
            if not row:
                return None
            cur.execute("SELECT * FROM records_table WHERE file_id=%s ORDER BY `date` DESC", (file_id,))
            return _to_file(row, [record_from_row(r) for r in fetchall(cur)])

    def list_by_admin(self, admin_id: int) -> Sequence[FileEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT * FROM files_table WHERE admin_id=%s ORDER BY dateCreated DESC",
                (int(admin_id),),
            )
            file_rows = fetchall(cur)
            if not file_rows:
                return []

            ids = [r["id"] for r in file_rows]
            placeholders = ", ".join(["%s"] * len(ids))
            cur.execute(
                f"SELECT * FROM records_table WHERE file_id IN ({placeholders}) ORDER BY `date` DESC",
                tuple(ids),
            )
            by_file = defaultdict(list)
            for r in fetchall(cur):
                by_file[r["file_id"]].append(record_from_row(r))

            return [_to_file(row, by_file.get(row["id"])) for row in file_rows]

    def update(self, file_id: str, fields: Dict[str, Any]) -> bool:
        sql, params = build_update("files_table", fields, key_column="id", key_value=file_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, file_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM reviews_records WHERE record_id IN (SELECT id FROM records_table WHERE file_id=%s)",
                (file_id,),
            )
            cur.execute("DELETE FROM forwarded_records WHERE file_id=%s", (file_id,))
            cur.execute("DELETE FROM records_table WHERE file_id=%s", (file_id,))
            cur.execute("DELETE FROM files_table WHERE id=%s", (file_id,))
            return cur.rowcount > 0

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM files_table")
            row = fetchone(cur)
            return int(row["total"]) if row else 0
