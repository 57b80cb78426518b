from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import Record, record_from_row
from .repository import RecordRepository

_WITH_FILE = """
    SELECT r.*, f.name AS file_name, f.fileNumber AS file_number
    FROM records_table r
    JOIN files_table f ON f.id = r.file_id
"""


class MySQLRecordRepository(RecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_by_file(self, file_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM records_table WHERE file_id=%s", (file_id,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def create(self, record: Record) -> None:
        a = record.attachment
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO records_table
                    (id, file_id, uniqueNumber, type, `date`, `from`, `to`, subject, content, status,
                     reference, trackingNumber, attachmentUrl, attachmentName, attachmentSize, attachmentType)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    record.id,
                    record.file_id,
                    record.unique_number,
                    record.type,
                    record.date,
                    record.sender,
                    record.recipient,
                    record.subject,
                    record.content,
                    record.status.value,
                    record.reference,
                    record.tracking_number,
                    a.url if a else None,
                    a.name if a else None,
                    a.size if a else None,
                    a.content_type if a else None,
                ),
            )

    def get_by_id(self, record_id: str) -> Optional[Record]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM records_table WHERE id=%s", (record_id,))
            row = fetchone(cur)
            return record_from_row(row) if row else None

    def update(self, record_id: str, fields: Dict[str, Any]) -> bool:
        sql, params = build_update("records_table", fields, key_column="id", key_value=record_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return cur.rowcount > 0

    def delete(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM reviews_records WHERE record_id=%s", (record_id,))
            cur.execute("DELETE FROM forwarded_records WHERE record_id=%s", (record_id,))
            cur.execute("DELETE FROM records_table WHERE id=%s", (record_id,))
            return cur.rowcount > 0

    def search(self, query: str, *, status: Optional[str], limit: int) -> Sequence[dict]:
        like = f"%{query}%"
        sql = _WITH_FILE + """
            WHERE (r.subject LIKE %s OR r.`from` LIKE %s OR r.`to` LIKE %s OR r.reference LIKE %s
                   OR r.uniqueNumber LIKE %s OR r.trackingNumber LIKE %s)
        """
        params: list = [like] * 6
        if status:
            sql += " AND r.status=%s"
            params.append(status)
        sql += " ORDER BY r.`date` DESC LIMIT %s"
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [self._listing(row) for row in fetchall(cur)]

    def recent(self, limit: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_WITH_FILE + " ORDER BY r.`date` DESC LIMIT %s", (int(limit),))
            return [self._listing(row) for row in fetchall(cur)]

    def count_by_status(self) -> Dict[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT status, COUNT(*) AS total FROM records_table GROUP BY status")
            return {r["status"]: int(r["total"]) for r in fetchall(cur)}

    @staticmethod
    def _listing(row: dict) -> dict:
        out = record_from_row(row).to_dict()
        out["file_name"] = row.get("file_name")
        out["file_number"] = row.get("file_number")
        return out
