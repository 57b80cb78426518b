from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ForwardStatus, RecipientType, RecordStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Forward, Review
from .repository import ForwardingRepository

_FORWARD_LISTING = """
    SELECT fr.forward_id, fr.record_id, fr.file_id, fr.forwarded_by, fr.forwarded_to, fr.recipient_type,
           fr.notes, fr.forward_date, fr.status AS forward_status, fr.department_id, fr.employee_id,
           r.uniqueNumber, r.type, r.`date`, r.`from`, r.`to`, r.subject, r.content, r.status,
           r.reference, r.trackingNumber, r.attachmentUrl, r.attachmentName, r.attachmentSize, r.attachmentType,
           f.fileNumber, f.name AS file_name, f.type AS file_type,
           a.name AS forwarded_by_name
    FROM forwarded_records fr
    JOIN records_table r ON r.id = fr.record_id
    JOIN files_table f ON f.id = fr.file_id
    LEFT JOIN lists_of_admins a ON a.admin_id = fr.forwarded_by
"""


def _to_forward(row: dict) -> Forward:
    return Forward(
        forward_id=row["forward_id"],
        record_id=row["record_id"],
        file_id=row["file_id"],
        forwarded_by=int(row["forwarded_by"]),
        forwarded_to=row["forwarded_to"],
        recipient_type=RecipientType(row["recipient_type"]),
        status=ForwardStatus(row["status"]),
        notes=row.get("notes"),
        department_id=row.get("department_id"),
        employee_id=row.get("employee_id"),
        forward_date=row.get("forward_date"),
    )


def _insert_forward(cur, forward: Forward) -> None:
    # department_id falls back to the department named in forwarded_to
    cur.execute(
        """
        INSERT INTO forwarded_records
            (forward_id, record_id, file_id, forwarded_by, forwarded_to, recipient_type, notes, status,
             department_id, employee_id)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s,
                COALESCE(%s, (SELECT department_id FROM departments_table WHERE name=%s LIMIT 1)), %s)
        """,
        (
            forward.forward_id,
            forward.record_id,
            forward.file_id,
            forward.forwarded_by,
            forward.forwarded_to,
            forward.recipient_type.value,
            forward.notes,
            forward.status.value,
            forward.department_id,
            forward.forwarded_to,
            forward.employee_id,
        ),
    )


def _set_record_status(cur, record_id: str, status: RecordStatus) -> None:
    cur.execute("UPDATE records_table SET status=%s WHERE id=%s", (status.value, record_id))


def _close_forward(cur, forward_id: str, status: ForwardStatus) -> bool:
    # only a pending forward can be decided
    cur.execute(
        "UPDATE forwarded_records SET status=%s WHERE forward_id=%s AND status=%s",
        (status.value, forward_id, ForwardStatus.PENDING.value),
    )
    return cur.rowcount > 0


class MySQLForwardingRepository(ForwardingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_forward(self, forward_id: str) -> Optional[Forward]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM forwarded_records WHERE forward_id=%s", (forward_id,))
            row = fetchone(cur)
            return _to_forward(row) if row else None

    def create_forward(self, forward: Forward, *, record_status: RecordStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            _insert_forward(cur, forward)
            _set_record_status(cur, forward.record_id, record_status)

    def apply_review(
        self,
        review: Review,
        *,
        forward_status: ForwardStatus,
        record_status: Optional[RecordStatus],
        next_forward: Optional[Forward] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if not _close_forward(cur, review.forward_id, forward_status):
                return False
            cur.execute(
                """
                INSERT INTO reviews_records
                    (review_id, record_id, forward_id, reviewed_by, review_action, review_note,
                     department, department_person)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    review.review_id,
                    review.record_id,
                    review.forward_id,
                    review.reviewed_by,
                    review.review_action,
                    review.review_note,
                    review.department,
                    review.department_person,
                ),
            )
            if record_status is not None:
                _set_record_status(cur, review.record_id, record_status)
            if next_forward is not None:
                _insert_forward(cur, next_forward)
            return True

    def set_forward_status(
        self, forward_id: str, *, forward_status: ForwardStatus, record_id: str, record_status: RecordStatus
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if not _close_forward(cur, forward_id, forward_status):
                return False
            _set_record_status(cur, record_id, record_status)
            return True

    def list_boss_records(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _FORWARD_LISTING
                + " WHERE fr.recipient_type=%s AND fr.status=%s AND r.status=%s ORDER BY fr.forward_date DESC",
                (RecipientType.BOSS.value, ForwardStatus.PENDING.value, RecordStatus.FORWARDED.value),
            )
            return fetchall(cur)

    def list_reviewed(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT rv.review_id, rv.record_id, rv.forward_id, rv.reviewed_by, rv.review_action,
                       rv.review_note, rv.department, rv.department_person, rv.review_date,
                       r.uniqueNumber, r.subject, r.`from`, r.`to`, r.status, r.reference, r.trackingNumber,
                       f.id AS file_id, f.fileNumber, f.name AS file_name
                FROM reviews_records rv
                JOIN records_table r ON r.id = rv.record_id
                JOIN files_table f ON f.id = r.file_id
                ORDER BY rv.review_date DESC
                """
            )
            return fetchall(cur)

    def list_department_records(self, department_name: str) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _FORWARD_LISTING
                + """
                LEFT JOIN departments_table d ON d.department_id = fr.department_id
                WHERE fr.recipient_type=%s AND (fr.forwarded_to=%s OR d.name=%s)
                ORDER BY fr.forward_date DESC
                """,
                (RecipientType.DEPARTMENT.value, department_name, department_name),
            )
            return fetchall(cur)

    def list_employee_records(self, employee_id: str) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _FORWARD_LISTING
                + " WHERE fr.recipient_type=%s AND fr.employee_id=%s ORDER BY fr.forward_date DESC",
                (RecipientType.EMPLOYEE.value, employee_id),
            )
            return fetchall(cur)
