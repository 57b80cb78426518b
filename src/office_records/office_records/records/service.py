from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.uploads import Attachment
from ..common.validators import optional_text, pick_fields, require_choice, require_non_empty, require_role
from ..core.constants import (
    ALLOWED_ATTACHMENT_TYPES,
    DEFAULT_RECENT_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    MAX_ATTACHMENT_BYTES,
    RECORD_NUMBER_PREFIX,
    REFERENCE_PREFIX,
    SEQUENCE_WIDTH,
    TRACKING_PREFIX,
)
from ..core.enums import AdminRole, RecordStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..files.repository import FileRepository
from ..files.service import REGISTRY_ROLES
from .model import Record
from .repository import RecordRepository

logger = logging.getLogger(__name__)

_UPDATABLE = ("type", "date", "from", "to", "subject", "content", "status", "reference")


def tracking_number(now: datetime) -> str:
    return f"{TRACKING_PREFIX}-{now.year}-{uuid.uuid4().hex[:8].upper()}"


def validate_attachment(attachment: Optional[Attachment]) -> Optional[Attachment]:
    if attachment is None:
        return None
    if attachment.size > MAX_ATTACHMENT_BYTES:
        raise ValidationError("File size should be less than 1MB")
    if attachment.content_type not in ALLOWED_ATTACHMENT_TYPES:
        raise ValidationError("Only PDF, JPEG, PNG, and Word documents are allowed")
    return attachment


class RecordService:
    def __init__(self, records: RecordRepository, files: FileRepository):
        self._records = records
        self._files = files

    def add_record(
        self,
        *,
        current_role: AdminRole,
        file_id: str,
        type: str,
        sender: str,
        recipient: str,
        subject: str,
        content: Optional[str] = None,
        status: Optional[str] = None,
        reference: Optional[str] = None,
        date: Optional[datetime] = None,
        attachment: Optional[Attachment] = None,
    ) -> Record:
        require_role(current_role, *REGISTRY_ROLES)
        sender = require_non_empty(sender, "From")
        recipient = require_non_empty(recipient, "To")
        subject = require_non_empty(subject, "Subject")
        record_status = require_choice(status or RecordStatus.ACTIVE.value, RecordStatus, "status")
        attachment = validate_attachment(attachment)

        if not self._files.get_by_id(file_id):
            raise NotFoundError("File not found")

        now = now_local()
        seq = str(self._records.count_by_file(file_id) + 1).zfill(SEQUENCE_WIDTH)
        record = Record(
            id=str(uuid.uuid4()),
            file_id=file_id,
            unique_number=f"{RECORD_NUMBER_PREFIX}-{seq}",
            type=optional_text(type) or "Incoming",
            date=date or now,
            sender=sender,
            recipient=recipient,
            subject=subject,
            content=optional_text(content),
            status=record_status,
            reference=optional_text(reference) or f"{REFERENCE_PREFIX}-{int(time.time() * 1000)}",
            tracking_number=tracking_number(now),
            attachment=attachment,
        )
        self._records.create(record)
        logger.info("record %s added to file %s", record.unique_number, file_id)
        return record

    def update_record(self, *, current_role: AdminRole, record_id: str, data: dict) -> None:
        require_role(current_role, *REGISTRY_ROLES)
        fields = pick_fields(data, _UPDATABLE)
        for key, label in (("from", "From"), ("to", "To"), ("subject", "Subject")):
            if key in fields:
                fields[key] = require_non_empty(fields[key], label)
        if "status" in fields:
            fields["status"] = require_choice(fields["status"], RecordStatus, "status").value
        if not self._records.update(record_id, fields):
            raise NotFoundError("Record not found")

    def delete_record(self, *, current_role: AdminRole, record_id: str) -> None:
        require_role(current_role, *REGISTRY_ROLES)
        if not self._records.delete(record_id):
            raise NotFoundError("Record not found")

    def search_records(self, query: str, *, status: Optional[str] = None, limit: int = DEFAULT_SEARCH_LIMIT) -> Sequence[dict]:
        if status:
            status = require_choice(status, RecordStatus, "status").value
        return self._records.search((query or "").strip(), status=status, limit=limit)

    def recent_activity(self, limit: int = DEFAULT_RECENT_LIMIT) -> Sequence[dict]:
        return self._records.recent(max(1, int(limit)))
