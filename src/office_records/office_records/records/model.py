from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso
from ..common.uploads import Attachment
from ..core.enums import RecordStatus


@dataclass(frozen=True)
class Record:
    id: str
    file_id: str
    unique_number: str
    type: str
    date: datetime
    sender: str
    recipient: str
    subject: str
    content: Optional[str]
    status: RecordStatus
    reference: str
    tracking_number: str
    attachment: Optional[Attachment] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "file_id": self.file_id,
            "uniqueNumber": self.unique_number,
            "type": self.type,
            "date": iso(self.date),
            "from": self.sender,
            "to": self.recipient,
            "subject": self.subject,
            "content": self.content,
            "status": self.status.value,
            "reference": self.reference,
            "trackingNumber": self.tracking_number,
            "attachmentUrl": self.attachment.url if self.attachment else None,
            "attachmentName": self.attachment.name if self.attachment else None,
            "attachmentSize": self.attachment.size if self.attachment else None,
            "attachmentType": self.attachment.content_type if self.attachment else None,
        }


def record_from_row(row: dict) -> Record:
    attachment = None
    if row.get("attachmentUrl"):
        attachment = Attachment(
            name=row.get("attachmentName") or "",
            size=int(row.get("attachmentSize") or 0),
            content_type=row.get("attachmentType") or "",
            url=row["attachmentUrl"],
        )
    return Record(
        id=row["id"],
        file_id=row["file_id"],
        unique_number=row["uniqueNumber"],
        type=row["type"],
        date=row["date"],
        sender=row["from"],
        recipient=row["to"],
        subject=row["subject"],
        content=row.get("content"),
        status=RecordStatus(row["status"]),
        reference=row["reference"],
        tracking_number=row["trackingNumber"],
        attachment=attachment,
    )
