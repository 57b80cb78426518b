from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from ..common.datetime_utils import iso
from ..core.enums import FileType
from ..records.model import Record


@dataclass(frozen=True)
class FileEntry:
    """A registry file (row of files_table) and, when listed, its records."""

    id: str
    file_number: str
    name: str
    type: FileType
    date_created: datetime
    reference_number: str
    admin_id: int
    records: List[Record] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "fileNumber": self.file_number,
            "name": self.name,
            "type": self.type.value,
            "dateCreated": iso(self.date_created),
            "referenceNumber": self.reference_number,
            "admin_id": self.admin_id,
            "records": [r.to_dict() for r in self.records],
        }
