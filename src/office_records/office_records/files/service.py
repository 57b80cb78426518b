from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, pick_fields, require_choice, require_non_empty, require_role
from ..core.constants import FILE_NUMBER_PREFIX, REFERENCE_PREFIX, SEQUENCE_WIDTH
from ..core.enums import AdminRole, FileType
from ..core.exceptions import NotFoundError
from .model import FileEntry
from .repository import FileRepository

logger = logging.getLogger(__name__)

REGISTRY_ROLES = (AdminRole.REGISTRY, AdminRole.SUPER_ADMIN)


def _sequence(n: int) -> str:
    return str(n).zfill(SEQUENCE_WIDTH)


class FileService:
    def __init__(self, files: FileRepository):
        self._files = files

    def _free_reference(self, requested: str) -> str:
        """Return requested, or the first free "<requested>-N" (N from 2) when it is taken."""
        if not self._files.reference_exists(requested):
            return requested
        suffix = 2
        while self._files.reference_exists(f"{requested}-{suffix}"):
            suffix += 1
        return f"{requested}-{suffix}"

    def add_file(
        self,
        *,
        current_role: AdminRole,
        admin_id: int,
        name: str,
        type: str,
        reference_number: Optional[str] = None,
    ) -> FileEntry:
        require_role(current_role, *REGISTRY_ROLES)
        name = require_non_empty(name, "File name")
        file_type = require_choice(type, FileType, "file type")

        now = now_local()
        seq = _sequence(self._files.last_sequence(int(admin_id)) + 1)
        requested = optional_text(reference_number) or f"{REFERENCE_PREFIX}-{seq}"

        entry = FileEntry(
            id=str(uuid.uuid4()),
            file_number=f"{FILE_NUMBER_PREFIX}-{now.year}-{seq}",
            name=name,
            type=file_type,
            date_created=now,
            reference_number=self._free_reference(requested),
            admin_id=int(admin_id),
        )
        self._files.create(entry)
        logger.info("file %s created with reference %s", entry.file_number, entry.reference_number)
        return entry

    def list_files(self, admin_id: int) -> Sequence[FileEntry]:
        return self._files.list_by_admin(int(admin_id))

    def get_file(self, file_id: str) -> FileEntry:
        entry = self._files.get_by_id(file_id)
        if not entry:
            raise NotFoundError("File not found")
        return entry

    def update_file(self, *, current_role: AdminRole, file_id: str, data: dict) -> None:
        require_role(current_role, *REGISTRY_ROLES)
        fields = pick_fields(data, ("name", "type"))
        if "name" in fields:
            fields["name"] = require_non_empty(fields["name"], "File name")
        if "type" in fields:
            fields["type"] = require_choice(fields["type"], FileType, "file type").value
        if not self._files.update(file_id, fields):
            raise NotFoundError("File not found")

    def delete_file(self, *, current_role: AdminRole, file_id: str) -> None:
        require_role(current_role, *REGISTRY_ROLES)
        if not self._files.delete(file_id):
            raise NotFoundError("File not found")
        logger.info("file %s deleted", file_id)
