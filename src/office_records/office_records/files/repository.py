from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence

from .model import FileEntry


class FileRepository(Protocol):
    def last_sequence(self, admin_id: int) -> int:
        """Highest NNN used in the admin's F-<year>-NNN file numbers, 0 when none."""
        raise NotImplementedError

    def reference_exists(self, reference_number: str) -> bool:
        raise NotImplementedError

    def create(self, entry: FileEntry) -> None:
        raise NotImplementedError

    def get_by_id(self, file_id: str) -> Optional[FileEntry]:
        raise NotImplementedError

    def list_by_admin(self, admin_id: int) -> Sequence[FileEntry]:
        """Files of one admin, newest first, with their records attached."""
        raise NotImplementedError

    def update(self, file_id: str, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, file_id: str) -> bool:
        """Delete the file with its records and their forwards/reviews in one transaction."""
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError
