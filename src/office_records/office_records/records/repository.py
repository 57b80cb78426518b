from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence

from .model import Record


class RecordRepository(Protocol):
    def count_by_file(self, file_id: str) -> int:
        raise NotImplementedError

    def create(self, record: Record) -> None:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[Record]:
        raise NotImplementedError

    def update(self, record_id: str, fields: Dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def search(self, query: str, *, status: Optional[str], limit: int) -> Sequence[dict]:
        raise NotImplementedError

    def recent(self, limit: int) -> Sequence[dict]:
        """Latest records across files, with the file name and number."""
        raise NotImplementedError

    def count_by_status(self) -> Dict[str, int]:
        raise NotImplementedError
