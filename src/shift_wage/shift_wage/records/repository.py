from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkRecord


class WorkRecordRepository(Protocol):
    def insert(self, record: WorkRecord) -> int:
        """Persist a record (its ``record_id`` is ignored) and return the new id."""

        raise NotImplementedError

    def list_all(self) -> Sequence[WorkRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[WorkRecord]:
        raise NotImplementedError

    def delete(self, record_id: int) -> bool:
        raise NotImplementedError
