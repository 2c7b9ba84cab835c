"""Record store abstraction + in-memory implementation."""

import copy
from abc import ABC, abstractmethod

from src.errors import ConflictError, NotFoundError
from src.records.models import utc_timestamp


class RecordStore(ABC):
    """Keyed persistence for character records (key: `id`)."""

    @abstractmethod
    async def create(self, record: dict) -> dict:
        """Insert a record. Raises ConflictError if its id already exists."""
        ...

    @abstractmethod
    async def get(self, record_id: str) -> dict | None:
        """Look up a record by id. Returns None if not found."""
        ...

    @abstractmethod
    async def scan(self, limit: int = 50) -> list[dict]:
        """Return at most `limit` records, in no particular order."""
        ...

    @abstractmethod
    async def update(self, record_id: str, changes: dict) -> dict:
        """Overwrite the given fields (never `id`) and refresh `actualizado`.

        Raises NotFoundError if the record does not exist.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        ...


def duplicate_id_message(record_id: str) -> str:
    return f"Ya existe un personaje con el ID {record_id}"


class MemoryRecordStore(RecordStore):
    """Dict-backed store for local runs and tests. Not shared across processes."""

    def __init__(self, records: list[dict] | None = None):
        self._records: dict[str, dict] = {}
        for record in records or []:
            self._records[record["id"]] = copy.deepcopy(record)

    async def create(self, record: dict) -> dict:
        record_id = record["id"]
        if record_id in self._records:
            raise ConflictError(duplicate_id_message(record_id))
        self._records[record_id] = copy.deepcopy(record)
        return record

    async def get(self, record_id: str) -> dict | None:
        record = self._records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def scan(self, limit: int = 50) -> list[dict]:
        return [copy.deepcopy(r) for r in list(self._records.values())[:limit]]

    async def update(self, record_id: str, changes: dict) -> dict:
        if record_id not in self._records:
            raise NotFoundError(f"No se encontró el personaje con ID {record_id}")

        record = self._records[record_id]
        for key, value in changes.items():
            if key != "id":
                record[key] = copy.deepcopy(value)
        record["actualizado"] = utc_timestamp()
        return copy.deepcopy(record)

    async def delete(self, record_id: str) -> bool:
        self._records.pop(record_id, None)
        return True
