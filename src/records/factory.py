"""Factory for record store backends."""

from src.config.settings import Settings
from src.records.store import MemoryRecordStore, RecordStore

_store: RecordStore | None = None


def get_record_store(settings: Settings) -> RecordStore:
    """Get the record store singleton for the configured backend."""
    global _store
    if _store is not None:
        return _store

    backend = settings.record_store_backend

    if backend == "memory":
        _store = MemoryRecordStore()
        return _store

    if backend == "dynamodb":
        # Lazy import to avoid boto3 import cost for the memory backend
        from src.records.dynamodb_store import DynamoDBRecordStore
        _store = DynamoDBRecordStore(
            table_name=settings.records_table,
            region=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint,
        )
        return _store

    raise ValueError(f"Unknown record store backend: {backend}")
