"""Services package."""

from tracker.services.storage import (
    FlatFileStorage,
    RecordStorageInterface,
    StorageError,
)

__all__ = [
    "FlatFileStorage",
    "RecordStorageInterface",
    "StorageError",
]
