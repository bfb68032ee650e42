"""
Storage Services Package

Provides the abstract storage interface and the flat-file implementation.
"""

from tracker.services.storage.interface import (
    RecordStorageInterface,
    StorageError,
)
from tracker.services.storage.flat_file import (
    FlatFileStorage,
)

__all__ = [
    # Interfaces
    "RecordStorageInterface",
    # Exceptions
    "StorageError",
    # Flat file implementation
    "FlatFileStorage",
]
