"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep commands decoupled from the flat-file format
2. Use in-memory storage for testing
3. Swap in another backend later without touching the parser or commands

The interface is intentionally small: whole-list load and whole-list save.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from tracker.models.task import Expense, Task


class RecordStorageInterface(ABC):
    """
    Abstract interface for task and expense persistence.

    Saves always replace the previous contents (last write wins).
    """

    @abstractmethod
    def load(self) -> list[Task]:
        """
        Load every saved task.

        Returns:
            Tasks in saved order; an empty list if nothing was saved yet

        Raises:
            StorageError: If the saved data exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, tasks: Iterable[Task]) -> bool:
        """
        Replace the saved tasks with the given ones.

        Returns:
            True if saved successfully, False if the write failed
        """
        pass

    @abstractmethod
    def load_expenses(self) -> list[Expense]:
        """
        Load every saved expense.

        Returns:
            Expenses in saved order; an empty list if nothing was saved yet

        Raises:
            StorageError: If the saved data exists but cannot be read
        """
        pass

    @abstractmethod
    def save_expenses(self, expenses: Iterable[Expense]) -> bool:
        """
        Replace the saved expenses with the given ones.

        Returns:
            True if saved successfully, False if the write failed
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
