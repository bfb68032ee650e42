"""
Command base class.

DESIGN DECISION: The parser turns every valid input line into exactly one
Command. A command carries everything it needs; execute() receives the
session's lists, the UI to report through and the storage to save to.
"""

from abc import ABC, abstractmethod

from tracker.models.lists import ExpenseList, TaskList
from tracker.services.storage import RecordStorageInterface
from tracker.ui import Ui


class Command(ABC):
    """One parsed user command."""

    # Mutating commands persist their list after executing
    mutating: bool = False

    @property
    def is_exit(self) -> bool:
        """Should the dispatch loop stop after this command?"""
        return False

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        """
        Carry out the command.

        Raises:
            TrackerError: If the command cannot be applied (e.g. bad index)
        """
        pass

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{self.name}({fields})"
