"""
Shared fixtures.

No test touches the real data directory: file-backed tests use tmp_path,
everything else uses the in-memory storage below.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

import pytest

from tracker.audit import AuditLogger
from tracker.models.audit import AuditEvent
from tracker.models.lists import ExpenseList, TaskList
from tracker.models.task import Deadline, Event, Expense, Task, Todo
from tracker.services.storage import FlatFileStorage, RecordStorageInterface
from tracker.ui import BufferedUi


class InMemoryStorage(RecordStorageInterface):
    """Keeps copies of whatever was last saved and counts saves."""

    def __init__(self, tasks=None, expenses=None):
        self.tasks: list[Task] = list(tasks or [])
        self.expenses: list[Expense] = list(expenses or [])
        self.task_saves = 0
        self.expense_saves = 0

    def load(self) -> list[Task]:
        return [task.model_copy() for task in self.tasks]

    def save(self, tasks: Iterable[Task]) -> bool:
        self.tasks = [task.model_copy() for task in tasks]
        self.task_saves += 1
        return True

    def load_expenses(self) -> list[Expense]:
        return [expense.model_copy() for expense in self.expenses]

    def save_expenses(self, expenses: Iterable[Expense]) -> bool:
        self.expenses = [expense.model_copy() for expense in expenses]
        self.expense_saves += 1
        return True


class RecordingAuditLogger(AuditLogger):
    """Collects events instead of emitting them."""

    def __init__(self):
        super().__init__()
        self.events: list[AuditEvent] = []

    def log(self, event: AuditEvent) -> None:
        self.events.append(event)

    def event_types(self) -> list[str]:
        return [event.event_type.value for event in self.events]


@pytest.fixture
def sample_tasks() -> list[Task]:
    return [
        Todo(description="buy milk"),
        Deadline(
            description="return book",
            by=datetime(2024, 1, 1, 18, 0),
            is_done=True,
        ),
        Event(
            description="book club meeting",
            start=datetime(2024, 1, 5, 19, 0),
            end=datetime(2024, 1, 5, 21, 30),
        ),
    ]


@pytest.fixture
def sample_expenses() -> list[Expense]:
    return [
        Expense(amount=Decimal("12.50"), description="lunch", spent_on=date(2024, 1, 1)),
        Expense(amount=Decimal("3"), description="coffee", spent_on=date(2024, 1, 2)),
    ]


@pytest.fixture
def task_list(sample_tasks) -> TaskList:
    return TaskList(sample_tasks)


@pytest.fixture
def expense_list(sample_expenses) -> ExpenseList:
    return ExpenseList(sample_expenses)


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def audit_logger() -> RecordingAuditLogger:
    return RecordingAuditLogger()


@pytest.fixture
def buffered_ui() -> BufferedUi:
    return BufferedUi(bot_name="Duke")


@pytest.fixture
def file_storage(tmp_path, audit_logger) -> FlatFileStorage:
    return FlatFileStorage(
        tasks_path=tmp_path / "data" / "tasks.txt",
        expenses_path=tmp_path / "data" / "expenses.txt",
        audit_logger=audit_logger,
        retry_attempts=2,
    )
