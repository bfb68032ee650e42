"""
In-memory record lists.

TaskList exposes 1-based indices to the user; every index check happens
here so commands never touch the underlying list directly.
"""

from decimal import Decimal
from typing import Iterable, Iterator, Optional

from tracker.common import ErrorMessage, TrackerError
from tracker.models.task import Expense, Task


def render_entries(entries: Iterable[tuple[int, Task]]) -> str:
    """Render (index, task) pairs one per line."""
    return "\n".join(f"{index}. {task}" for index, task in entries)


class TaskList:
    """Ordered, mutable list of tasks."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _position(self, index: int) -> int:
        """Convert a user-facing index to a list position, or raise."""
        if not 1 <= index <= len(self._tasks):
            raise TrackerError(ErrorMessage.INDEX_OUT_OF_RANGE)
        return index - 1

    def get(self, index: int) -> Task:
        return self._tasks[self._position(index)]

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def mark(self, index: int) -> Task:
        """Mark the task at a 1-based index as done."""
        task = self._tasks[self._position(index)]
        task.mark_as_done()
        return task

    def delete(self, index: int) -> Task:
        """Remove and return the task at a 1-based index."""
        return self._tasks.pop(self._position(index))

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """
        Case-insensitive substring search over descriptions.

        Matches keep their position in the full list so the user can
        act on them with DONE or DELETE straight away.
        """
        needle = keyword.lower()
        return [
            (index, task)
            for index, task in enumerate(self._tasks, start=1)
            if needle in task.description.lower()
        ]

    def render(self) -> str:
        return render_entries(enumerate(self._tasks, start=1))


class ExpenseList:
    """Append-only list of expenses."""

    def __init__(self, expenses: Optional[Iterable[Expense]] = None):
        self._expenses: list[Expense] = list(expenses or [])

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self._expenses)

    def add(self, expense: Expense) -> Expense:
        self._expenses.append(expense)
        return expense

    def total(self) -> Decimal:
        return sum((expense.amount for expense in self._expenses), Decimal("0"))

    def render(self) -> str:
        lines = [
            f"{index}. {expense}"
            for index, expense in enumerate(self._expenses, start=1)
        ]
        lines.append(f"Total: {self.total():.2f}")
        return "\n".join(lines)
