"""Commands operating on the task list."""

from tracker.commands.base import Command
from tracker.common import Message, count_message
from tracker.models.lists import ExpenseList, TaskList, render_entries
from tracker.models.task import Task
from tracker.services.storage import RecordStorageInterface
from tracker.ui import Ui


class AddCommand(Command):
    """Append a new task (TODO, DEADLINE or EVENT)."""

    mutating = True

    def __init__(self, task: Task):
        self.task = task

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        tasks.add(self.task)
        storage.save(tasks)
        ui.show_message(
            f"{Message.ADD_TASK.value}\n  {self.task}\n{count_message(len(tasks))}"
        )


class MarkCommand(Command):
    """Mark the task at a 1-based index as done (DONE)."""

    mutating = True

    def __init__(self, index: int):
        self.index = index

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        task = tasks.mark(self.index)
        storage.save(tasks)
        ui.show_message(f"{Message.MARK_TASK.value}\n  {task}")


class DeleteCommand(Command):
    """Remove the task at a 1-based index (DELETE)."""

    mutating = True

    def __init__(self, index: int):
        self.index = index

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        task = tasks.delete(self.index)
        storage.save(tasks)
        ui.show_message(
            f"{Message.DELETE_TASK.value}\n  {task}\n{count_message(len(tasks))}"
        )


class FindCommand(Command):
    """Show tasks whose description contains a keyword (FIND)."""

    def __init__(self, keyword: str):
        self.keyword = keyword

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        matches = tasks.find(self.keyword)
        if not matches:
            ui.show_message(Message.NO_MATCHES.value)
            return
        ui.show_message(f"{Message.FIND.value}\n{render_entries(matches)}")


class ListCommand(Command):
    """Show every task (LIST / LIST tasks)."""

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        if not len(tasks):
            ui.show_message(Message.NO_TASKS.value)
            return
        ui.show_message(f"{Message.LIST_TASKS.value}\n{tasks.render()}")
