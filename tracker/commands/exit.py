"""Ends the session (BYE)."""

from tracker.commands.base import Command
from tracker.common import Message
from tracker.models.lists import ExpenseList, TaskList
from tracker.services.storage import RecordStorageInterface
from tracker.ui import Ui


class ExitCommand(Command):

    @property
    def is_exit(self) -> bool:
        return True

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        ui.show_message(Message.EXIT.value)
