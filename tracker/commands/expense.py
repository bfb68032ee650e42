"""Commands operating on the expense list."""

from tracker.commands.base import Command
from tracker.common import Message, count_message
from tracker.models.lists import ExpenseList, TaskList
from tracker.models.task import Expense
from tracker.services.storage import RecordStorageInterface
from tracker.ui import Ui


class AddExpenseCommand(Command):
    """Record a new expense (EXPENSE)."""

    mutating = True

    def __init__(self, expense: Expense):
        self.expense = expense

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        expenses.add(self.expense)
        storage.save_expenses(expenses)
        ui.show_message(
            f"{Message.ADD_EXPENSE.value}\n  {self.expense}\n"
            f"{count_message(len(expenses), 'expense')}"
        )


class ListExpenseCommand(Command):
    """Show every expense with the running total (LIST expenses)."""

    def execute(
        self,
        tasks: TaskList,
        expenses: ExpenseList,
        ui: Ui,
        storage: RecordStorageInterface,
    ) -> None:
        if not len(expenses):
            ui.show_message(Message.NO_EXPENSES.value)
            return
        ui.show_message(f"{Message.LIST_EXPENSES.value}\n{expenses.render()}")
