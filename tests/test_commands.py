"""Tests for command execution."""

import pytest
from datetime import date
from decimal import Decimal

from tracker.commands import (
    AddCommand,
    AddExpenseCommand,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ListExpenseCommand,
    MarkCommand,
)
from tracker.common import ErrorMessage, Message, TrackerError
from tracker.models.lists import ExpenseList, TaskList
from tracker.models.task import Expense, Todo


class TestTaskCommands:
    """Tests for commands that touch the task list."""

    def test_add_appends_saves_and_confirms(self, task_list, expense_list, buffered_ui, memory_storage):
        """Test AddCommand mutates, persists and reports."""
        AddCommand(Todo(description="walk dog")).execute(
            task_list, expense_list, buffered_ui, memory_storage
        )
        assert len(task_list) == 4
        assert memory_storage.task_saves == 1
        assert [t.description for t in memory_storage.tasks][-1] == "walk dog"
        reply = buffered_ui.flush()
        assert reply.startswith(Message.ADD_TASK.value)
        assert "[T][ ] walk dog" in reply
        assert reply.endswith("Now you have 4 tasks in the list.")

    def test_mark(self, task_list, expense_list, buffered_ui, memory_storage):
        """Test MarkCommand marks the task and saves."""
        MarkCommand(1).execute(task_list, expense_list, buffered_ui, memory_storage)
        assert task_list.get(1).is_done is True
        assert memory_storage.tasks[0].is_done is True
        assert "[T][X] buy milk" in buffered_ui.flush()

    def test_delete(self, task_list, expense_list, buffered_ui, memory_storage):
        """Test DeleteCommand removes the task and saves."""
        DeleteCommand(1).execute(task_list, expense_list, buffered_ui, memory_storage)
        assert len(task_list) == 2
        assert len(memory_storage.tasks) == 2
        assert buffered_ui.flush().endswith("Now you have 2 tasks in the list.")

    def test_delete_out_of_range_does_not_save(self, task_list, expense_list, buffered_ui, memory_storage):
        """Test a failed DELETE leaves list and storage alone."""
        with pytest.raises(TrackerError) as exc_info:
            DeleteCommand(7).execute(task_list, expense_list, buffered_ui, memory_storage)
        assert exc_info.value.code == ErrorMessage.INDEX_OUT_OF_RANGE
        assert len(task_list) == 3
        assert memory_storage.task_saves == 0
        assert buffered_ui.flush() == ""

    def test_find_lists_matches_with_original_indices(self, task_list, expense_list, buffered_ui, memory_storage):
        """Test FindCommand shows only matching tasks."""
        FindCommand("book").execute(task_list, expense_list, buffered_ui, memory_storage)
        lines = buffered_ui.flush().splitlines()
        assert lines[0] == Message.FIND.value
        assert lines[1].startswith("2. [D][X] return book")
        assert lines[2].startswith("3. [E][ ] book club meeting")
        assert len(lines) == 3
        assert memory_storage.task_saves == 0

    def test_find_without_matches(self, task_list, expense_list, buffered_ui, memory_storage):
        FindCommand("zebra").execute(task_list, expense_list, buffered_ui, memory_storage)
        assert buffered_ui.flush() == Message.NO_MATCHES.value

    def test_list(self, task_list, expense_list, buffered_ui, memory_storage):
        """Test ListCommand renders every task."""
        ListCommand().execute(task_list, expense_list, buffered_ui, memory_storage)
        reply = buffered_ui.flush()
        assert reply.splitlines()[0] == Message.LIST_TASKS.value
        assert "1. [T][ ] buy milk" in reply

    def test_list_empty(self, expense_list, buffered_ui, memory_storage):
        ListCommand().execute(TaskList(), expense_list, buffered_ui, memory_storage)
        assert buffered_ui.flush() == Message.NO_TASKS.value

    def test_read_only_commands_are_not_mutating(self):
        assert FindCommand("x").mutating is False
        assert ListCommand().mutating is False
        assert AddCommand(Todo(description="x")).mutating is True


class TestExpenseCommands:
    """Tests for commands that touch the expense list."""

    def test_add_expense(self, task_list, buffered_ui, memory_storage):
        """Test AddExpenseCommand appends and saves expenses only."""
        expenses = ExpenseList()
        expense = Expense(amount=Decimal("4.20"), description="bagel", spent_on=date(2024, 1, 3))
        AddExpenseCommand(expense).execute(task_list, expenses, buffered_ui, memory_storage)
        assert len(expenses) == 1
        assert memory_storage.expense_saves == 1
        assert memory_storage.task_saves == 0
        reply = buffered_ui.flush()
        assert "[$] 4.20 bagel (on: Jan 3 2024)" in reply
        assert reply.endswith("Now you have 1 expense in the list.")

    def test_list_expenses(self, task_list, expense_list, buffered_ui, memory_storage):
        ListExpenseCommand().execute(task_list, expense_list, buffered_ui, memory_storage)
        lines = buffered_ui.flush().splitlines()
        assert lines[0] == Message.LIST_EXPENSES.value
        assert lines[-1] == "Total: 15.50"

    def test_list_expenses_empty(self, task_list, buffered_ui, memory_storage):
        ListExpenseCommand().execute(task_list, ExpenseList(), buffered_ui, memory_storage)
        assert buffered_ui.flush() == Message.NO_EXPENSES.value


class TestExitCommand:
    """Tests for ExitCommand."""

    def test_exit_says_goodbye(self, task_list, expense_list, buffered_ui, memory_storage):
        command = ExitCommand()
        command.execute(task_list, expense_list, buffered_ui, memory_storage)
        assert command.is_exit is True
        assert buffered_ui.flush() == Message.EXIT.value
        assert memory_storage.task_saves == 0
