"""Command package: one class per thing a user can ask for."""

from tracker.commands.base import Command
from tracker.commands.exit import ExitCommand
from tracker.commands.expense import AddExpenseCommand, ListExpenseCommand
from tracker.commands.task import (
    AddCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
)

__all__ = [
    "AddCommand",
    "AddExpenseCommand",
    "Command",
    "DeleteCommand",
    "ExitCommand",
    "FindCommand",
    "ListCommand",
    "ListExpenseCommand",
    "MarkCommand",
]
