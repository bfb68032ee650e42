"""
Command Parser

DESIGN DECISION: Parsing is strict and never guesses.
A line either maps to exactly one Command or fails with a TrackerError
whose message tells the user what the expected format is.

Grammar (instruction keywords are case-insensitive):

    TODO <description>
    DEADLINE <description> /by <yyyy-MM-dd HH:mm>
    EVENT <description> /at <yyyy-MM-dd HH:mm> /to <yyyy-MM-dd HH:mm>
    EXPENSE <amount> /dollars <description> /on <yyyy-MM-dd>
    LIST [tasks|expenses]
    DONE <index>
    DELETE <index>
    FIND <keyword>
    BYE
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from pydantic import ValidationError

from tracker.commands import (
    AddCommand,
    AddExpenseCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ListExpenseCommand,
    MarkCommand,
)
from tracker.common import ErrorMessage, TrackerError
from tracker.models.task import Deadline, Event, Expense, Todo, is_valid_amount


DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"

# strptime alone accepts unpadded fields such as 2024-1-1 9:5
DATETIME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", re.ASCII)
DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

BY_MARKER = " /by "
AT_MARKER = " /at "
TO_MARKER = " /to "
DOLLARS_MARKER = " /dollars "
ON_MARKER = " /on "


def parse_datetime(text: str) -> datetime:
    """Parse 'yyyy-MM-dd HH:mm' or fail with a format hint."""
    text = text.strip()
    if not DATETIME_SHAPE.fullmatch(text):
        raise TrackerError(ErrorMessage.DATETIME_FORMAT)
    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError:
        raise TrackerError(ErrorMessage.DATETIME_FORMAT)


def parse_date(text: str) -> date:
    """Parse 'yyyy-MM-dd' or fail with a format hint."""
    text = text.strip()
    if not DATE_SHAPE.fullmatch(text):
        raise TrackerError(ErrorMessage.DATE_FORMAT)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise TrackerError(ErrorMessage.DATE_FORMAT)


def parse_index(text: str) -> int:
    """Parse the 1-based index argument of DONE and DELETE."""
    if not text:
        raise TrackerError(ErrorMessage.EMPTY_INDEX)
    try:
        return int(text)
    except ValueError:
        raise TrackerError(ErrorMessage.INVALID_INDEX)


def parse_amount(text: str) -> Decimal:
    """Parse a non-negative amount with at most two decimal places."""
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise TrackerError(ErrorMessage.INVALID_AMOUNT)
    if not is_valid_amount(amount):
        raise TrackerError(ErrorMessage.INVALID_AMOUNT)
    return amount


def check_description(text: str) -> str:
    """
    A description must be non-empty and fit on one save-file line.

    Line breaks, control characters and the field delimiter are refused.
    """
    description = text.strip()
    if not description:
        raise TrackerError(ErrorMessage.EMPTY_DESCRIPTION)
    if "|" in description:
        raise TrackerError(ErrorMessage.RESERVED_DELIMITER)
    if not all(ch.isprintable() for ch in description):
        raise TrackerError(ErrorMessage.MULTILINE_DESCRIPTION)
    return description


def _build(model, **fields):
    """Construct a record, turning schema violations into user errors."""
    try:
        return model(**fields)
    except ValidationError as e:
        errors = e.errors()
        message = errors[0]["msg"] if errors else str(e)
        raise TrackerError(message)


class CommandParser:
    """
    Turns raw input lines into Command objects.

    Each instruction has its own sub-parser receiving the details string
    (everything after the first space, stripped).
    """

    def __init__(self):
        self._handlers: dict[str, Callable[[str], Command]] = {
            "TODO": self._parse_todo,
            "DEADLINE": self._parse_deadline,
            "EVENT": self._parse_event,
            "EXPENSE": self._parse_expense,
            "LIST": self._parse_list,
            "DONE": self._parse_done,
            "DELETE": self._parse_delete,
            "FIND": self._parse_find,
            "BYE": self._parse_bye,
        }

    def parse(self, user_input: str) -> Command:
        """
        Parse one input line.

        Raises:
            TrackerError: If the line is empty, unknown or malformed
        """
        line = user_input.strip()
        if not line:
            raise TrackerError(ErrorMessage.EMPTY_COMMAND)

        instruction, _, details = line.partition(" ")
        handler = self._handlers.get(instruction.upper())
        if handler is None:
            raise TrackerError(ErrorMessage.COMMAND_NOT_FOUND)
        return handler(details.strip())

    def _parse_todo(self, details: str) -> Command:
        description = check_description(details)
        return AddCommand(_build(Todo, description=description))

    def _parse_deadline(self, details: str) -> Command:
        if not details:
            raise TrackerError(ErrorMessage.EMPTY_DESCRIPTION)

        description, marker, by_text = details.partition(BY_MARKER)
        if not marker:
            raise TrackerError(ErrorMessage.DEADLINE_FORMAT)

        description = check_description(description)
        by = parse_datetime(by_text)
        return AddCommand(_build(Deadline, description=description, by=by))

    def _parse_event(self, details: str) -> Command:
        if not details:
            raise TrackerError(ErrorMessage.EMPTY_DESCRIPTION)

        description, marker, span = details.partition(AT_MARKER)
        if not marker:
            raise TrackerError(ErrorMessage.EVENT_FORMAT)
        start_text, marker, end_text = span.partition(TO_MARKER)
        if not marker:
            raise TrackerError(ErrorMessage.EVENT_FORMAT)

        description = check_description(description)
        start = parse_datetime(start_text)
        end = parse_datetime(end_text)
        if end < start:
            raise TrackerError(ErrorMessage.EVENT_ENDS_BEFORE_START)
        return AddCommand(_build(Event, description=description, start=start, end=end))

    def _parse_expense(self, details: str) -> Command:
        if not details:
            raise TrackerError(ErrorMessage.EMPTY_DESCRIPTION)

        amount_text, marker, rest = details.partition(DOLLARS_MARKER)
        if not marker:
            raise TrackerError(ErrorMessage.EXPENSE_FORMAT)
        description, marker, date_text = rest.partition(ON_MARKER)
        if not marker:
            raise TrackerError(ErrorMessage.EXPENSE_FORMAT)

        amount = parse_amount(amount_text)
        description = check_description(description)
        spent_on = parse_date(date_text)
        return AddExpenseCommand(
            _build(Expense, amount=amount, description=description, spent_on=spent_on)
        )

    def _parse_list(self, details: str) -> Command:
        target = details.lower()
        if target in ("", "tasks"):
            return ListCommand()
        if target == "expenses":
            return ListExpenseCommand()
        raise TrackerError(ErrorMessage.LIST_FORMAT)

    def _parse_done(self, details: str) -> Command:
        return MarkCommand(parse_index(details))

    def _parse_delete(self, details: str) -> Command:
        return DeleteCommand(parse_index(details))

    def _parse_find(self, details: str) -> Command:
        if not details:
            raise TrackerError(ErrorMessage.EMPTY_SEARCH)
        return FindCommand(details)

    def _parse_bye(self, details: str) -> Command:
        return ExitCommand()


def parse_command(user_input: str) -> Command:
    """Shorthand for CommandParser().parse(user_input)."""
    return CommandParser().parse(user_input)
