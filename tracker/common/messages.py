"""
User-facing text.

Every string the tracker shows to a user lives here so that the console
and the chat front end always say the same thing.
"""

from enum import Enum


DATETIME_PATTERN = "yyyy-MM-dd HH:mm"
DATE_PATTERN = "yyyy-MM-dd"


class ErrorMessage(str, Enum):
    """
    Closed set of input errors.

    The member name doubles as a stable error code for callers and tests.
    """
    EMPTY_COMMAND = "Please type a command."
    COMMAND_NOT_FOUND = "I'm sorry, but I don't know what that means."
    EMPTY_DESCRIPTION = "The description cannot be empty."
    EMPTY_INDEX = "Please provide the index of a task."
    INVALID_INDEX = "The index must be a whole number."
    INDEX_OUT_OF_RANGE = "There is no task with that index."
    EMPTY_SEARCH = "Please provide a keyword to search for."
    INVALID_AMOUNT = (
        "Amounts must be between 0 and 999999999999.99 "
        "with at most 2 decimal places."
    )
    RESERVED_DELIMITER = "Descriptions cannot contain '|'."
    MULTILINE_DESCRIPTION = "Descriptions must fit on a single line."
    EVENT_ENDS_BEFORE_START = "An event cannot end before it starts."
    DEADLINE_FORMAT = "DEADLINE requires a format of <description> /by <deadline>."
    EVENT_FORMAT = "EVENT requires a format of <description> /at <start> /to <end>."
    EXPENSE_FORMAT = (
        "EXPENSE requires a format of <amount> /dollars <description> /on <date>."
    )
    LIST_FORMAT = "Use 'LIST tasks' or 'LIST expenses'."
    DATETIME_FORMAT = f"Date and time should be in the format of {DATETIME_PATTERN}."
    DATE_FORMAT = f"Date should be in the format of {DATE_PATTERN}."


class Message(str, Enum):
    """Confirmation and status messages."""
    EXIT = "Bye. Hope to see you again soon!"
    LIST_TASKS = "Here are the tasks in your list:"
    LIST_EXPENSES = "Here are the expenses in your list:"
    FIND = "Here are the matching tasks in your list:"
    NO_TASKS = "Your task list is empty."
    NO_EXPENSES = "You have not recorded any expenses."
    NO_MATCHES = "No tasks match your search."
    ADD_TASK = "Got it. I've added this task:"
    MARK_TASK = "Nice! I've marked this task as done:"
    DELETE_TASK = "Noted. I've removed this task:"
    ADD_EXPENSE = "Got it. I've recorded this expense:"


def welcome_message(bot_name: str) -> str:
    """Greeting shown when a session starts."""
    return f"Hello! I'm {bot_name}\nWhat can I do for you?"


def count_message(count: int, noun: str = "task") -> str:
    """Running total line appended to add/delete confirmations."""
    plural = noun if count == 1 else f"{noun}s"
    return f"Now you have {count} {plural} in the list."
