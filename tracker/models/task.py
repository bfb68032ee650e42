"""
Core Record Models for Personal Tracker

These models define the strict schemas for the records the tracker keeps.
They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages
3. Render themselves the same way on every front end

DESIGN DECISION: Tasks form a closed set of variants (Todo, Deadline, Event).
Each variant carries a one-letter tag used by the save format.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TaskType(str, Enum):
    """
    Supported task variants.

    The value is the tag written at the start of every saved task line.
    """
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


# =============================================================================
# DISPLAY HELPERS
# =============================================================================

def format_datetime(value: datetime) -> str:
    """Render a datetime as e.g. 'Jan 1 2024, 18:00'."""
    return f"{value:%b} {value.day} {value:%Y, %H:%M}"


def format_date(value: date) -> str:
    """Render a date as e.g. 'Jan 1 2024'."""
    return f"{value:%b} {value.day} {value:%Y}"


# =============================================================================
# TASK MODELS
# =============================================================================

class Task(BaseModel):
    """
    Base of every task variant.

    Only the done flag is mutable after creation.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    task_type: ClassVar[TaskType]

    description: str = Field(
        ...,
        min_length=1,
        description="What needs doing"
    )
    is_done: bool = Field(
        default=False,
        description="Has the task been completed?"
    )

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def mark_as_done(self) -> None:
        """Completing a task is idempotent."""
        self.is_done = True

    def __str__(self) -> str:
        return f"[{self.task_type.value}][{self.status_icon}] {self.description}"


class Todo(Task):
    """A task with no date attached."""

    task_type: ClassVar[TaskType] = TaskType.TODO


class Deadline(Task):
    """A task that must be done by a point in time."""

    task_type: ClassVar[TaskType] = TaskType.DEADLINE

    by: datetime = Field(
        ...,
        description="When the task is due"
    )

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {format_datetime(self.by)})"


class Event(Task):
    """A task that occupies a span of time."""

    task_type: ClassVar[TaskType] = TaskType.EVENT

    start: datetime = Field(
        ...,
        description="When the event starts"
    )
    end: datetime = Field(
        ...,
        description="When the event ends"
    )

    @model_validator(mode='after')
    def validate_span(self) -> 'Event':
        """An event cannot end before it starts."""
        if self.end < self.start:
            raise ValueError("Event end cannot be before start")
        return self

    def __str__(self) -> str:
        return (
            f"{super().__str__()} "
            f"(time: {format_datetime(self.start)} to {format_datetime(self.end)})"
        )


# =============================================================================
# EXPENSE MODEL
# =============================================================================

MAX_AMOUNT = Decimal("999999999999.99")


def is_valid_amount(amount: Decimal) -> bool:
    """
    Finite, non-negative, at most two decimal places and at most MAX_AMOUNT.

    Safe to call on any Decimal: no arithmetic is done that could overflow.
    """
    return (
        amount.is_finite()
        and amount >= 0
        and amount.as_tuple().exponent >= -2
        and amount <= MAX_AMOUNT
    )


class Expense(BaseModel):
    """
    A single recorded expense.

    Amounts are kept as Decimal so that saving and loading never drifts.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        ge=0,
        le=MAX_AMOUNT,
        decimal_places=2,
        description="Amount spent in dollars"
    )
    description: str = Field(
        ...,
        min_length=1,
        description="What the money was spent on"
    )
    spent_on: date = Field(
        ...,
        description="Day the money was spent"
    )

    def __str__(self) -> str:
        return f"[$] {self.amount:.2f} {self.description} (on: {format_date(self.spent_on)})"
