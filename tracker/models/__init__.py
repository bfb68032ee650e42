"""
Data Models Package

This package contains the Pydantic models used by the tracker and the
in-memory lists that hold them during a session.
"""

from tracker.models.task import (
    Deadline,
    Event,
    Expense,
    Task,
    TaskType,
    Todo,
    format_date,
    is_valid_amount,
    format_datetime,
)
from tracker.models.lists import (
    ExpenseList,
    TaskList,
    render_entries,
)
from tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Record models
    "Deadline",
    "Event",
    "Expense",
    "Task",
    "TaskType",
    "Todo",
    "format_date",
    "format_datetime",
    "is_valid_amount",
    # Lists
    "ExpenseList",
    "TaskList",
    "render_entries",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
