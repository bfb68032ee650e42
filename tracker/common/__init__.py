"""Shared error type and user-facing messages."""

from tracker.common.errors import TrackerError
from tracker.common.messages import (
    DATE_PATTERN,
    DATETIME_PATTERN,
    ErrorMessage,
    Message,
    count_message,
    welcome_message,
)

__all__ = [
    "DATE_PATTERN",
    "DATETIME_PATTERN",
    "ErrorMessage",
    "Message",
    "TrackerError",
    "count_message",
    "welcome_message",
]
