"""
Audit Models for Personal Tracker

Every significant action in the tracker is logged for audit purposes.
This provides:
1. Traceability of every command a user ran
2. Debugging information when a save file goes bad
3. Ability to reconstruct what happened in a session

DESIGN DECISION: Audit events are emitted, never edited.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Every step of a session has its own event type.
    """
    # Session lifecycle
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Commands
    COMMAND_EXECUTED = "command_executed"
    COMMAND_REJECTED = "command_rejected"

    # Persistence
    RECORDS_LOADED = "records_loaded"
    RECORD_SKIPPED = "record_skipped"
    RECORDS_SAVED = "records_saved"
    SAVE_FAILED = "save_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what kind of record is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'task', 'expense', 'command')"
    )

    # Correlation - all events of one session share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events in one session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.command_executed("AddCommand", True, correlation_id)
        event = AuditEventBuilder.save_failed("tasks", path, error)
    """

    @staticmethod
    def session_started(
        task_count: int,
        expense_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            entity_type="session",
            correlation_id=correlation_id,
            description=f"Session started with {task_count} tasks and {expense_count} expenses",
            details={
                "task_count": task_count,
                "expense_count": expense_count,
            },
        )

    @staticmethod
    def session_ended(correlation_id: Optional[UUID] = None) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            entity_type="session",
            correlation_id=correlation_id,
            description="Session ended",
            is_user_action=True,
        )

    @staticmethod
    def command_executed(
        command: str,
        mutating: bool,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMMAND_EXECUTED,
            entity_type="command",
            correlation_id=correlation_id,
            description=f"Command executed: {command}",
            details={
                "command": command,
                "mutating": mutating,
            },
            is_user_action=True,
        )

    @staticmethod
    def command_rejected(
        user_input: str,
        error_code: Optional[str],
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMMAND_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="command",
            correlation_id=correlation_id,
            description="Command rejected",
            details={
                "input": user_input,
            },
            error_code=error_code,
            error_message=error_message,
            is_user_action=True,
        )

    @staticmethod
    def records_loaded(
        kind: str,
        path: str,
        count: int,
        skipped: int
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORDS_LOADED,
            entity_type=kind,
            description=f"Loaded {count} {kind} records",
            details={
                "path": path,
                "count": count,
                "skipped": skipped,
            },
        )

    @staticmethod
    def record_skipped(
        kind: str,
        path: str,
        line_number: int,
        reason: str
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_SKIPPED,
            severity=AuditSeverity.WARNING,
            entity_type=kind,
            description=f"Skipped malformed {kind} line {line_number}",
            details={
                "path": path,
                "line_number": line_number,
                "reason": reason,
            },
        )

    @staticmethod
    def records_saved(
        kind: str,
        path: str,
        count: int
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORDS_SAVED,
            entity_type=kind,
            description=f"Saved {count} {kind} records",
            details={
                "path": path,
                "count": count,
            },
        )

    @staticmethod
    def save_failed(
        kind: str,
        path: str,
        error_message: str
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type=kind,
            description=f"Could not save {kind} records",
            details={
                "path": path,
            },
            error_message=error_message,
        )
