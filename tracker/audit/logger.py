"""
Audit Logger

DESIGN DECISION: Every significant action in the tracker is logged.
This provides:
1. Traceability of every command
2. Debugging capability when a save file is malformed
3. A record of failed saves, which are otherwise invisible to the user

The audit logger:
- Logs through structlog on top of the stdlib logging tree
- Stays quiet below WARNING unless configured otherwise, so it never
  interleaves with the console UI by default
- Supports correlation IDs to trace the events of one session
"""

import logging
from pathlib import Path
from typing import Optional
from uuid import UUID, uuid4

import structlog

from tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Route audit output to stderr or a file at the given level.

    Safe to call more than once; the last call wins.
    """
    handlers: list[logging.Handler]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler()]
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=handlers,
        force=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    One instance per session; every event it emits carries the
    session's correlation ID.
    """

    def __init__(self, correlation_id: Optional[UUID] = None):
        self._correlation_id = correlation_id or create_correlation_id()
        self._logger = structlog.get_logger("tracker.audit")

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at its own severity."""
        if event.correlation_id is None:
            event.correlation_id = self._correlation_id
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_session_started(self, task_count: int, expense_count: int) -> None:
        self.log(AuditEventBuilder.session_started(task_count, expense_count))

    def log_session_ended(self) -> None:
        self.log(AuditEventBuilder.session_ended())

    def log_command_executed(self, command: str, mutating: bool) -> None:
        self.log(AuditEventBuilder.command_executed(command, mutating))

    def log_command_rejected(
        self,
        user_input: str,
        error_code: Optional[str],
        error_message: str,
    ) -> None:
        self.log(AuditEventBuilder.command_rejected(user_input, error_code, error_message))

    def log_records_loaded(self, kind: str, path: Path, count: int, skipped: int) -> None:
        self.log(AuditEventBuilder.records_loaded(kind, str(path), count, skipped))

    def log_record_skipped(self, kind: str, path: Path, line_number: int, reason: str) -> None:
        self.log(AuditEventBuilder.record_skipped(kind, str(path), line_number, reason))

    def log_records_saved(self, kind: str, path: Path, count: int) -> None:
        self.log(AuditEventBuilder.records_saved(kind, str(path), count))

    def log_save_failed(self, kind: str, path: Path, error_message: str) -> None:
        self.log(AuditEventBuilder.save_failed(kind, str(path), error_message))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a session and pass it through
    every component that logs.
    """
    return uuid4()
