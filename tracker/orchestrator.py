"""
Main Orchestrator for Personal Tracker

This module ties together all the components and defines the
end-to-end flow of one session:

    input line → parse → Command → execute → (save) → reply

DESIGN DECISION: The orchestrator is the only place user errors are caught.
- A TrackerError is shown to the user and audited, and the session goes on
- Anything else is a bug and propagates
- Every executed and rejected command is audited
"""

from typing import Optional

from tracker.audit import AuditLogger, configure_logging
from tracker.commands import Command
from tracker.common import TrackerError
from tracker.config import TrackerSettings, get_settings
from tracker.models.lists import ExpenseList, TaskList
from tracker.parsing import CommandParser
from tracker.services.storage import FlatFileStorage, RecordStorageInterface
from tracker.ui import ConsoleUi, Ui


class Tracker:
    """
    One tracker session.

    Owns the task and expense lists for as long as the session runs;
    commands receive them by reference.
    """

    def __init__(
        self,
        storage: RecordStorageInterface,
        ui: Ui,
        audit_logger: Optional[AuditLogger] = None,
        parser: Optional[CommandParser] = None,
    ):
        self._storage = storage
        self._ui = ui
        self._audit_logger = audit_logger or AuditLogger()
        self._parser = parser or CommandParser()

        self.tasks = TaskList(storage.load())
        self.expenses = ExpenseList(storage.load_expenses())
        self._finished = False

        self._audit_logger.log_session_started(len(self.tasks), len(self.expenses))

    @property
    def ui(self) -> Ui:
        return self._ui

    @property
    def finished(self) -> bool:
        """True once BYE has been handled."""
        return self._finished

    def handle(self, user_input: str) -> bool:
        """
        Parse and execute one input line.

        Returns True if the session should end.
        """
        try:
            command: Command = self._parser.parse(user_input)
            command.execute(self.tasks, self.expenses, self._ui, self._storage)
        except TrackerError as e:
            self._audit_logger.log_command_rejected(
                user_input,
                e.code.name if e.code else None,
                e.message,
            )
            self._ui.show_error(e.message)
            return False

        self._audit_logger.log_command_executed(command.name, command.mutating)
        if command.is_exit:
            self._finished = True
            self._audit_logger.log_session_ended()
        return command.is_exit

    def run(self) -> None:
        """
        Console loop: greet, then read and dispatch until BYE.

        End of input behaves like BYE.
        """
        if not isinstance(self._ui, ConsoleUi):
            raise TypeError("run() needs a ConsoleUi; use handle() for other front ends")

        self._ui.show_welcome()
        while not self._finished:
            line = self._ui.read_command()
            if line is None:
                self.handle("BYE")
                break
            self.handle(line)


def create_tracker(
    settings: Optional[TrackerSettings] = None,
    ui: Optional[Ui] = None,
) -> Tracker:
    """
    Factory function to create a tracker from settings.

    Args:
        settings: Defaults to the cached environment settings.
        ui: Defaults to a ConsoleUi.

    Returns:
        A ready-to-use Tracker with both lists loaded
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_file)

    audit_logger = AuditLogger()
    storage = FlatFileStorage(
        tasks_path=settings.tasks_path,
        expenses_path=settings.expenses_path,
        audit_logger=audit_logger,
        retry_attempts=settings.save_retry_attempts,
    )
    ui = ui or ConsoleUi(bot_name=settings.bot_name)
    return Tracker(storage=storage, ui=ui, audit_logger=audit_logger)
