"""
Flat File Storage Implementation

DESIGN DECISION: Records are stored as plain text, one record per line,
fields separated by " | ". The files stay readable and hand-editable.

Task lines:
    T | <0|1> | <description>
    D | <0|1> | <description> | <by>
    E | <0|1> | <description> | <start> <end>

Expense lines:
    <amount> | <description> | <date>

TRADEOFFS:
- No atomic writes (a crash mid-save can truncate the file)
- Whole-file rewrite on every save (we're fine for personal use)
- Malformed lines are skipped, not repaired

The implementation follows the abstract interface, so commands never
know which backend they are talking to.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from tracker.audit import AuditLogger
from tracker.models.task import (
    Deadline,
    Event,
    Expense,
    Task,
    TaskType,
    Todo,
    is_valid_amount,
)
from tracker.services.storage.interface import RecordStorageInterface, StorageError


FIELD_SEPARATOR = " | "
DONE_FLAGS = {"0": False, "1": True}

RecordT = TypeVar("RecordT")


def _format_datetime(value: datetime) -> str:
    return value.isoformat(timespec="minutes")


def _parse_saved_datetime(text: str) -> datetime:
    """Saved datetimes are naive local times."""
    value = datetime.fromisoformat(text)
    if value.tzinfo is not None:
        raise ValueError(f"unexpected timezone in {text!r}")
    return value


class FlatFileStorage(RecordStorageInterface):
    """
    Pipe-delimited text file implementation of record storage.

    Tasks and expenses live in two separate files.
    """

    def __init__(
        self,
        tasks_path: Path,
        expenses_path: Path,
        audit_logger: Optional[AuditLogger] = None,
        retry_attempts: int = 3,
    ):
        self._tasks_path = Path(tasks_path)
        self._expenses_path = Path(expenses_path)
        self._audit_logger = audit_logger or AuditLogger()
        self._retry_attempts = retry_attempts

    @property
    def tasks_path(self) -> Path:
        return self._tasks_path

    @property
    def expenses_path(self) -> Path:
        return self._expenses_path

    # -------------------------------------------------------------------------
    # Task codec
    # -------------------------------------------------------------------------

    def _task_to_line(self, task: Task) -> str:
        """Convert a task to a save-file line."""
        fields = [
            task.task_type.value,
            "1" if task.is_done else "0",
            task.description,
        ]
        if isinstance(task, Deadline):
            fields.append(_format_datetime(task.by))
        elif isinstance(task, Event):
            fields.append(f"{_format_datetime(task.start)} {_format_datetime(task.end)}")
        return FIELD_SEPARATOR.join(fields)

    def _line_to_task(self, line: str) -> Task:
        """
        Convert a save-file line back to a task.

        Raises:
            ValueError: If the line is malformed in any way
        """
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) < 3:
            raise ValueError(f"expected at least 3 fields, got {len(fields)}")

        tag, done_flag, description = fields[0], fields[1], fields[2]
        if done_flag not in DONE_FLAGS:
            raise ValueError(f"invalid done flag: {done_flag!r}")
        is_done = DONE_FLAGS[done_flag]

        try:
            task_type = TaskType(tag)
        except ValueError:
            raise ValueError(f"unknown task type: {tag!r}")

        if task_type == TaskType.TODO:
            if len(fields) != 3:
                raise ValueError("todo lines have exactly 3 fields")
            return Todo(description=description, is_done=is_done)

        if len(fields) != 4:
            raise ValueError(f"{task_type.name.lower()} lines have exactly 4 fields")

        if task_type == TaskType.DEADLINE:
            return Deadline(
                description=description,
                is_done=is_done,
                by=_parse_saved_datetime(fields[3]),
            )

        span = fields[3].split(" ")
        if len(span) != 2:
            raise ValueError("event lines need a start and an end")
        return Event(
            description=description,
            is_done=is_done,
            start=_parse_saved_datetime(span[0]),
            end=_parse_saved_datetime(span[1]),
        )

    # -------------------------------------------------------------------------
    # Expense codec
    # -------------------------------------------------------------------------

    def _expense_to_line(self, expense: Expense) -> str:
        """Convert an expense to a save-file line."""
        return FIELD_SEPARATOR.join([
            str(expense.amount),
            expense.description,
            expense.spent_on.isoformat(),
        ])

    def _line_to_expense(self, line: str) -> Expense:
        """
        Convert a save-file line back to an expense.

        Raises:
            ValueError: If the line is malformed in any way
        """
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != 3:
            raise ValueError(f"expected 3 fields, got {len(fields)}")
        try:
            amount = Decimal(fields[0])
        except InvalidOperation:
            raise ValueError(f"invalid amount: {fields[0]!r}")
        if not is_valid_amount(amount):
            raise ValueError(f"amount out of range: {fields[0]!r}")
        return Expense(
            amount=amount,
            description=fields[1],
            spent_on=date.fromisoformat(fields[2]),
        )

    # -------------------------------------------------------------------------
    # File access
    # -------------------------------------------------------------------------

    def _read_records(
        self,
        kind: str,
        path: Path,
        decode: Callable[[str], RecordT],
    ) -> list[RecordT]:
        """Read a save file, skipping (and logging) malformed lines."""
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            # No save file yet
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {path}: {e}")

        records: list[RecordT] = []
        skipped = 0
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                records.append(decode(line))
            except ValueError as e:
                skipped += 1
                self._audit_logger.log_record_skipped(kind, path, line_number, str(e))

        self._audit_logger.log_records_loaded(kind, path, len(records), skipped)
        return records

    def _write_records(self, kind: str, path: Path, lines: list[str]) -> bool:
        """
        Overwrite a save file with the given lines.

        Failed writes are retried; a write that keeps failing is logged
        and reported as False instead of raised.
        """
        text = "".join(f"{line}\n" for line in lines)
        retryer = Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=0.1, max=1),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )
        try:
            for attempt in retryer:
                with attempt:
                    path.parent.mkdir(parents=True, exist_ok=True)
                    path.write_text(text, encoding="utf-8")
        except OSError as e:
            self._audit_logger.log_save_failed(kind, path, str(e))
            return False

        self._audit_logger.log_records_saved(kind, path, len(lines))
        return True

    # -------------------------------------------------------------------------
    # RecordStorageInterface
    # -------------------------------------------------------------------------

    def load(self) -> list[Task]:
        return self._read_records("task", self._tasks_path, self._line_to_task)

    def save(self, tasks: Iterable[Task]) -> bool:
        lines = [self._task_to_line(task) for task in tasks]
        return self._write_records("task", self._tasks_path, lines)

    def load_expenses(self) -> list[Expense]:
        return self._read_records("expense", self._expenses_path, self._line_to_expense)

    def save_expenses(self, expenses: Iterable[Expense]) -> bool:
        lines = [self._expense_to_line(expense) for expense in expenses]
        return self._write_records("expense", self._expenses_path, lines)
