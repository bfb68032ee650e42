"""Tests for a whole tracker session."""

import pytest
from datetime import datetime

from tracker import cli
from tracker.common import ErrorMessage, Message
from tracker.config import TrackerSettings
from tracker.models.task import Deadline, Todo
from tracker.orchestrator import Tracker, create_tracker
from tracker.ui import BufferedUi, ConsoleUi

from conftest import InMemoryStorage


@pytest.fixture
def tracker(memory_storage, buffered_ui, audit_logger) -> Tracker:
    return Tracker(storage=memory_storage, ui=buffered_ui, audit_logger=audit_logger)


def scripted_input(lines):
    """Fake input() that replays lines, then signals end of input."""
    remaining = iter(lines)

    def fake_input(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return fake_input


class TestTrackerHandle:
    """Tests for Tracker.handle."""

    def test_loads_saved_records(self, sample_tasks, sample_expenses, buffered_ui, audit_logger):
        """Test both lists are loaded at construction."""
        storage = InMemoryStorage(sample_tasks, sample_expenses)
        tracker = Tracker(storage=storage, ui=buffered_ui, audit_logger=audit_logger)
        assert len(tracker.tasks) == 3
        assert len(tracker.expenses) == 2
        assert audit_logger.event_types() == ["session_started"]

    def test_add_then_list(self, tracker, buffered_ui, memory_storage):
        """Test commands share the same task list."""
        assert tracker.handle("TODO buy milk") is False
        assert tracker.handle("DEADLINE return book /by 2024-01-01 18:00") is False
        buffered_ui.flush()

        tracker.handle("LIST")
        reply = buffered_ui.flush()
        assert "1. [T][ ] buy milk" in reply
        assert "2. [D][ ] return book (by: Jan 1 2024, 18:00)" in reply
        assert memory_storage.tasks == [
            Todo(description="buy milk"),
            Deadline(description="return book", by=datetime(2024, 1, 1, 18, 0)),
        ]

    def test_user_error_is_shown_not_raised(self, tracker, buffered_ui, audit_logger):
        """Test a TrackerError keeps the session alive."""
        assert tracker.handle("DONE abc") is False
        assert buffered_ui.flush() == f"OOPS!!! {ErrorMessage.INVALID_INDEX.value}"
        rejected = audit_logger.events[-1]
        assert rejected.event_type.value == "command_rejected"
        assert rejected.error_code == "INVALID_INDEX"
        assert tracker.finished is False

    def test_out_of_range_delete_keeps_list(self, tracker, buffered_ui, memory_storage):
        tracker.handle("TODO a")
        saves = memory_storage.task_saves
        tracker.handle("DELETE 5")
        assert len(tracker.tasks) == 1
        assert memory_storage.task_saves == saves
        assert ErrorMessage.INDEX_OUT_OF_RANGE.value in buffered_ui.flush()

    def test_expense_flow(self, tracker, buffered_ui, memory_storage):
        tracker.handle("EXPENSE 12.50 /dollars lunch /on 2024-01-01")
        tracker.handle("EXPENSE 3 /dollars coffee /on 2024-01-02")
        buffered_ui.flush()
        tracker.handle("LIST expenses")
        assert buffered_ui.flush().splitlines()[-1] == "Total: 15.50"
        assert len(memory_storage.expenses) == 2

    def test_huge_amount_is_rejected_and_listing_still_works(self, tracker, buffered_ui, memory_storage):
        """Test an overflowing amount never reaches the expense total."""
        tracker.handle("EXPENSE 1e999999999 /dollars x /on 2024-01-01")
        assert buffered_ui.flush() == f"OOPS!!! {ErrorMessage.INVALID_AMOUNT.value}"
        assert memory_storage.expense_saves == 0

        tracker.handle("EXPENSE 999999999999.99 /dollars big /on 2024-01-01")
        tracker.handle("EXPENSE 999999999999.99 /dollars bigger /on 2024-01-02")
        buffered_ui.flush()
        assert tracker.handle("LIST expenses") is False
        assert buffered_ui.flush().splitlines()[-1] == "Total: 1999999999999.98"

    def test_multiline_input_is_rejected(self, tracker, buffered_ui, memory_storage):
        tracker.handle("TODO read\nchapter two")
        assert buffered_ui.flush() == f"OOPS!!! {ErrorMessage.MULTILINE_DESCRIPTION.value}"
        assert memory_storage.task_saves == 0

    def test_bye_ends_session(self, tracker, buffered_ui, audit_logger):
        """Test BYE returns True and says goodbye."""
        assert tracker.handle("BYE") is True
        assert tracker.finished is True
        assert buffered_ui.flush() == Message.EXIT.value
        assert audit_logger.event_types()[-2:] == ["command_executed", "session_ended"]

    def test_executed_commands_are_audited(self, tracker, audit_logger):
        tracker.handle("TODO a")
        executed = audit_logger.events[-1]
        assert executed.event_type.value == "command_executed"
        assert executed.details == {"command": "AddCommand", "mutating": True}

    def test_run_requires_console_ui(self, tracker):
        with pytest.raises(TypeError):
            tracker.run()


class TestConsoleSession:
    """Tests for the console loop."""

    def test_run_until_bye(self, memory_storage, audit_logger):
        """Test the loop greets, dispatches and stops at BYE."""
        output = []
        ui = ConsoleUi(
            bot_name="Duke",
            input_fn=scripted_input(["TODO buy milk", "", "BYE", "TODO never read"]),
            output_fn=output.append,
        )
        Tracker(storage=memory_storage, ui=ui, audit_logger=audit_logger).run()

        assert "Hello! I'm Duke" in output[0]
        assert "buy milk" in output[1]
        assert ErrorMessage.EMPTY_COMMAND.value in output[2]
        assert Message.EXIT.value in output[3]
        assert len(output) == 4
        assert [t.description for t in memory_storage.tasks] == ["buy milk"]

    def test_end_of_input_exits(self, memory_storage, audit_logger):
        """Test running out of input behaves like BYE."""
        output = []
        ui = ConsoleUi(input_fn=scripted_input([]), output_fn=output.append)
        tracker = Tracker(storage=memory_storage, ui=ui, audit_logger=audit_logger)
        tracker.run()
        assert tracker.finished is True
        assert Message.EXIT.value in output[-1]

    def test_messages_are_framed(self):
        output = []
        ConsoleUi(output_fn=output.append).show_message("one\ntwo")
        lines = output[0].splitlines()
        assert lines[0].strip() == "_" * 60
        assert lines[1:3] == ["    one", "    two"]
        assert lines[3].strip() == "_" * 60


class TestFactoryAndCli:
    """Tests for create_tracker and the console entry point."""

    def test_create_tracker_uses_settings_paths(self, tmp_path):
        """Test the factory wires flat-file storage from settings."""
        settings = TrackerSettings(data_dir=tmp_path / "store")
        ui = BufferedUi()
        tracker = create_tracker(settings, ui=ui)
        tracker.handle("TODO persisted")
        assert (tmp_path / "store" / "tasks.txt").read_text(encoding="utf-8") == "T | 0 | persisted\n"

        reloaded = create_tracker(settings, ui=BufferedUi())
        assert [t.description for t in reloaded.tasks] == ["persisted"]

    def test_settings_reject_unknown_log_level(self):
        with pytest.raises(ValueError):
            TrackerSettings(log_level="LOUD")

    def test_cli_main(self, tmp_path, monkeypatch, capsys):
        """Test the console script end to end."""
        monkeypatch.setattr("builtins.input", scripted_input(["TODO from cli", "LIST", "BYE"]))
        assert cli.main(["--data-dir", str(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "1. [T][ ] from cli" in out
        assert Message.EXIT.value in out
        assert (tmp_path / "tasks.txt").exists()
