"""Terminal front end."""

from typing import Callable, Optional

from tracker.ui.base import Ui


DIVIDER = "_" * 60
INDENT = "    "


class ConsoleUi(Ui):
    """
    Prints every message between two divider lines.

    input_fn/output_fn default to the builtins; tests pass fakes.
    """

    def __init__(
        self,
        bot_name: str = "Duke",
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(bot_name)
        self._input = input_fn or input
        self._output = output_fn or print

    def show_message(self, text: str) -> None:
        body = "\n".join(f"{INDENT}{line}" for line in text.splitlines())
        self._output(f"{INDENT}{DIVIDER}\n{body}\n{INDENT}{DIVIDER}")

    def read_command(self) -> Optional[str]:
        """Read one line; None once input is exhausted."""
        try:
            return self._input("> ")
        except EOFError:
            return None
