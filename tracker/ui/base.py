"""
User interface contract.

Commands only ever talk to a Ui; the console and the chat front end
each provide one.
"""

from abc import ABC, abstractmethod

from tracker.common import welcome_message


class Ui(ABC):
    """Renders messages for the user."""

    def __init__(self, bot_name: str = "Duke"):
        self._bot_name = bot_name

    @abstractmethod
    def show_message(self, text: str) -> None:
        pass

    def show_error(self, text: str) -> None:
        self.show_message(f"OOPS!!! {text}")

    def show_welcome(self) -> None:
        self.show_message(welcome_message(self._bot_name))


class BufferedUi(Ui):
    """
    Collects messages instead of printing them.

    The chat front end calls flush() after every command to get the
    bot's reply as one block of text.
    """

    def __init__(self, bot_name: str = "Duke"):
        super().__init__(bot_name)
        self._messages: list[str] = []

    def show_message(self, text: str) -> None:
        self._messages.append(text)

    def flush(self) -> str:
        text = "\n".join(self._messages)
        self._messages.clear()
        return text
