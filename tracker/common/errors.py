"""Error type shared by the parser, the record lists and the commands."""

from typing import Optional, Union

from tracker.common.messages import ErrorMessage


class TrackerError(Exception):
    """
    A user-facing error.

    Raised for anything the user typed that cannot be carried out.
    Caught by the orchestrator and shown to the user; never fatal.
    """

    def __init__(self, message: Union[ErrorMessage, str]):
        self.code: Optional[ErrorMessage] = (
            message if isinstance(message, ErrorMessage) else None
        )
        self.message: str = (
            message.value if isinstance(message, ErrorMessage) else message
        )
        super().__init__(self.message)
