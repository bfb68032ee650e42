"""User interface package."""

from tracker.ui.base import BufferedUi, Ui
from tracker.ui.console import ConsoleUi

__all__ = ["BufferedUi", "ConsoleUi", "Ui"]
