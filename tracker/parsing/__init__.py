"""Command parsing package."""

from tracker.parsing.parser import CommandParser, parse_command

__all__ = ["CommandParser", "parse_command"]
