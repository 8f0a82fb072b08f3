"""Verb implementations dispatched by command mode."""

from .command import COMMAND_HANDLERS
from .core import append_lines, change_lines, insert_lines

__all__ = [
    "COMMAND_HANDLERS",
    "append_lines",
    "change_lines",
    "insert_lines",
]
