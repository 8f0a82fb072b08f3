"""Mode manager and the Command/Insert modes it dispatches to."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandHandler, CommandMode
from .insert_mode import TERMINATOR, InsertMode, insert_session
from .mode_manager import ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "CommandHandler",
    "CommandMode",
    "InsertMode",
    "ModeManager",
    "TERMINATOR",
    "insert_session",
]
