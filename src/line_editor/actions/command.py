"""Actions that print, delete, write, and reload buffer contents."""

from __future__ import annotations

from typing import Dict, Optional

from line_editor.buffer import load_file, write_lines
from line_editor.commands import Command, CommandKind, LineRange
from line_editor.errors import AddressError, ConfigurationError, ErrorKind
from line_editor.modes.base_mode import ModeContext, ModeResult
from line_editor.modes.command_mode import CommandHandler

from .core import append_lines, change_lines, insert_lines, require_range


def _print_lines(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    selected = require_range(line_range)
    state = context.state
    text = "\n".join(state.buffer.get_lines(selected.indices))
    context.bus.emit("output", text)
    state.set_cursor(selected.end + 1)
    return ModeResult(status="command_print", message=command.kind.name.lower())


def _delete_lines(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    del command
    selected = require_range(line_range)
    state = context.state
    state.buffer.delete_lines(selected.indices)
    # The line that followed the block now sits at ``start``.
    state.set_cursor(selected.start)
    return ModeResult(status="command_delete", message="delete")


def _write_lines(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    selected = require_range(line_range)
    state = context.state
    path = command.path or state.default_path
    if path is None:
        raise AddressError(ErrorKind.MISSING_WRITE_PATH, "no file name remembered")

    written = write_lines(path, state.buffer.get_lines(selected.indices))
    state.default_path = path
    context.bus.emit("output", str(written))
    return ModeResult(status="command_write", message=path)


def _edit_file(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    del line_range
    path = command.path or context.state.default_path
    if path is None:
        raise ConfigurationError(ErrorKind.MISSING_FILE_PATH, "no file name remembered")

    loaded = load_file(path)
    context.state = loaded.state
    context.bus.emit("output", str(loaded.size))
    return ModeResult(switch_to="command", status="command_edit", message=path)


COMMAND_HANDLERS: Dict[CommandKind, CommandHandler] = {
    CommandKind.PRINT_AND_SET: _print_lines,
    CommandKind.PRINT: _print_lines,
    CommandKind.APPEND: append_lines,
    CommandKind.INSERT: insert_lines,
    CommandKind.CHANGE: change_lines,
    CommandKind.DELETE: _delete_lines,
    CommandKind.EDIT: _edit_file,
    CommandKind.WRITE: _write_lines,
}


__all__ = ["COMMAND_HANDLERS"]
