"""Verbs that switch the editor into insert mode."""

from __future__ import annotations

from typing import Optional

from line_editor.commands import Command, LineRange
from line_editor.modes.base_mode import ModeContext, ModeResult
from line_editor.modes.insert_mode import insert_session


def require_range(line_range: Optional[LineRange]) -> LineRange:
    if line_range is None:
        raise RuntimeError("command requires a resolved line range")
    return line_range


def _begin_insert(
    context: ModeContext, *, cursor: int, anchor: int, message: str
) -> ModeResult:
    context.state.set_cursor(cursor)
    insert_session(context)["anchor"] = anchor
    return ModeResult(
        switch_to="insert", status=f"command_{message}", message=message
    )


def append_lines(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    del command
    selected = require_range(line_range)
    return _begin_insert(
        context, cursor=selected.start + 1, anchor=selected.start, message="append"
    )


def insert_lines(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    del command
    selected = require_range(line_range)
    return _begin_insert(
        context, cursor=selected.start, anchor=selected.start, message="insert"
    )


def change_lines(
    context: ModeContext, command: Command, line_range: Optional[LineRange]
) -> ModeResult:
    del command
    selected = require_range(line_range)
    context.state.buffer.delete_lines(selected.indices)
    return _begin_insert(
        context, cursor=selected.start, anchor=selected.start, message="change"
    )


__all__ = ["append_lines", "insert_lines", "change_lines", "require_range"]
