"""Cursor, buffer, and remembered-path state owned by one editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .document import LineBuffer


def initial_cursor(line_count: int) -> int:
    """Cursor after a load: the last line, or the insertion point when empty."""

    return max(line_count, 1)


@dataclass(slots=True)
class EditorState:
    """Everything an ``e`` command replaces in one step."""

    buffer: LineBuffer = field(default_factory=LineBuffer)
    cursor: int = 1
    default_path: Optional[str] = None

    @classmethod
    def loaded(cls, buffer: LineBuffer, *, path: Optional[str] = None) -> "EditorState":
        return cls(
            buffer=buffer,
            cursor=initial_cursor(buffer.line_count),
            default_path=path,
        )

    @property
    def line_count(self) -> int:
        return self.buffer.line_count

    def set_cursor(self, cursor: int) -> None:
        if not 1 <= cursor <= self.buffer.line_count + 1:
            raise ValueError(
                f"cursor {cursor} outside 1..{self.buffer.line_count + 1}"
            )
        self.cursor = cursor


__all__ = ["EditorState", "initial_cursor"]
