"""Line storage for the editor buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineBuffer:
    """Mutable list-of-lines model; positions are 0-based internally."""

    _lines: List[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        """Split ``text`` on newlines, dropping one trailing terminator.

        ``\\r\\n`` endings lose their carriage return.
        """

        if not text:
            return cls()
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return cls(_lines=[line.removesuffix("\r") for line in lines])

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineBuffer":
        return cls(_lines=list(lines))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_lines(self, indices: slice) -> Sequence[str]:
        return tuple(self._lines[indices])

    def insert_line(self, index: int, line: str) -> None:
        if not 0 <= index <= len(self._lines):
            raise IndexError(f"insert position {index} outside buffer")
        self._lines.insert(index, line)

    def delete_lines(self, indices: slice) -> None:
        del self._lines[indices]


__all__ = ["LineBuffer"]
