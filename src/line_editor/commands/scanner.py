"""Forward-only character scanner over a single command line."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

CharPredicate = Callable[[str], bool]


class LineScanner:
    """Walks one input line left to right; there is no way to step back."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self._text[self._pos]

    def next(self) -> Optional[Tuple[int, str]]:
        """Consume one character, returning ``(offset, char)``."""

        return self.next_if(lambda _char: True)

    def next_if(self, predicate: CharPredicate) -> Optional[Tuple[int, str]]:
        char = self.peek()
        if char is None or not predicate(char):
            return None
        offset = self._pos
        self._pos += 1
        return offset, char

    def take_while(self, predicate: CharPredicate) -> str:
        """Consume the longest run satisfying ``predicate`` and return it."""

        begin = self._pos
        while self.next_if(predicate) is not None:
            pass
        return self._text[begin : self._pos]

    def rest(self) -> str:
        return self.take_while(lambda _char: True)


__all__ = ["CharPredicate", "LineScanner"]
