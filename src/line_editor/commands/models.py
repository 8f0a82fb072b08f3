"""Dataclasses describing parsed addresses and commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True, slots=True)
class AddressToken:
    """Either the symbolic last line (``$``) or a literal 1-based number."""

    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.number is not None and self.number < 0:
            raise ValueError("line numbers are unsigned")

    @classmethod
    def dollar(cls) -> "AddressToken":
        return cls()

    @classmethod
    def line(cls, number: int) -> "AddressToken":
        return cls(number=number)

    def resolve(self, line_count: int) -> int:
        return line_count if self.number is None else self.number

    def __str__(self) -> str:
        return "$" if self.number is None else str(self.number)


DOLLAR = AddressToken.dollar()


@dataclass(frozen=True, slots=True)
class Address:
    """``Single(start)`` when ``end`` is ``None``, otherwise ``Range(start, end)``."""

    start: AddressToken
    end: Optional[AddressToken] = None

    @classmethod
    def single(cls, token: AddressToken) -> "Address":
        return cls(start=token)

    @classmethod
    def range(cls, start: AddressToken, end: AddressToken) -> "Address":
        return cls(start=start, end=end)

    @property
    def is_range(self) -> bool:
        return self.end is not None

    def __str__(self) -> str:
        if self.end is None:
            return str(self.start)
        return f"{self.start},{self.end}"


class CommandKind(str, Enum):
    """Verbs understood by the editor; values are the command characters."""

    PRINT_AND_SET = ""
    PRINT = "p"
    APPEND = "a"
    INSERT = "i"
    CHANGE = "c"
    DELETE = "d"
    EDIT = "e"
    WRITE = "w"

    @property
    def takes_path(self) -> bool:
        return self in {CommandKind.EDIT, CommandKind.WRITE}


@dataclass(frozen=True, slots=True)
class Command:
    """Fully parsed command line."""

    kind: CommandKind
    address: Optional[Address] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.path is not None and not self.kind.takes_path:
            raise ValueError(f"'{self.kind.name}' does not take a path argument")


__all__ = [
    "AddressToken",
    "DOLLAR",
    "Address",
    "CommandKind",
    "Command",
]
