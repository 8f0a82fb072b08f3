"""Recursive-descent parser for ``[addr[,addr2]]verb[ argument]`` lines."""

from __future__ import annotations

import sys
from typing import Optional

from line_editor.errors import CommandSyntaxError, ErrorKind

from .models import DOLLAR, Address, AddressToken, Command, CommandKind
from .scanner import LineScanner

DIGITS = frozenset("0123456789")
MAX_LINE_NUMBER = sys.maxsize

_VERBS = {kind.value: kind for kind in CommandKind if kind.value}


def _is_digit(char: str) -> bool:
    return char in DIGITS


def parse_address_token(scanner: LineScanner) -> Optional[AddressToken]:
    if scanner.next_if(lambda char: char == "$") is not None:
        return DOLLAR

    digits = scanner.take_while(_is_digit)
    if not digits:
        return None
    try:
        number = int(digits)
    except ValueError as exc:  # str-to-int digit limit
        raise CommandSyntaxError(
            ErrorKind.ADDRESS_PARSE_FAILURE, f"cannot parse line number '{digits}'"
        ) from exc
    if number > MAX_LINE_NUMBER:
        raise CommandSyntaxError(
            ErrorKind.ADDRESS_PARSE_FAILURE, f"line number {digits} is too large"
        )
    return AddressToken.line(number)


def parse_address(scanner: LineScanner) -> Optional[Address]:
    """Consume ``token (',' token?)?``; a dangling comma degrades to a single."""

    start = parse_address_token(scanner)
    if start is None:
        return None
    if scanner.next_if(lambda char: char == ",") is None:
        return Address.single(start)
    end = parse_address_token(scanner)
    if end is None:
        return Address.single(start)
    return Address.range(start, end)


def _parse_path(scanner: LineScanner, kind: CommandKind) -> Optional[str]:
    if scanner.at_end():
        return None
    if scanner.next_if(str.isspace) is None:
        raise CommandSyntaxError(
            ErrorKind.EXPECTED_SEPARATOR,
            f"expected whitespace after '{kind.value}', got '{scanner.peek()}'",
        )
    path = scanner.rest()
    if not path:
        raise CommandSyntaxError(
            ErrorKind.MISSING_COMMAND_ARGUMENT, f"'{kind.value}' expects a path"
        )
    return path


def parse_kind(scanner: LineScanner) -> CommandKind:
    consumed = scanner.next()
    if consumed is None:
        return CommandKind.PRINT_AND_SET
    offset, char = consumed
    kind = _VERBS.get(char)
    if kind is None:
        raise CommandSyntaxError(
            ErrorKind.UNKNOWN_COMMAND, f"unknown command '{char}' at offset {offset}"
        )
    return kind


def parse_command(line: str) -> Command:
    """Parse one command-mode input line into a :class:`Command`."""

    scanner = LineScanner(line)
    address = parse_address(scanner)
    kind = parse_kind(scanner)
    path = _parse_path(scanner, kind) if kind.takes_path else None

    if not scanner.at_end():
        offset = scanner.position
        raise CommandSyntaxError(
            ErrorKind.EXTRA_TRAILING_CHARACTERS,
            f"unexpected '{scanner.rest()}' at offset {offset}",
        )
    return Command(kind=kind, address=address, path=path)


__all__ = [
    "MAX_LINE_NUMBER",
    "parse_address",
    "parse_address_token",
    "parse_command",
    "parse_kind",
]
