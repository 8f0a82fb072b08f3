from __future__ import annotations

import pytest

from line_editor.commands import (
    DOLLAR,
    Address,
    AddressToken,
    Command,
    CommandKind,
    LineScanner,
    parse_address,
    parse_command,
)
from line_editor.errors import CommandSyntaxError, ErrorKind


def expect_syntax_error(line: str, kind: ErrorKind) -> None:
    with pytest.raises(CommandSyntaxError) as excinfo:
        parse_command(line)
    assert excinfo.value.kind is kind


def test_empty_line_is_print_and_set_without_address() -> None:
    assert parse_command("") == Command(kind=CommandKind.PRINT_AND_SET)


def test_single_verbs_without_address() -> None:
    assert parse_command("p").kind is CommandKind.PRINT
    assert parse_command("a").kind is CommandKind.APPEND
    assert parse_command("i").kind is CommandKind.INSERT
    assert parse_command("c").kind is CommandKind.CHANGE
    assert parse_command("d").kind is CommandKind.DELETE


def test_numeric_and_dollar_addresses() -> None:
    assert parse_command("12p").address == Address.single(AddressToken.line(12))
    assert parse_command("$d").address == Address.single(DOLLAR)
    assert parse_command("0p").address == Address.single(AddressToken.line(0))


def test_range_address() -> None:
    command = parse_command("1,$p")

    assert command.kind is CommandKind.PRINT
    assert command.address == Address.range(AddressToken.line(1), DOLLAR)
    assert str(command.address) == "1,$"


def test_trailing_comma_degrades_to_single_address() -> None:
    assert parse_command("3,p").address == Address.single(AddressToken.line(3))
    assert parse_command("$,").address == Address.single(DOLLAR)


def test_address_without_verb_is_print_and_set() -> None:
    command = parse_command("2,3")

    assert command.kind is CommandKind.PRINT_AND_SET
    assert command.address == Address.range(AddressToken.line(2), AddressToken.line(3))


def test_parse_address_leaves_verb_unconsumed() -> None:
    scanner = LineScanner("4,5d")

    address = parse_address(scanner)

    assert address is not None and address.is_range
    assert scanner.peek() == "d"


def test_parse_address_absent() -> None:
    scanner = LineScanner("p")

    assert parse_address(scanner) is None
    assert scanner.position == 0


def test_oversized_line_number_is_parse_failure() -> None:
    expect_syntax_error("99999999999999999999999999p", ErrorKind.ADDRESS_PARSE_FAILURE)


def test_edit_takes_verbatim_path_after_one_separator() -> None:
    assert parse_command("e notes.txt").path == "notes.txt"
    assert parse_command("e  spaced name ").path == " spaced name "
    assert parse_command("e\tdata.txt").path == "data.txt"


def test_edit_without_argument_uses_default_later() -> None:
    command = parse_command("e")

    assert command.kind is CommandKind.EDIT
    assert command.path is None


def test_write_with_and_without_path() -> None:
    assert parse_command("w") == Command(kind=CommandKind.WRITE)
    command = parse_command("2,$w out.txt")
    assert command.kind is CommandKind.WRITE
    assert command.path == "out.txt"
    assert command.address == Address.range(AddressToken.line(2), DOLLAR)


def test_path_verbs_require_separator() -> None:
    expect_syntax_error("efile", ErrorKind.EXPECTED_SEPARATOR)
    expect_syntax_error("wfile", ErrorKind.EXPECTED_SEPARATOR)


def test_separator_without_path_is_missing_argument() -> None:
    expect_syntax_error("e ", ErrorKind.MISSING_COMMAND_ARGUMENT)
    expect_syntax_error("w ", ErrorKind.MISSING_COMMAND_ARGUMENT)


def test_unknown_commands() -> None:
    expect_syntax_error("x", ErrorKind.UNKNOWN_COMMAND)
    expect_syntax_error(" p", ErrorKind.UNKNOWN_COMMAND)
    expect_syntax_error("1,,p", ErrorKind.UNKNOWN_COMMAND)
    expect_syntax_error("$5p", ErrorKind.UNKNOWN_COMMAND)


def test_trailing_characters_after_verb() -> None:
    expect_syntax_error("pp", ErrorKind.EXTRA_TRAILING_CHARACTERS)
    expect_syntax_error("1d ", ErrorKind.EXTRA_TRAILING_CHARACTERS)


def test_path_is_rejected_for_non_path_commands() -> None:
    with pytest.raises(ValueError):
        Command(kind=CommandKind.PRINT, path="file.txt")
