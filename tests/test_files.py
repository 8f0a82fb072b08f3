from __future__ import annotations

import io
from pathlib import Path
from typing import List

import pytest

from line_editor import cli
from line_editor.buffer import LineBuffer, load_file, render_lines, write_lines
from line_editor.editor import Editor
from line_editor.errors import (
    AddressError,
    ConfigurationError,
    ErrorKind,
    FileAccessError,
)


def open_editor(path: Path) -> tuple[Editor, List[object]]:
    outputs: List[object] = []
    editor = Editor.open(str(path), output=outputs.append)
    return editor, outputs


def test_from_text_handles_trailing_newline_and_crlf() -> None:
    assert LineBuffer.from_text("a\nb").snapshot() == ("a", "b")
    assert LineBuffer.from_text("a\nb\n").snapshot() == ("a", "b")
    assert LineBuffer.from_text("a\r\nb\r\n").snapshot() == ("a", "b")
    assert LineBuffer.from_text("a\n\n").snapshot() == ("a", "")
    assert LineBuffer.from_text("").snapshot() == ()
    assert LineBuffer.from_text("\n").snapshot() == ("",)


def test_load_file_reports_size_and_sets_state(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_bytes("héllo\nworld\n".encode("utf-8"))

    loaded = load_file(str(source))

    assert loaded.size == 13
    assert loaded.state.buffer.snapshot() == ("héllo", "world")
    assert loaded.state.cursor == 2
    assert loaded.state.default_path == str(source)


def test_load_empty_file(tmp_path: Path) -> None:
    source = tmp_path / "empty.txt"
    source.write_bytes(b"")

    loaded = load_file(str(source))

    assert loaded.size == 0
    assert loaded.state.line_count == 0
    assert loaded.state.cursor == 1


def test_load_missing_file_is_open_failure(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as excinfo:
        load_file(str(tmp_path / "missing.txt"))
    assert excinfo.value.kind is ErrorKind.FILE_OPEN_FAILURE


def test_load_directory_is_open_failure(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as excinfo:
        load_file(str(tmp_path))
    assert excinfo.value.kind is ErrorKind.FILE_OPEN_FAILURE


def test_load_invalid_utf8_is_read_failure(tmp_path: Path) -> None:
    source = tmp_path / "binary.bin"
    source.write_bytes(b"\xff\xfe\x00oops")

    with pytest.raises(FileAccessError) as excinfo:
        load_file(str(source))
    assert excinfo.value.kind is ErrorKind.FILE_READ_FAILURE


def test_render_lines_always_ends_with_newline() -> None:
    assert render_lines(["a", "b"]) == b"a\nb\n"
    assert render_lines([""]) == b"\n"


def test_write_lines_returns_byte_count(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    written = write_lines(str(target), ["é", "x"])

    assert written == 5
    assert target.read_bytes() == "é\nx\n".encode("utf-8")


def test_write_into_directory_is_open_failure(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as excinfo:
        write_lines(str(tmp_path), ["a"])
    assert excinfo.value.kind is ErrorKind.FILE_OPEN_FAILURE


def test_nul_byte_in_path_is_open_failure() -> None:
    for operation in (load_file, lambda path: write_lines(path, ["a"])):
        with pytest.raises(FileAccessError) as excinfo:
            operation("a\x00b")
        assert excinfo.value.kind is ErrorKind.FILE_OPEN_FAILURE


def test_nul_byte_path_is_reported_and_session_continues(
    capsys: pytest.CaptureFixture[str],
) -> None:
    editor = Editor.from_lines(["a"])

    cli.run(editor, io.BytesIO(b"w a\x00b\ne a\x00b\n1p\n"))

    assert capsys.readouterr().out == "?\n?\na\n"
    assert editor.lines == ("a",)
    assert editor.default_path is None


def test_write_round_trip_adds_trailing_newline(tmp_path: Path) -> None:
    for content in (b"a\nb\nc", b"a\nb\nc\n"):
        source = tmp_path / "source.txt"
        source.write_bytes(content)
        editor, outputs = open_editor(source)

        editor.interpret("w")

        assert source.read_bytes() == b"a\nb\nc\n"
        assert outputs == [str(len(content)), "6"]


def test_write_range_to_explicit_path_updates_default(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_bytes(b"a\nb\nc\n")
    part = tmp_path / "part.txt"
    editor, outputs = open_editor(source)

    result = editor.interpret(f"2,3w {part}")

    assert result.status == "command_write"
    assert result.message == str(part)
    assert part.read_bytes() == b"b\nc\n"
    assert editor.default_path == str(part)
    assert outputs[-1] == "4"
    assert editor.cursor == 3

    editor.interpret("1w")
    assert part.read_bytes() == b"a\n"
    assert source.read_bytes() == b"a\nb\nc\n"


def test_write_without_any_path_fails() -> None:
    outputs: List[object] = []
    editor = Editor.from_lines(["a"], output=outputs.append)

    with pytest.raises(AddressError) as excinfo:
        editor.interpret("w")

    assert excinfo.value.kind is ErrorKind.MISSING_WRITE_PATH
    assert outputs == []
    assert editor.default_path is None


def test_write_failure_keeps_default_path(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_bytes(b"a\n")
    editor, _ = open_editor(source)

    with pytest.raises(FileAccessError):
        editor.interpret(f"w {tmp_path / 'missing-dir' / 'out.txt'}")

    assert editor.default_path == str(source)


def test_write_of_edited_buffer(tmp_path: Path) -> None:
    target = tmp_path / "new.txt"
    editor = Editor.from_lines(["a", "b"], path=str(target), output=lambda _: None)

    for line in ("1d", "a", "c", ".", "w"):
        editor.interpret(line)

    assert target.read_bytes() == b"b\nc\n"


def test_edit_replaces_buffer_and_discards_changes(tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    first.write_bytes(b"a\nb\n")
    second = tmp_path / "second.txt"
    second.write_bytes(b"x\ny\nz\n")
    editor, outputs = open_editor(first)

    editor.interpret("1d")
    result = editor.interpret(f"e {second}")

    assert result.status == "command_edit"
    assert result.message == str(second)
    assert editor.lines == ("x", "y", "z")
    assert editor.cursor == 3
    assert editor.default_path == str(second)
    assert editor.mode == "command"
    assert outputs == ["4", "6"]


def test_bare_edit_reloads_default_file(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_bytes(b"a\nb\n")
    editor, _ = open_editor(source)

    editor.interpret("1,$d")
    editor.interpret("e")

    assert editor.lines == ("a", "b")
    assert editor.cursor == 2


def test_edit_without_any_path_fails() -> None:
    editor = Editor.from_lines(["a"], output=lambda _: None)

    with pytest.raises(ConfigurationError) as excinfo:
        editor.interpret("e")

    assert excinfo.value.kind is ErrorKind.MISSING_FILE_PATH
    assert editor.lines == ("a",)


def test_failed_edit_keeps_current_state(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_bytes(b"a\nb\n")
    editor, _ = open_editor(source)
    editor.interpret("1p")

    with pytest.raises(FileAccessError) as excinfo:
        editor.interpret(f"e {tmp_path / 'missing.txt'}")

    assert excinfo.value.kind is ErrorKind.FILE_OPEN_FAILURE
    assert editor.lines == ("a", "b")
    assert editor.cursor == 2
    assert editor.default_path == str(source)
