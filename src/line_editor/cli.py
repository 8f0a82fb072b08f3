"""Command-line entry point: argument handling and the stdin read loop."""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional, Sequence

from line_editor.buffer.files import ENCODING
from line_editor.config import parse_config
from line_editor.editor import Editor
from line_editor.errors import (
    ConfigurationError,
    EditorError,
    ErrorKind,
    FileAccessError,
)
from line_editor.runtime import telemetry

ERROR_MARKER = "?"


def decode_line(raw: bytes) -> str:
    """Strip the trailing newline from one raw stdin line and decode it."""

    if raw.endswith(b"\n"):
        raw = raw[:-1]
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise FileAccessError(
            ErrorKind.FILE_READ_FAILURE, f"input line is not valid {ENCODING}"
        ) from exc


def report_error(error: EditorError, *, debug: bool) -> None:
    print(ERROR_MARKER)
    telemetry.record_event(
        "command.error",
        level="warning",
        data={"kind": error.kind.value, "detail": str(error)},
    )
    if debug:
        print(f"error: {error.describe()}", file=sys.stderr)


def run(editor: Editor, stream: BinaryIO, *, debug: bool = False) -> None:
    """Feed ``stream`` to ``editor`` line by line until end of input."""

    while True:
        raw = stream.readline()
        if not raw:
            break
        try:
            editor.interpret(decode_line(raw))
        except EditorError as exc:
            report_error(exc, debug=debug)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = parse_config(argv)
    except ConfigurationError as exc:
        print(f"line-editor: {exc.describe()}", file=sys.stderr)
        return 1

    if config.debug:
        telemetry.configure(preset="debug")

    try:
        editor = Editor.open(config.path) if config.path else Editor()
    except FileAccessError as exc:
        print(f"line-editor: {exc.describe()}", file=sys.stderr)
        return 1

    run(editor, sys.stdin.buffer, debug=config.debug)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
