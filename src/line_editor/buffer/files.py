"""Reading buffers from disk and writing line ranges back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Sequence, cast

from line_editor.errors import ErrorKind, FileAccessError
from line_editor.runtime import telemetry

from .document import LineBuffer
from .state import EditorState

ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class LoadedFile:
    path: str
    state: EditorState
    size: int


def _open(path: str, mode: str) -> BinaryIO:
    # Embedded NUL bytes surface as ValueError rather than OSError.
    try:
        return cast(BinaryIO, open(path, mode))
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise FileAccessError(
            ErrorKind.FILE_OPEN_FAILURE, f"cannot open {path!r}: {reason}"
        ) from exc


def load_file(path: str) -> LoadedFile:
    """Read ``path`` into a fresh :class:`EditorState` without touching any other."""

    handle = _open(path, "rb")

    try:
        with handle:
            raw = handle.read()
    except OSError as exc:
        raise FileAccessError(
            ErrorKind.FILE_READ_FAILURE, f"cannot read '{path}': {exc.strerror}"
        ) from exc

    try:
        text = raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise FileAccessError(
            ErrorKind.FILE_READ_FAILURE, f"'{path}' is not valid {ENCODING}"
        ) from exc

    buffer = LineBuffer.from_text(text)
    telemetry.record_event(
        "editor.load",
        data={"path": path, "bytes": len(raw), "lines": buffer.line_count},
    )
    return LoadedFile(
        path=path, state=EditorState.loaded(buffer, path=path), size=len(raw)
    )


def render_lines(lines: Sequence[str]) -> bytes:
    """Join ``lines`` with newlines, always ending in one."""

    text = "\n".join(lines)
    if not text.endswith("\n"):
        text += "\n"
    return text.encode(ENCODING)


def write_lines(path: str, lines: Sequence[str]) -> int:
    """Write ``lines`` to ``path`` and return the number of bytes written."""

    payload = render_lines(lines)
    handle = _open(path, "wb")

    try:
        with handle:
            handle.write(payload)
    except OSError as exc:
        raise FileAccessError(
            ErrorKind.FILE_WRITE_FAILURE, f"cannot write '{path}': {exc.strerror}"
        ) from exc

    telemetry.record_event(
        "editor.write", data={"path": path, "bytes": len(payload), "lines": len(lines)}
    )
    return len(payload)


__all__ = ["ENCODING", "LoadedFile", "load_file", "render_lines", "write_lines"]
