"""Buffer storage, editor state, and file round-tripping."""

from .document import LineBuffer
from .files import LoadedFile, load_file, render_lines, write_lines
from .state import EditorState, initial_cursor

__all__ = [
    "EditorState",
    "LineBuffer",
    "LoadedFile",
    "initial_cursor",
    "load_file",
    "render_lines",
    "write_lines",
]
