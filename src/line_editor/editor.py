"""Editor facade wiring state, modes, and verb handlers together."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from line_editor.actions import COMMAND_HANDLERS
from line_editor.buffer import EditorState, LineBuffer, load_file
from line_editor.modes import CommandMode, InsertMode, ModeBus, ModeContext, ModeResult
from line_editor.modes.mode_manager import ModeManager

OutputSink = Callable[[object], None]


def _print_output(payload: object) -> None:
    print(payload)


class Editor:
    """One buffer, one cursor, and the Command/Insert state machine around them."""

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        output: Optional[OutputSink] = None,
    ) -> None:
        self.context = ModeContext(state=state or EditorState(), bus=ModeBus())
        self.context.bus.subscribe("output", output or _print_output)
        self.manager = ModeManager(self.context)
        self.manager.register_mode(CommandMode, handlers=COMMAND_HANDLERS)
        self.manager.register_mode(InsertMode)

    @classmethod
    def open(cls, path: str, *, output: Optional[OutputSink] = None) -> "Editor":
        """Load ``path`` and report its size in bytes through ``output``."""

        loaded = load_file(path)
        editor = cls(loaded.state, output=output)
        editor.context.bus.emit("output", str(loaded.size))
        return editor

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        *,
        path: Optional[str] = None,
        output: Optional[OutputSink] = None,
    ) -> "Editor":
        state = EditorState.loaded(LineBuffer.from_lines(lines), path=path)
        return cls(state, output=output)

    @property
    def state(self) -> EditorState:
        return self.context.state

    @property
    def mode(self) -> str:
        active = self.manager.active_mode
        return active.name if active else ""

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def lines(self) -> Sequence[str]:
        return self.state.buffer.snapshot()

    @property
    def default_path(self) -> Optional[str]:
        return self.state.default_path

    def interpret(self, line: str) -> ModeResult:
        """Feed one input line (newline already stripped) to the active mode.

        Raises :class:`line_editor.errors.EditorError` on failure; the editor
        state is left as it was before the line.
        """

        return self.manager.handle_line(line)


__all__ = ["Editor", "OutputSink"]
