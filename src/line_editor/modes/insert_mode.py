"""Insert mode: absorb raw lines into the buffer until a lone ``.``."""

from __future__ import annotations

from typing import MutableMapping, cast

from line_editor.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult

TERMINATOR = "."


def insert_session(context: ModeContext) -> MutableMapping[str, int]:
    """Per-session bookkeeping shared between the entering action and the mode.

    ``anchor`` is where the cursor lands when the session ends without input;
    ``entered`` counts the lines absorbed so far.
    """

    session = cast(
        MutableMapping[str, int], context.extras.setdefault("insert_session", {})
    )
    session.setdefault("anchor", context.state.cursor)
    session.setdefault("entered", 0)
    return session


class InsertMode(Mode):
    name = "insert"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("line_editor.modes.insert")

    def on_enter(self, previous: str | None) -> None:
        del previous
        insert_session(self.context)["entered"] = 0

    def handle_line(self, line: str) -> ModeResult:
        state = self.context.state
        session = insert_session(self.context)

        if line == TERMINATOR:
            entered = session["entered"]
            if entered:
                # last line entered
                state.set_cursor(state.cursor - 1)
            else:
                state.set_cursor(session["anchor"])
            self.logger.debug(f"insert finished after {entered} line(s)")
            return ModeResult(
                switch_to="command", status="insert_done", message=str(entered)
            )

        state.buffer.insert_line(state.cursor - 1, line)
        state.set_cursor(state.cursor + 1)
        session["entered"] += 1
        return ModeResult(status="inserted")
