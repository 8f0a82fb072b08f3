"""Command mode: parse, resolve, and execute one command per input line."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from line_editor.commands import Command, CommandKind, LineRange, parse_command
from line_editor.commands import resolve_range
from line_editor.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult

CommandHandler = Callable[[ModeContext, Command, Optional[LineRange]], ModeResult]


class CommandMode(Mode):
    name = "command"

    def __init__(
        self,
        context: ModeContext,
        *,
        handlers: Mapping[CommandKind, CommandHandler],
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("line_editor.modes.command")
        self._handlers = dict(handlers)

    def handle_line(self, line: str) -> ModeResult:
        with telemetry.span(
            "commands::parse", component="commands", metadata={"input": line}
        ):
            command = parse_command(line)

        handler = self._handlers.get(command.kind)
        if handler is None:
            raise KeyError(f"No handler registered for '{command.kind.name}'")

        state = self.context.state
        line_range = resolve_range(command, state.line_count, state.cursor)
        self.logger.debug(
            f"{command.kind.name} range={line_range} cursor={state.cursor}"
        )

        with telemetry.span(
            f"commands::{command.kind.name.lower()}",
            component="commands",
            metadata={"address": command.address or "", "range": line_range or ""},
        ):
            return handler(self.context, command, line_range)
