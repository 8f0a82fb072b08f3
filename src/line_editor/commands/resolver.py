"""Map parsed commands onto validated buffer line ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from line_editor.errors import AddressError, ErrorKind
from line_editor.runtime.telemetry import span

from .models import Command, CommandKind


@dataclass(frozen=True, slots=True)
class LineRange:
    """Inclusive, 1-based ``start..end`` pair already checked against a buffer."""

    start: int
    end: int

    @property
    def indices(self) -> slice:
        """Equivalent 0-based slice into the line list."""

        return slice(self.start - 1, self.end)

    def __len__(self) -> int:
        return self.end - self.start + 1


def default_bounds(kind: CommandKind, line_count: int, cursor: int) -> tuple[int, int]:
    if kind is CommandKind.PRINT_AND_SET:
        return cursor + 1, cursor + 1
    if kind is CommandKind.WRITE:
        return 1, line_count
    return cursor, cursor


def resolve_range(
    command: Command, line_count: int, cursor: int
) -> Optional[LineRange]:
    """Return the validated range for ``command`` or ``None`` when it needs none.

    Endpoints must lie within ``1..line_count``. A reversed range
    (``start > end``) is rejected with ``OutOfBoundsAddress`` as well.
    """

    if command.kind is CommandKind.EDIT:
        return None

    with span(
        "commands::resolve",
        component="commands",
        metadata={"kind": command.kind.name, "lines": line_count, "cursor": cursor},
    ) as handle:
        address = command.address
        if address is None:
            start, end = default_bounds(command.kind, line_count, cursor)
        else:
            start = address.start.resolve(line_count)
            end_token = address.end or address.start
            end = end_token.resolve(line_count)

        for endpoint in (start, end):
            if not 1 <= endpoint <= line_count:
                raise AddressError(
                    ErrorKind.OUT_OF_BOUNDS_ADDRESS,
                    f"line {endpoint} outside 1..{line_count}",
                )
        if start > end:
            raise AddressError(
                ErrorKind.OUT_OF_BOUNDS_ADDRESS,
                f"reversed range {start},{end}",
            )

        handle.add_metadata("range", f"{start},{end}")
        return LineRange(start=start, end=end)


__all__ = ["LineRange", "default_bounds", "resolve_range"]
