"""Error kinds raised by the parser, resolver, editor, and CLI."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, FrozenSet


class ErrorKind(str, Enum):
    """Every failure the editor can report."""

    MULTIPLE_FILE_PATHS = "MultipleFilePaths"
    MISSING_FILE_PATH = "MissingFilePath"
    FILE_OPEN_FAILURE = "FileOpenFailure"
    FILE_READ_FAILURE = "FileReadFailure"
    FILE_WRITE_FAILURE = "FileWriteFailure"
    ADDRESS_PARSE_FAILURE = "AddressParseFailure"
    UNKNOWN_COMMAND = "UnknownCommand"
    MISSING_COMMAND_ARGUMENT = "MissingCommandArgument"
    EXPECTED_SEPARATOR = "ExpectedSeparator"
    EXTRA_TRAILING_CHARACTERS = "ExtraTrailingCharacters"
    OUT_OF_BOUNDS_ADDRESS = "OutOfBoundsAddress"
    MISSING_WRITE_PATH = "MissingWritePath"


class EditorError(RuntimeError):
    """Base class for recoverable (and startup-fatal) editor failures."""

    kinds: ClassVar[FrozenSet[ErrorKind]] = frozenset(ErrorKind)

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        if kind not in self.kinds:
            raise ValueError(f"{type(self).__name__} cannot carry '{kind.value}'")
        super().__init__(message or kind.value)
        self.kind = kind

    def describe(self) -> str:
        """Diagnostic line shown on stderr in debug mode."""

        return f"{self.kind.value}: {self}"


class ConfigurationError(EditorError):
    """Raised while interpreting startup arguments.

    Also raised at runtime by a bare ``e`` when no filename is remembered.
    """

    kinds = frozenset({ErrorKind.MULTIPLE_FILE_PATHS, ErrorKind.MISSING_FILE_PATH})


class FileAccessError(EditorError):
    """Raised when loading or writing a file fails."""

    kinds = frozenset(
        {
            ErrorKind.FILE_OPEN_FAILURE,
            ErrorKind.FILE_READ_FAILURE,
            ErrorKind.FILE_WRITE_FAILURE,
        }
    )


class CommandSyntaxError(EditorError):
    """Raised when a command line does not match the command grammar."""

    kinds = frozenset(
        {
            ErrorKind.ADDRESS_PARSE_FAILURE,
            ErrorKind.UNKNOWN_COMMAND,
            ErrorKind.MISSING_COMMAND_ARGUMENT,
            ErrorKind.EXPECTED_SEPARATOR,
            ErrorKind.EXTRA_TRAILING_CHARACTERS,
        }
    )


class AddressError(EditorError):
    """Raised when a parsed command cannot be applied to the current buffer."""

    kinds = frozenset({ErrorKind.OUT_OF_BOUNDS_ADDRESS, ErrorKind.MISSING_WRITE_PATH})


__all__ = [
    "ErrorKind",
    "EditorError",
    "ConfigurationError",
    "FileAccessError",
    "CommandSyntaxError",
    "AddressError",
]
