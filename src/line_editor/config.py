"""Startup configuration for the line editor."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from line_editor.errors import ConfigurationError, ErrorKind


@dataclass(frozen=True)
class EditorConfig:
    """Settings collected from the command line."""

    path: Optional[str] = None
    debug: bool = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-editor",
        description="Line-oriented text editor reading commands from stdin.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="FILE",
        help="File to load into the buffer (at most one)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Describe errors on stderr in addition to printing '?'",
    )
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> EditorConfig:
    args = _build_parser().parse_args(argv)
    if len(args.paths) > 1:
        raise ConfigurationError(
            ErrorKind.MULTIPLE_FILE_PATHS,
            f"expected at most one file, got {len(args.paths)}",
        )
    path = args.paths[0] if args.paths else None
    return EditorConfig(path=path, debug=args.debug)


__all__ = ["EditorConfig", "parse_config"]
