"""Telemetry services built on the standard ``logging`` package.

This module exposes a narrow surface area for the rest of the editor:

``configure(...)`` -- apply the environment settings or a named preset
``get_logger(name)`` -- fetch a logger under the ``line_editor`` hierarchy
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager timing a block and tagging its component

Settings are read from ``LINE_EDITOR_*`` environment variables:
``LOG_LEVEL`` (default ``WARNING``), ``LOG_FILE`` and ``LOG_CONSOLE``.
Standard output carries the editor protocol, so console records go to
standard error and only when ``LINE_EDITOR_LOG_CONSOLE`` is set.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

ENV_PREFIX = "LINE_EDITOR_"
ROOT_LOGGER_NAME = "line_editor"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_PRESETS = {"debug": logging.DEBUG}


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)!r}" for key, value in data.items())


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return number


def _build_handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    log_file = _env("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    if _env_flag("LOG_CONSOLE", False):
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(*, preset: Optional[str] = None) -> None:
    """(Re)install the handlers and level of the ``line_editor`` logger.

    Parameters
    ----------
    preset:
        Named preset (currently only ``"debug"``, which lowers the level to
        ``DEBUG``). Without one, ``LINE_EDITOR_LOG_LEVEL`` decides.
    """

    if preset is not None:
        try:
            level = _PRESETS[preset.lower()]
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
    else:
        level = _level_number(_env("LOG_LEVEL") or "WARNING")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in _build_handlers():
        root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER_NAME)


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit an ``event::<name>`` record carrying ``data`` as key=value pairs."""

    log = get_logger(f"{ROOT_LOGGER_NAME}.events")
    number = _level_number(level)
    if log.isEnabledFor(number):
        log.log(number, "event::%s %s", name, _format_pairs(data or {}))


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(self, level: int, message: str, **extra: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(extra)
        self.logger.log(level, "%s %s", message, _format_pairs(payload))

    def finish(self) -> None:
        elapsed = (time.perf_counter() - self.started) * 1000
        self._emit(logging.DEBUG, "span::done", elapsed_ms=f"{elapsed:.3f}")

    def fail(self, reason: str) -> None:
        self._emit(logging.WARNING, "span::fail", reason=reason)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and log it under its component.

    Parameters
    ----------
    name:
        Operation name recorded on every span record.
    component:
        If ``True`` use the span name as the component; if a string, use it
        as the component identifier and as the logger suffix.
    metadata:
        Values stringified into every record the span emits.
    """

    component_name = name if component is True else component or None
    suffix = component_name if isinstance(component, str) else "spans"
    handle = SpanHandle(
        logger=get_logger(f"{ROOT_LOGGER_NAME}.{suffix}"),
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )

    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    handle.finish()


configure()

__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
