"""Runtime services (telemetry) shared by every editor layer."""

from . import telemetry

__all__ = ["telemetry"]
