"""Runtime services (telemetry) for the outer layers of linebuf."""

from . import telemetry

__all__ = ["telemetry"]
