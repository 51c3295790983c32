"""Telemetry protocol, snapshot models and derived conditions."""

from .helpers import (
    LAST_GEAR,
    REDLINE_TOLERANCE,
    is_engine_running,
    is_last_gear,
    redline_reached,
    redline_rpm,
    rpm_percentage,
)
from .protocols import Moment
from .replay import read_telemetry
from .snapshot import RacingFlags, TelemetrySnapshot

__all__ = [
    "LAST_GEAR",
    "REDLINE_TOLERANCE",
    "Moment",
    "RacingFlags",
    "TelemetrySnapshot",
    "is_engine_running",
    "is_last_gear",
    "read_telemetry",
    "redline_reached",
    "redline_rpm",
    "rpm_percentage",
]
