"""Telemetry protocols consumed by LED effects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from .snapshot import RacingFlags


class Moment(Protocol):
    """One telemetry sample of the running game.

    Every getter may return None when the game does not report the value;
    effects leave their state untouched for that tick.
    """

    def flags(self) -> Optional[RacingFlags]:
        """Racing flags currently waved at the driver."""
        ...

    def vehicle_engine_rotation_speed(self) -> Optional[float]:
        """Engine RPM."""
        ...

    def vehicle_max_engine_rotation_speed(self) -> Optional[float]:
        """Maximum engine RPM (redline)."""
        ...

    def vehicle_gear(self) -> Optional[int]:
        ...

    def is_starter_on(self) -> Optional[bool]:
        ...
