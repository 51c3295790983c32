"""LED output protocols."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from simleds.effects import LedConfiguration


class LedSink(Protocol):
    """Protocol for LED strip outputs.

    The engine applies every LedGroup of the effect tree and then commits
    once per telemetry moment. Transport errors are the sink's concern.
    """

    def apply(self, start_position: int, leds: Sequence[LedConfiguration]) -> None:
        """
        Write a run of LED values.

        Args:
            start_position: 1-based position of the first value
            leds: Values in physical order; LEDs past the strip end are ignored
        """
        ...

    def commit(self) -> None:
        """Push everything applied since the last commit to the hardware."""
        ...
