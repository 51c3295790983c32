"""Run loop driving an effect tree from telemetry."""

import logging
import time
from collections.abc import Callable, Iterable
from typing import Optional

from simleds.devices import LedSink
from simleds.effects import EffectGroup, LedEffect
from simleds.effects.base import Clock, default_clock
from simleds.models import LedProfile
from simleds.telemetry import Moment

logger = logging.getLogger(__name__)


class LedEngine:
    """
    Pushes the LED state of an effect tree to a sink, one moment at a time.

    For every moment the root effect is updated once, then each of its LED
    groups is applied to the sink and the sink is committed. Nothing runs
    between moments; blink timing advances only when a moment arrives.
    """

    def __init__(self, root: LedEffect, sink: LedSink):
        """
        Initialize the engine.

        Args:
            root: Root of the effect tree, built once per profile
            sink: Where LED values are written
        """
        self.root = root
        self.sink = sink
        self.frames = 0

    @classmethod
    def from_profile(
        cls, profile: LedProfile, sink: LedSink, clock: Clock = default_clock
    ) -> "LedEngine":
        return cls(EffectGroup.root(profile, clock), sink)

    def push(self) -> None:
        """Write the current LED state of the tree to the sink."""
        for group in self.root.leds():
            self.sink.apply(group.start_position, group.leds)
        self.sink.commit()

    def process(self, moment: Moment) -> None:
        """Update the tree from one moment and push the result."""
        self.root.update(moment)
        self.push()
        self.frames += 1

    def run(
        self,
        moments: Iterable[Moment],
        interval: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        max_frames: Optional[int] = None,
    ) -> int:
        """
        Process moments until the source is exhausted.

        Args:
            moments: Telemetry source, e.g. a live reader or a recording
            interval: Seconds to wait after each moment (0 = no wait)
            sleep: Sleep function, replaceable in tests
            max_frames: Stop after this many moments

        Returns:
            Number of moments processed
        """
        logger.info(f"LED engine started: {self.root.led_count()} LEDs")
        processed = 0
        try:
            for moment in moments:
                self.process(moment)
                processed += 1
                if max_frames is not None and processed >= max_frames:
                    break
                if interval > 0:
                    sleep(interval)
        finally:
            logger.info(f"LED engine stopped after {processed} moments")
        return processed

    def shutdown(self) -> None:
        """Disable every effect and push the dark strip."""
        self.root.disable()
        self.push()
        logger.debug("All LEDs turned off")
