"""Blink state machine and the flag/redline blink effect.

Blinking is evaluated only when ``update`` runs, so the visible cadence is
bounded by how often telemetry is polled.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional

from simleds.models import FlagColor, SimpleBlinkContainer
from simleds.telemetry import Moment, redline_reached

from .base import Clock, LedEffect, LedGroup, default_clock, to_nanoseconds

logger = logging.getLogger(__name__)


class BlinkPhase(str, Enum):
    NOT_BLINKING = "not_blinking"
    LEDS_TURNED_ON = "leds_turned_on"
    LEDS_TURNED_OFF = "leds_turned_off"


@dataclass(frozen=True)
class BlinkState:
    """Current blink phase and the instant it was entered."""

    phase: BlinkPhase = BlinkPhase.NOT_BLINKING
    since: Optional[int] = None

    @classmethod
    def not_blinking(cls) -> "BlinkState":
        return cls()

    @classmethod
    def turned_on(cls, now: int) -> "BlinkState":
        return cls(BlinkPhase.LEDS_TURNED_ON, now)

    @classmethod
    def turned_off(cls, now: int) -> "BlinkState":
        return cls(BlinkPhase.LEDS_TURNED_OFF, now)


@dataclass(frozen=True)
class BlinkTimings:
    """How long the LEDs stay on and off while blinking, in clock nanoseconds."""

    on_delay: int
    off_delay: int

    @classmethod
    def single(cls, delay: timedelta) -> "BlinkTimings":
        nanoseconds = to_nanoseconds(delay)
        return cls(on_delay=nanoseconds, off_delay=nanoseconds)

    @classmethod
    def double(cls, on_delay: timedelta, off_delay: timedelta) -> "BlinkTimings":
        return cls(on_delay=to_nanoseconds(on_delay), off_delay=to_nanoseconds(off_delay))

    @classmethod
    def for_container(cls, container: SimpleBlinkContainer) -> "BlinkTimings":
        if container.dual_blink_timing_enabled:
            return cls.double(container.on_delay, container.off_delay)
        return cls.single(container.blink_delay)


class BlinkStateMachine:
    """Alternates LEDs on and off while an input condition holds.

    Example:
        ```python
        blink = BlinkStateMachine(BlinkTimings.single(timedelta(milliseconds=50)))
        blink.update(True)   # LEDS_TURNED_ON
        # ... 50ms later
        blink.update(True)   # LEDS_TURNED_OFF
        blink.update(False)  # NOT_BLINKING
        ```
    """

    def __init__(self, timings: BlinkTimings, clock: Clock = default_clock):
        self.timings = timings
        self._clock = clock
        self._state = BlinkState.not_blinking()

    @property
    def state(self) -> BlinkState:
        return self._state

    def update(self, should_blink: bool) -> BlinkState:
        """Advance the machine from the current condition and return the new state."""
        if not should_blink:
            self._state = BlinkState.not_blinking()
            return self._state

        now = self._clock()
        state = self._state
        if state.phase is BlinkPhase.NOT_BLINKING:
            self._state = BlinkState.turned_on(now)
        elif state.phase is BlinkPhase.LEDS_TURNED_ON:
            if now - state.since >= self.timings.on_delay:
                self._state = BlinkState.turned_off(now)
        elif now - state.since >= self.timings.off_delay:
            self._state = BlinkState.turned_on(now)
        return self._state

    def reset(self) -> None:
        self._state = BlinkState.not_blinking()

    def is_lit(self, condition: bool) -> bool:
        """Whether LEDs driven by ``condition`` are visible in the current phase."""
        phase = self._state.phase
        if phase is BlinkPhase.NOT_BLINKING:
            return condition
        return phase is BlinkPhase.LEDS_TURNED_ON


Condition = Callable[[Moment], Optional[bool]]
"""Reads the driving condition from a moment, None when telemetry is missing."""


def flag_condition(flag: FlagColor) -> Condition:
    def condition(moment: Moment) -> Optional[bool]:
        flags = moment.flags()
        if flags is None:
            return None
        return getattr(flags, flag.value)

    return condition


def redline_condition(moment: Moment) -> Optional[bool]:
    if (
        moment.vehicle_engine_rotation_speed() is None
        or moment.vehicle_max_engine_rotation_speed() is None
    ):
        return None
    return redline_reached(moment)


class BlinkEffect(LedEffect):
    """A single-colored run of LEDs lit, or blinking, while a condition holds.

    Used for racing flags and the redline indicator. When the container
    disables blinking the LEDs simply follow the condition.
    """

    def __init__(
        self,
        condition: Condition,
        container: SimpleBlinkContainer,
        start_position: int,
        clock: Clock = default_clock,
        description: str = "",
    ):
        self._condition = condition
        self._description = description
        self._active = False
        self._on_leds = LedGroup.with_color(container.color, start_position, container.led_count)
        self._off_leds = LedGroup.all_off(start_position, container.led_count)
        self._blink: Optional[BlinkStateMachine] = None
        if container.blink_enabled:
            self._blink = BlinkStateMachine(BlinkTimings.for_container(container), clock)

    @classmethod
    def flag(
        cls,
        flag: FlagColor,
        container: SimpleBlinkContainer,
        start_position: int,
        clock: Clock = default_clock,
    ) -> "BlinkEffect":
        return cls(
            flag_condition(flag),
            container,
            start_position,
            clock,
            description=container.description or f"{flag.value.capitalize()} flag",
        )

    @classmethod
    def redline(
        cls,
        container: SimpleBlinkContainer,
        start_position: int,
        clock: Clock = default_clock,
    ) -> "BlinkEffect":
        return cls(
            redline_condition,
            container,
            start_position,
            clock,
            description=container.description or "Redline reached",
        )

    @property
    def blink(self) -> Optional[BlinkStateMachine]:
        return self._blink

    def update(self, moment: Moment) -> None:
        active = self._condition(moment)
        if active is None:
            return
        self._active = active
        if self._blink is not None:
            self._blink.update(active)

    def leds(self) -> Iterator[LedGroup]:
        if self._blink is None:
            lit = self._active
        else:
            lit = self._blink.is_lit(self._active)
        yield self._on_leds if lit else self._off_leds

    def disable(self) -> None:
        self._active = False
        if self._blink is not None:
            self._blink.reset()

    def start_led(self) -> int:
        return self._on_leds.start_position

    def description(self) -> str:
        return self._description

    def led_count(self) -> int:
        return len(self._on_leds)

