"""Core effect abstractions: LED values, LED groups and the effect interface."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from simleds.models import Color
from simleds.telemetry import Moment

Clock = Callable[[], int]
"""Returns the current instant in integer nanoseconds, e.g. ``time.monotonic_ns``."""

default_clock: Clock = time.monotonic_ns


def to_nanoseconds(delta: timedelta) -> int:
    """Exact length of a duration in clock units."""
    return (delta // timedelta(microseconds=1)) * 1_000


@dataclass(frozen=True)
class LedConfiguration:
    """The value of a single LED: on with a color, or off."""

    color: Optional[Color] = None

    @classmethod
    def on(cls, color: Color) -> "LedConfiguration":
        return cls(color=color)

    @classmethod
    def off(cls) -> "LedConfiguration":
        return OFF

    @property
    def is_on(self) -> bool:
        return self.color is not None

    def __repr__(self) -> str:
        return f"On({self.color.to_hex()})" if self.color is not None else "Off"


OFF = LedConfiguration()


class LedGroup:
    """A positioned, fixed-length run of LED values.

    The start position is 1-based and fixed; individual values are
    replaced in place as effects update.
    """

    __slots__ = ("_start_position", "_leds")

    def __init__(self, start_position: int, leds: Iterable[LedConfiguration]):
        if start_position < 1:
            raise ValueError(f"start position must be at least 1, got {start_position}")
        self._start_position = start_position
        self._leds = list(leds)
        if not self._leds:
            raise ValueError("an LED group needs at least one LED")

    @classmethod
    def with_color(cls, color: Color, start_position: int, led_count: int) -> "LedGroup":
        """All LEDs on with the same color."""
        return cls(start_position, [LedConfiguration.on(color)] * led_count)

    @classmethod
    def all_off(cls, start_position: int, led_count: int) -> "LedGroup":
        return cls(start_position, [OFF] * led_count)

    @property
    def start_position(self) -> int:
        return self._start_position

    @property
    def leds(self) -> tuple[LedConfiguration, ...]:
        return tuple(self._leds)

    def set(self, index: int, value: LedConfiguration) -> None:
        """Replace the value of the LED at 0-based ``index`` within the group."""
        self._leds[index] = value

    def turn_off(self) -> None:
        self._leds = [OFF] * len(self._leds)

    def __len__(self) -> int:
        return len(self._leds)

    def __iter__(self) -> Iterator[LedConfiguration]:
        return iter(self._leds)

    def __getitem__(self, index: int) -> LedConfiguration:
        return self._leds[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LedGroup):
            return NotImplemented
        return self._start_position == other._start_position and self._leds == other._leds

    def __repr__(self) -> str:
        return f"LedGroup(start_position={self._start_position}, leds={self._leds!r})"


class LedEffect(ABC):
    """A node of the effect tree.

    The run loop calls ``update`` once per telemetry moment and then reads
    ``leds``. Effects never read the clock outside ``update``.
    """

    @abstractmethod
    def leds(self) -> Iterator[LedGroup]:
        """The current LED groups of this effect, in physical order."""

    @abstractmethod
    def update(self, moment: Moment) -> None:
        """Advance the effect state from a telemetry moment."""

    @abstractmethod
    def disable(self) -> None:
        """Reset the effect so that all of its LEDs are off."""

    @abstractmethod
    def start_led(self) -> int:
        """1-based position of the first LED of this effect."""

    @abstractmethod
    def description(self) -> str:
        ...

    def led_count(self) -> int:
        return sum(len(group) for group in self.leds())

    def children(self) -> tuple["LedEffect", ...]:
        """Child effects, for effects that own other effects."""
        return ()
