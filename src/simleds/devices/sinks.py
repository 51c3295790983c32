"""In-memory and console LED sinks."""

import logging
from collections.abc import Callable, Sequence
from typing import Optional

import click

from simleds.effects import LedConfiguration
from simleds.models import Color

logger = logging.getLogger(__name__)


class BufferSink:
    """A framebuffer of ``led_count`` LEDs.

    Regions are written with 1-based start positions; values past the end
    of the strip are dropped, as a real strip would.
    """

    def __init__(self, led_count: int):
        if led_count < 1:
            raise ValueError(f"led_count must be at least 1, got {led_count}")
        self.led_count = led_count
        self.frames = 0
        self._leds: list[Optional[Color]] = [None] * led_count

    def apply(self, start_position: int, leds: Sequence[LedConfiguration]) -> None:
        offset = start_position - 1
        for index, value in enumerate(leds, start=offset):
            if index >= self.led_count:
                break
            self._leds[index] = value.color

    def commit(self) -> None:
        self.frames += 1

    def turn_off(self) -> None:
        self._leds = [None] * self.led_count

    @property
    def leds(self) -> tuple[Optional[Color], ...]:
        """Current colors, None for LEDs that are off."""
        return tuple(self._leds)


class ConsoleSink(BufferSink):
    """Renders the strip as a line of colored dots on every commit."""

    ON_SYMBOL = "●"
    OFF_SYMBOL = "·"

    def __init__(self, led_count: int, echo: Callable[[str], None] = click.echo, color: bool = True):
        super().__init__(led_count)
        self._echo = echo
        self._color = color

    def render(self) -> str:
        cells = []
        for value in self.leds:
            if value is None:
                cells.append(self.OFF_SYMBOL)
            elif self._color:
                cells.append(click.style(self.ON_SYMBOL, fg=value.to_rgb_tuple()))
            else:
                cells.append(self.ON_SYMBOL)
        return "".join(cells)

    def commit(self) -> None:
        super().commit()
        self._echo(f"{self.frames:>6} {self.render()}")
