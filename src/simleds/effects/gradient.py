"""Linear color gradients and threshold arithmetic for bar effects."""

import math

from simleds.models import Color


class LinearGradient:
    """Two-color gradient over a numeric domain.

    Positions outside the domain are clamped to its ends.

    Example:
        >>> gradient = LinearGradient(Color.parse("Lime"), Color.parse("Red"), 0, 4)
        >>> gradient.at(1)
        Color(r=64, g=191, b=0)
    """

    def __init__(self, start: Color, end: Color, domain_min: float, domain_max: float):
        self.start = start
        self.end = end
        self.domain_min = domain_min
        self.domain_max = domain_max

    def at(self, position: float) -> Color:
        span = self.domain_max - self.domain_min
        if span <= 0:
            return self.start
        t = (position - self.domain_min) / span
        return self.start.lerp(self.end, t)


def fraction_of_range(value: float, minimum: float, maximum: float) -> float:
    """Where ``value`` sits between ``minimum`` and ``maximum``, unclamped.

    An empty range yields +/- infinity (or NaN for a value right on it).
    """
    span = maximum - minimum
    if span == 0:
        if value == minimum:
            return math.nan
        return math.copysign(math.inf, value - minimum)
    return (value - minimum) / span


def leds_to_turn_on(fraction: float, led_count: int) -> int:
    """Number of lit LEDs for a fill fraction, floored and not clamped."""
    scaled = fraction * led_count
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return led_count if scaled > 0 else 0
    return math.floor(scaled)
