"""RPM gradient bar effect."""

import logging
from collections.abc import Iterator

from simleds.models import RpmContainer
from simleds.telemetry import Moment, is_last_gear, redline_reached

from ..base import OFF, Clock, LedConfiguration, LedEffect, LedGroup, default_clock
from ..blink import BlinkPhase, BlinkStateMachine, BlinkTimings
from ..gradient import LinearGradient, fraction_of_range, leds_to_turn_on

logger = logging.getLogger(__name__)


class RpmGradientEffect(LedEffect):
    """A bar that fills with engine RPM and shades from start to end color.

    The fill is measured either in percent of the maximum RPM
    (``use_percent``) or in absolute RPM. At the redline the whole bar
    blinks when blinking is enabled.
    """

    def __init__(self, container: RpmContainer, start_position: int, clock: Clock = default_clock):
        self.container = container
        self._gradient = LinearGradient(
            container.start_color, container.end_color, 0, container.led_count - 1
        )
        self._state = LedGroup.all_off(start_position, container.led_count)
        self._blink = BlinkStateMachine(BlinkTimings.single(container.blink_delay), clock)

    def leds_to_turn_on(self, rpm: float, max_rpm: float) -> int:
        c = self.container
        if c.use_percent:
            fraction = fraction_of_range(rpm * 100 / max_rpm, c.percent_min, c.percent_max)
        else:
            fraction = fraction_of_range(rpm, c.rpm_min, c.rpm_max)
        return leds_to_turn_on(fraction, c.led_count)

    def _should_blink(self, moment: Moment) -> bool:
        c = self.container
        return (
            c.blink_enabled
            and (c.blink_on_last_gear or not is_last_gear(moment))
            and redline_reached(moment)
        )

    def update(self, moment: Moment) -> None:
        rpm = moment.vehicle_engine_rotation_speed()
        max_rpm = moment.vehicle_max_engine_rotation_speed()
        if rpm is None or max_rpm is None:
            return
        if self.container.use_percent and max_rpm <= 0:
            logger.debug("Ignoring moment with a non-positive max RPM")
            return

        phase = self._blink.update(self._should_blink(moment)).phase
        lit_count = self.leds_to_turn_on(rpm, max_rpm)
        led_count = self.container.led_count
        gradient_on_all = self.container.gradient_on_all
        fill_all = gradient_on_all and self.container.fill_all_leds

        indices = range(led_count)
        if self.container.right_to_left:
            indices = reversed(indices)

        for i, index in enumerate(indices):
            if phase is BlinkPhase.LEDS_TURNED_OFF:
                enabled = False
            elif phase is BlinkPhase.LEDS_TURNED_ON:
                enabled = True
            else:
                enabled = fill_all or i < lit_count

            if enabled:
                color = self._gradient.at(lit_count if gradient_on_all else i)
                self._state.set(index, LedConfiguration.on(color))
            else:
                self._state.set(index, OFF)

    def leds(self) -> Iterator[LedGroup]:
        yield self._state

    def disable(self) -> None:
        self._blink.reset()
        self._state.turn_off()

    def start_led(self) -> int:
        return self._state.start_position

    def description(self) -> str:
        return self.container.description or "RPM gradient"

    def led_count(self) -> int:
        return len(self._state)
