"""RPM segments effect: consecutive blocks lighting at RPM thresholds."""

from collections.abc import Iterator
from typing import Optional

from simleds.models import LedSegment, RpmMode, RpmSegmentsContainer
from simleds.telemetry import Moment, is_last_gear, redline_reached, redline_rpm, rpm_percentage

from ..base import Clock, LedEffect, LedGroup, default_clock
from ..blink import BlinkPhase, BlinkStateMachine, BlinkTimings
from ..groups import AlwaysOn, EffectGroup


def threshold_value(mode: RpmMode, moment: Moment) -> Optional[float]:
    """The current engine speed in the unit of ``mode``, None when unknown."""
    rpm = moment.vehicle_engine_rotation_speed()
    if rpm is None:
        return None
    if mode is RpmMode.RPM:
        return rpm
    if mode is RpmMode.RPM_PERCENTAGE:
        return rpm_percentage(moment)
    redline = redline_rpm(moment)
    if not redline:
        return None
    return rpm * 100 / redline


class SegmentEffect(LedEffect):
    """One segment: on once its threshold is reached, blinking at the redline."""

    def __init__(
        self,
        segment: LedSegment,
        mode: RpmMode,
        start_position: int,
        blink: Optional[BlinkStateMachine] = None,
        blink_on_last_gear: bool = False,
    ):
        self.segment = segment
        self.mode = mode
        self.enabled = False
        self._blink = blink
        self._blink_on_last_gear = blink_on_last_gear
        self._on_leds = LedGroup.with_color(segment.normal_color, start_position, segment.led_count)
        self._off_leds = LedGroup.all_off(start_position, segment.led_count)
        self._blink_leds: Optional[LedGroup] = None
        if segment.blink_color is not None:
            self._blink_leds = LedGroup.with_color(
                segment.blink_color, start_position, segment.led_count
            )

    def update(self, moment: Moment) -> None:
        value = threshold_value(self.mode, moment)
        if value is None:
            return
        self.enabled = value >= self.segment.start_value
        if self._blink is not None:
            self._blink.update(
                redline_reached(moment)
                and (self._blink_on_last_gear or not is_last_gear(moment))
            )

    def leds(self) -> Iterator[LedGroup]:
        if not self.enabled:
            yield self._off_leds
        elif self._blink is None:
            yield self._on_leds
        else:
            phase = self._blink.state.phase
            if phase is BlinkPhase.LEDS_TURNED_OFF:
                yield self._off_leds
            elif phase is BlinkPhase.LEDS_TURNED_ON and self._blink_leds is not None:
                yield self._blink_leds
            else:
                yield self._on_leds

    def disable(self) -> None:
        self.enabled = False
        if self._blink is not None:
            self._blink.reset()

    def start_led(self) -> int:
        return self._on_leds.start_position

    def description(self) -> str:
        return f"Segment from {self.segment.start_value:g}"

    def led_count(self) -> int:
        return len(self._on_leds)


class RpmSegmentsEffect(LedEffect):
    """Segments placed left to right from the container start position.

    Each segment blinks on its own machine, all driven by the redline.
    """

    def __init__(
        self,
        container: RpmSegmentsContainer,
        start_position: int,
        clock: Clock = default_clock,
    ):
        self.container = container
        segments = []
        cursor = start_position
        for segment in container.segments:
            blink = None
            if container.blink_enabled:
                blink = BlinkStateMachine(BlinkTimings.single(container.blink_delay), clock)
            effect = SegmentEffect(
                segment,
                container.rpm_mode,
                cursor,
                blink=blink,
                blink_on_last_gear=container.blink_on_last_gear,
            )
            cursor += effect.led_count()
            segments.append(effect)
        self._group = EffectGroup(start_position, segments, AlwaysOn(), description=self.description())

    def update(self, moment: Moment) -> None:
        self._group.update(moment)

    def leds(self) -> Iterator[LedGroup]:
        return self._group.leds()

    def disable(self) -> None:
        self._group.disable()

    def start_led(self) -> int:
        return self._group.start_led()

    def description(self) -> str:
        return self.container.description or "RPM segments"

    def children(self) -> tuple[LedEffect, ...]:
        return self._group.children()
