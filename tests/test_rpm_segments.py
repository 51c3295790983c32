"""Tests for the RPM segments effect."""

import pytest

from simleds.effects import OFF, LedConfiguration, RpmSegmentsEffect, SegmentEffect
from simleds.models import Color, RpmMode, RpmSegmentsContainer
from simleds.telemetry import TelemetrySnapshot


def on(color):
    return LedConfiguration.on(Color.parse(color))


def segments_container(**overrides):
    fields = {
        "ContainerType": "RPMSegmentsContainer",
        "StartPosition": 1,
        "BlinkEnabled": True,
        "BlinkDelay": 125,
        "BlinkOnLastGear": True,
        "RpmMode": 0,
        "Segments": [
            {"StartValue": 70, "NormalColor": "Lime", "BlinkingColor": "Blue", "LedCount": 5},
            {"StartValue": 85, "NormalColor": "Red", "UseBlinkingColor": False, "LedCount": 5},
            {"StartValue": 90, "NormalColor": "Blue", "BlinkingColor": "Blue", "LedCount": 5},
        ],
    }
    fields.update(overrides)
    return RpmSegmentsContainer.model_validate(fields)


def leds_at(effect, rpm, max_rpm=9000):
    effect.update(TelemetrySnapshot(rpm=rpm, max_rpm=max_rpm))
    return [led for group in effect.leds() for led in group]


class TestRpmSegmentsEffect:
    """Test segment thresholds and redline blinking."""

    @pytest.mark.unit
    def test_layout(self, clock):
        effect = RpmSegmentsEffect(segments_container(), 2, clock)
        assert [group.start_position for group in effect.leds()] == [2, 7, 12]
        assert effect.led_count() == 15
        assert effect.start_led() == 2
        assert all(isinstance(child, SegmentEffect) for child in effect.children())

    @pytest.mark.unit
    def test_percentage_thresholds(self, clock):
        effect = RpmSegmentsEffect(segments_container(), 1, clock)

        assert leds_at(effect, 5000) == [OFF] * 15
        assert leds_at(effect, 6300) == [on("Lime")] * 5 + [OFF] * 10
        assert leds_at(effect, 7650) == [on("Lime")] * 5 + [on("Red")] * 5 + [OFF] * 5
        assert leds_at(effect, 8100) == [on("Lime")] * 5 + [on("Red")] * 5 + [on("Blue")] * 5

    @pytest.mark.unit
    def test_redline_blink(self, clock):
        """Test blink colors at the redline, then off, then back on."""
        effect = RpmSegmentsEffect(segments_container(), 1, clock)
        blinking = [on("Blue")] * 5 + [on("Red")] * 5 + [on("Blue")] * 5

        assert leds_at(effect, 8910) == blinking

        clock.advance(125)
        assert leds_at(effect, 8910) == [OFF] * 15

        clock.advance(125)
        assert leds_at(effect, 8910) == blinking

        effect.disable()
        assert [led for group in effect.leds() for led in group] == [OFF] * 15

    @pytest.mark.unit
    def test_absolute_mode(self, clock):
        container = segments_container(
            RpmMode=2,
            Segments=[
                {"StartValue": 5000, "NormalColor": "Lime", "LedCount": 3},
                {"StartValue": 8000, "NormalColor": "Blue", "LedCount": 3},
            ],
        )
        effect = RpmSegmentsEffect(container, 1, clock)
        assert [group.start_position for group in effect.leds()] == [1, 4]

        assert leds_at(effect, 4999) == [OFF] * 6
        assert leds_at(effect, 5000) == [on("Lime")] * 3 + [OFF] * 3
        assert leds_at(effect, 8000, max_rpm=12000) == [on("Lime")] * 3 + [on("Blue")] * 3

    @pytest.mark.unit
    def test_redline_percentage_mode(self, clock):
        container = segments_container(RpmMode=1)
        effect = RpmSegmentsEffect(container, 1, clock)
        assert effect.container.rpm_mode is RpmMode.REDLINE_PERCENTAGE
        assert leds_at(effect, 6300) == [on("Lime")] * 5 + [OFF] * 10

    @pytest.mark.unit
    def test_missing_max_rpm_keeps_state(self, clock):
        effect = RpmSegmentsEffect(segments_container(), 1, clock)
        before = leds_at(effect, 6300)

        assert leds_at(effect, 8100, max_rpm=None) == before

    @pytest.mark.unit
    def test_blinking_disabled(self, clock):
        effect = RpmSegmentsEffect(segments_container(BlinkEnabled=False), 1, clock)

        leds_at(effect, 8910)
        clock.advance(125)
        assert leds_at(effect, 8910) == [on("Lime")] * 5 + [on("Red")] * 5 + [on("Blue")] * 5
