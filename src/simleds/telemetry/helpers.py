"""Derived telemetry conditions shared by the effects."""

from typing import Optional

from .protocols import Moment

REDLINE_TOLERANCE = 0.02
"""Fraction of the maximum RPM within which the redline counts as reached."""

LAST_GEAR = 6


def redline_reached(moment: Moment) -> bool:
    """True when the engine RPM is within 2% of the maximum RPM."""
    rpm = moment.vehicle_engine_rotation_speed()
    max_rpm = moment.vehicle_max_engine_rotation_speed()
    if rpm is None or max_rpm is None:
        return False
    return abs(max_rpm - rpm) < max_rpm * REDLINE_TOLERANCE


def is_engine_running(moment: Moment) -> bool:
    """True when the starter is off and the engine turns."""
    starter_on = moment.is_starter_on()
    rpm = moment.vehicle_engine_rotation_speed()
    if starter_on is None or rpm is None:
        return False
    return not starter_on and rpm > 0


def is_last_gear(moment: Moment) -> bool:
    return moment.vehicle_gear() == LAST_GEAR


def rpm_percentage(moment: Moment) -> Optional[float]:
    """Engine RPM as a percentage of the maximum RPM."""
    rpm = moment.vehicle_engine_rotation_speed()
    max_rpm = moment.vehicle_max_engine_rotation_speed()
    if rpm is None or not max_rpm:
        return None
    return rpm * 100 / max_rpm


def redline_rpm(moment: Moment) -> Optional[float]:
    """RPM at which the redline starts.

    Games only report the maximum RPM, which is used as the redline.
    """
    return moment.vehicle_max_engine_rotation_speed()
