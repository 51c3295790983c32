"""LED effect tree: effects, groups and the factory that builds them."""

from .base import OFF, Clock, LedConfiguration, LedEffect, LedGroup, default_clock, to_nanoseconds
from .blink import (
    BlinkEffect,
    BlinkPhase,
    BlinkState,
    BlinkStateMachine,
    BlinkTimings,
    flag_condition,
    redline_condition,
)
from .describe import describe_tree
from .factory import create_group_effect, create_led_effect, create_root_group
from .gradient import LinearGradient, fraction_of_range, leds_to_turn_on
from .groups import (
    AlwaysOn,
    CarStarted,
    CarStartedState,
    EffectGroup,
    Expression,
    GameStarted,
    GroupCondition,
    condition_for,
)
from .layout import MAX_POSITION, resolve_layout, saturating_add
from .rpm import RpmGradientEffect, RpmSegmentsEffect, SegmentEffect

__all__ = [
    # Core
    "OFF",
    "Clock",
    "LedConfiguration",
    "LedEffect",
    "LedGroup",
    "default_clock",
    "to_nanoseconds",
    # Blink
    "BlinkEffect",
    "BlinkPhase",
    "BlinkState",
    "BlinkStateMachine",
    "BlinkTimings",
    "flag_condition",
    "redline_condition",
    # Groups
    "AlwaysOn",
    "CarStarted",
    "CarStartedState",
    "EffectGroup",
    "Expression",
    "GameStarted",
    "GroupCondition",
    "condition_for",
    # RPM
    "LinearGradient",
    "RpmGradientEffect",
    "RpmSegmentsEffect",
    "SegmentEffect",
    "fraction_of_range",
    "leds_to_turn_on",
    # Layout and factory
    "MAX_POSITION",
    "create_group_effect",
    "create_led_effect",
    "create_root_group",
    "describe_tree",
    "resolve_layout",
    "saturating_add",
]
