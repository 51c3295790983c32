"""Data models for LED profiles and application settings."""

from .color import Color
from .config import AppConfig
from .containers import (
    BlueFlagContainer,
    CarStartedGroupContainer,
    ConditionalGroupContainer,
    ContainerBase,
    FlagContainer,
    Formula,
    GameRunningGroupContainer,
    GroupContainer,
    LedContainer,
    LedSegment,
    RedlineReachedContainer,
    RpmContainer,
    RpmSegmentsContainer,
    SimpleBlinkContainer,
    SimpleGroupContainer,
    SpeedLimiterAnimationContainer,
    UnknownContainer,
    WhiteFlagContainer,
    YellowFlagContainer,
    container_tag,
)
from .enums import FlagColor, RpmMode, StackingType
from .profile import LedProfile, load_profile

__all__ = [
    # Models
    "AppConfig",
    "Color",
    "LedProfile",
    # Containers
    "BlueFlagContainer",
    "CarStartedGroupContainer",
    "ConditionalGroupContainer",
    "ContainerBase",
    "FlagContainer",
    "Formula",
    "GameRunningGroupContainer",
    "GroupContainer",
    "LedContainer",
    "LedSegment",
    "RedlineReachedContainer",
    "RpmContainer",
    "RpmSegmentsContainer",
    "SimpleBlinkContainer",
    "SimpleGroupContainer",
    "SpeedLimiterAnimationContainer",
    "UnknownContainer",
    "WhiteFlagContainer",
    "YellowFlagContainer",
    # Enums
    "FlagColor",
    "RpmMode",
    "StackingType",
    # Functions
    "container_tag",
    "load_profile",
]
