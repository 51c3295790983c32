"""simleds: reactive LED effects for racing simulator telemetry."""

__version__ = "0.1.0"

from .core import LedEngine
from .effects import EffectGroup, LedConfiguration, LedEffect, LedGroup
from .models import Color, LedProfile, load_profile
from .telemetry import Moment, RacingFlags, TelemetrySnapshot

__all__ = [
    "Color",
    "EffectGroup",
    "LedConfiguration",
    "LedEffect",
    "LedEngine",
    "LedGroup",
    "LedProfile",
    "Moment",
    "RacingFlags",
    "TelemetrySnapshot",
    "load_profile",
]
