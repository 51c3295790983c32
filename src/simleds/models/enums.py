"""Enumerations for LED profiles."""

from enum import Enum, IntEnum


class StackingType(str, Enum):
    """How a group positions its child containers."""

    LAYERED = "layered"  # Children placed relative to the group start, may overlap
    LEFT_TO_RIGHT = "left_to_right"  # Children packed one after another


class RpmMode(IntEnum):
    """Unit of the start values of RPM segments."""

    RPM_PERCENTAGE = 0  # Percentage of the maximum engine RPM
    REDLINE_PERCENTAGE = 1  # Percentage of the redline RPM
    RPM = 2  # Absolute engine RPM


class FlagColor(str, Enum):
    """Racing flags that drive flag containers."""

    WHITE = "white"
    YELLOW = "yellow"
    BLUE = "blue"
