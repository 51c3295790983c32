"""Telemetry snapshot models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RacingFlags(BaseModel):
    """Racing flags shown to the driver."""

    model_config = ConfigDict(frozen=True)

    white: bool = False
    yellow: bool = False
    blue: bool = False


class TelemetrySnapshot(BaseModel):
    """A plain-data Moment, as recorded or produced by a telemetry reader.

    Example:
        >>> moment = TelemetrySnapshot(rpm=8100, max_rpm=9000)
        >>> moment.vehicle_engine_rotation_speed()
        8100.0
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    racing_flags: Optional[RacingFlags] = Field(default=None, alias="flags")
    rpm: Optional[float] = Field(default=None, ge=0)
    max_rpm: Optional[float] = Field(default=None, ge=0)
    gear: Optional[int] = None
    starter_on: Optional[bool] = None

    def flags(self) -> Optional[RacingFlags]:
        return self.racing_flags

    def vehicle_engine_rotation_speed(self) -> Optional[float]:
        return self.rpm

    def vehicle_max_engine_rotation_speed(self) -> Optional[float]:
        return self.max_rpm

    def vehicle_gear(self) -> Optional[int]:
        return self.gear

    def is_starter_on(self) -> Optional[bool]:
        return self.starter_on
