"""LED container models.

A profile is a tree of containers. Each container configures a run of LEDs
and the telemetry condition that lights it. The ``ContainerType`` key picks
the container model; only its last dot-separated segment is significant, so
``SimHub.Plugins.OutputPlugins.GraphicalDash.LedContainers.RPMContainer``
and ``RPMContainer`` are the same thing. Unrecognized types are kept as
UnknownContainer instead of failing the whole profile.
"""

from datetime import timedelta
from typing import Annotated, Any, ClassVar, Optional, Union
from uuid import UUID

from pydantic import Discriminator, Field, PositiveInt, Tag, model_validator

from .base import Milliseconds, ProfileColor, ProfileModel, StartPosition
from .color import Color
from .enums import FlagColor, RpmMode, StackingType


class ContainerBase(ProfileModel):
    """Fields shared by every container."""

    TAG: ClassVar[str] = ""

    description: Optional[str] = None
    is_enabled: bool = True
    container_id: Optional[UUID] = None
    start_position: StartPosition = 1

    @property
    def enabled(self) -> bool:
        return self.is_enabled


class RpmContainer(ContainerBase):
    """A gradient bar filling up with engine RPM."""

    TAG: ClassVar[str] = "RPMContainer"

    led_count: PositiveInt
    use_percent: bool = False
    percent_min: float = 0.0
    percent_max: float = 100.0
    rpm_min: float = Field(default=0.0, alias="RPMMin")
    rpm_max: float = Field(default=0.0, alias="RPMMax")
    start_color: ProfileColor
    end_color: ProfileColor
    right_to_left: bool = False
    blink_enabled: bool = False
    blink_delay: Milliseconds = timedelta(0)
    blink_on_last_gear: bool = False
    gradient_on_all: bool = False
    fill_all_leds: bool = False
    use_led_dimming: bool = False


class LedSegment(ProfileModel):
    """One segment of an RPMSegmentsContainer."""

    start_value: float
    normal_color: ProfileColor
    blinking_color: Optional[ProfileColor] = None
    use_blinking_color: bool = True
    led_count: PositiveInt

    @property
    def blink_color(self) -> Optional[Color]:
        """Color shown while blinking, or None to keep the normal color."""
        return self.blinking_color if self.use_blinking_color else None


class RpmSegmentsContainer(ContainerBase):
    """Consecutive segments that light up at increasing RPM thresholds."""

    TAG: ClassVar[str] = "RPMSegmentsContainer"

    blink_enabled: bool = True
    blink_delay: Milliseconds = timedelta(0)
    blink_on_last_gear: bool = False
    rpm_mode: RpmMode = RpmMode.RPM_PERCENTAGE
    segments: list[LedSegment] = Field(default_factory=list)


class SimpleBlinkContainer(ContainerBase):
    """A single colored run of LEDs that blinks while a condition holds."""

    led_count: PositiveInt
    color: ProfileColor
    blink_enabled: bool = False
    blink_delay: Milliseconds = timedelta(0)
    dual_blink_timing_enabled: bool = False
    off_delay: Milliseconds = timedelta(0)
    on_delay: Milliseconds = timedelta(0)


class RedlineReachedContainer(SimpleBlinkContainer):
    TAG: ClassVar[str] = "RedlineReachedContainer"


class FlagContainer(SimpleBlinkContainer):
    """Blinks while its racing flag is waved."""

    FLAG: ClassVar[FlagColor]


class YellowFlagContainer(FlagContainer):
    TAG: ClassVar[str] = "YellowFlagContainer"
    FLAG: ClassVar[FlagColor] = FlagColor.YELLOW


class BlueFlagContainer(FlagContainer):
    TAG: ClassVar[str] = "BlueFlagContainer"
    FLAG: ClassVar[FlagColor] = FlagColor.BLUE


class WhiteFlagContainer(FlagContainer):
    TAG: ClassVar[str] = "WhiteFlagContainer"
    FLAG: ClassVar[FlagColor] = FlagColor.WHITE


class SpeedLimiterAnimationContainer(ContainerBase):
    """Pit limiter animation. Parsed so profiles load; it has no runtime effect."""

    TAG: ClassVar[str] = "SpeedLimiterAnimationContainer"

    led_count: PositiveInt
    color_1_alternate: Optional[ProfileColor] = None
    color_2_alternate: Optional[ProfileColor] = None
    color_1_single_color: Optional[ProfileColor] = None
    color_2_single_color: Optional[ProfileColor] = None
    alternate_delay: Milliseconds = timedelta(0)
    alternate_enabled: bool = False
    blink_color_1_delay: Milliseconds = timedelta(0)
    limiter_behavior: int = 0
    use_alternate_2: bool = False
    use_alternate: bool = False
    alternate_2_blank_background: bool = Field(default=False, alias="Alternate2BlanckBackground")


class UnknownContainer(ContainerBase):
    """A container type this engine does not know.

    The raw payload is preserved in ``raw_content``.
    """

    TAG: ClassVar[str] = "Unknown"

    container_type: str = ""
    raw_content: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _keep_raw_content(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "RawContent" in data or "raw_content" in data:
            return data
        return {
            "ContainerType": container_tag(data.get("ContainerType", data.get("container_type", ""))),
            "StartPosition": data.get("StartPosition", data.get("start_position", 1)),
            "Description": data.get("Description", data.get("description")),
            "IsEnabled": data.get("IsEnabled", data.get("is_enabled", True)),
            "RawContent": dict(data),
        }


class Formula(ProfileModel):
    expression: str = ""


class GroupContainer(ContainerBase):
    """A container of containers.

    ``StackLeftToRight`` packs children one after another starting at the
    group's position; otherwise children are layered, each placed relative
    to the group's position by its own start position.
    """

    stack_left_to_right: bool = False
    led_containers: list["LedContainer"] = Field(default_factory=list)

    @property
    def stacking_type(self) -> StackingType:
        if self.stack_left_to_right:
            return StackingType.LEFT_TO_RIGHT
        return StackingType.LAYERED


class SimpleGroupContainer(GroupContainer):
    """Children are always active."""

    TAG: ClassVar[str] = "GroupContainer"


class GameRunningGroupContainer(GroupContainer):
    """Children are active while a game is running."""

    TAG: ClassVar[str] = "GameRunningGroupContainer"


class CarStartedGroupContainer(GroupContainer):
    """Children are active for ``duration`` after the engine starts."""

    # the upstream format spells this tag without the "r"
    TAG: ClassVar[str] = "GameCarStatedGroupContainer"

    duration: Milliseconds = timedelta(0)


class ConditionalGroupContainer(GroupContainer):
    """Children gated by a user formula, which is not evaluated."""

    TAG: ClassVar[str] = "CustomConditionalGroupContainer"

    trigger_formula: Formula = Field(default_factory=Formula)


_CONTAINER_MODELS: tuple[type[ContainerBase], ...] = (
    RpmContainer,
    RpmSegmentsContainer,
    RedlineReachedContainer,
    SpeedLimiterAnimationContainer,
    YellowFlagContainer,
    BlueFlagContainer,
    WhiteFlagContainer,
    SimpleGroupContainer,
    GameRunningGroupContainer,
    CarStartedGroupContainer,
    ConditionalGroupContainer,
)

KNOWN_CONTAINER_TAGS = frozenset(model.TAG for model in _CONTAINER_MODELS)


def container_tag(container_type: Any) -> str:
    """Return the significant last dot-segment of a ContainerType value."""
    return str(container_type).rsplit(".", 1)[-1]


def _discriminate(value: Any) -> Optional[str]:
    if isinstance(value, ContainerBase):
        return value.TAG
    if not isinstance(value, dict):
        return None
    tag = container_tag(value.get("ContainerType", value.get("container_type", "")))
    return tag if tag in KNOWN_CONTAINER_TAGS else UnknownContainer.TAG


LedContainer = Annotated[
    Union[
        Annotated[RpmContainer, Tag(RpmContainer.TAG)],
        Annotated[RpmSegmentsContainer, Tag(RpmSegmentsContainer.TAG)],
        Annotated[RedlineReachedContainer, Tag(RedlineReachedContainer.TAG)],
        Annotated[SpeedLimiterAnimationContainer, Tag(SpeedLimiterAnimationContainer.TAG)],
        Annotated[YellowFlagContainer, Tag(YellowFlagContainer.TAG)],
        Annotated[BlueFlagContainer, Tag(BlueFlagContainer.TAG)],
        Annotated[WhiteFlagContainer, Tag(WhiteFlagContainer.TAG)],
        Annotated[SimpleGroupContainer, Tag(SimpleGroupContainer.TAG)],
        Annotated[GameRunningGroupContainer, Tag(GameRunningGroupContainer.TAG)],
        Annotated[CarStartedGroupContainer, Tag(CarStartedGroupContainer.TAG)],
        Annotated[ConditionalGroupContainer, Tag(ConditionalGroupContainer.TAG)],
        Annotated[UnknownContainer, Tag(UnknownContainer.TAG)],
    ],
    Discriminator(_discriminate),
]

for _group_model in (
    GroupContainer,
    SimpleGroupContainer,
    GameRunningGroupContainer,
    CarStartedGroupContainer,
    ConditionalGroupContainer,
):
    _group_model.model_rebuild()
