"""Group effects: composite nodes of the effect tree.

A group owns its children exclusively and gates their updates with a
GroupCondition. ``leds()`` concatenates the children's groups in order.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING, Optional

from simleds.models import (
    CarStartedGroupContainer,
    ConditionalGroupContainer,
    GameRunningGroupContainer,
    GroupContainer,
)
from simleds.telemetry import Moment, is_engine_running

from .base import Clock, LedEffect, LedGroup, default_clock, to_nanoseconds

if TYPE_CHECKING:
    from simleds.models import LedProfile

logger = logging.getLogger(__name__)


class GroupCondition:
    """Decides whether a group forwards a moment to its children."""

    def update(self, group: "EffectGroup", moment: Moment) -> None:
        group.update_children(moment)


class AlwaysOn(GroupCondition):
    pass


class GameStarted(GroupCondition):
    """Children are updated while a game is running.

    A moment only exists while a game runs, so this forwards every moment.
    """


class CarStartedState(str, Enum):
    WAITING = "waiting"
    TRIGGERED = "triggered"
    EXPIRED = "expired"


class CarStarted(GroupCondition):
    """Shows the children for ``duration`` after the engine starts.

    Waiting -> Triggered once the engine runs; Triggered -> Expired when the
    duration has elapsed, disabling the children; Expired -> Waiting once the
    engine stops, so the next start shows them again.
    """

    def __init__(self, duration: timedelta, clock: Clock = default_clock):
        self.duration = to_nanoseconds(duration)
        self._clock = clock
        self.state = CarStartedState.WAITING
        self.triggered_at: Optional[int] = None

    def update(self, group: "EffectGroup", moment: Moment) -> None:
        if self.state is CarStartedState.WAITING:
            if is_engine_running(moment):
                self.state = CarStartedState.TRIGGERED
                self.triggered_at = self._clock()
                logger.debug(f"Car started, showing '{group.description()}'")
                group.update_children(moment)
        elif self.state is CarStartedState.TRIGGERED:
            if self._clock() - self.triggered_at >= self.duration:
                self.state = CarStartedState.EXPIRED
                self.triggered_at = None
                group.disable()
            else:
                group.update_children(moment)
        elif not is_engine_running(moment):
            self.state = CarStartedState.WAITING


class Expression(GroupCondition):
    """Gated by a user formula. Formulas are not evaluated, so children never update."""

    def __init__(self, formula: str):
        self.formula = formula

    def update(self, group: "EffectGroup", moment: Moment) -> None:
        return None


def condition_for(container: GroupContainer, clock: Clock = default_clock) -> GroupCondition:
    """Pick the GroupCondition matching a group container type."""
    if isinstance(container, CarStartedGroupContainer):
        return CarStarted(container.duration, clock)
    if isinstance(container, GameRunningGroupContainer):
        return GameStarted()
    if isinstance(container, ConditionalGroupContainer):
        return Expression(container.trigger_formula.expression)
    return AlwaysOn()


class EffectGroup(LedEffect):
    """A composite effect.

    Example:
        ```python
        root = EffectGroup.root(profile)
        root.update(moment)
        for group in root.leds():
            sink.apply(group.start_position, group.leds)
        ```
    """

    def __init__(
        self,
        start_position: int,
        children: Iterable[LedEffect],
        condition: Optional[GroupCondition] = None,
        description: str = "",
    ):
        if start_position < 1:
            raise ValueError(f"start position must be at least 1, got {start_position}")
        self._start_position = start_position
        self._children = list(children)
        self.condition = condition or AlwaysOn()
        self._description = description

    @classmethod
    def root(cls, profile: "LedProfile", clock: Clock = default_clock) -> "EffectGroup":
        """Build the whole effect tree of a profile."""
        from .factory import create_root_group

        return create_root_group(profile, clock)

    def update(self, moment: Moment) -> None:
        self.condition.update(self, moment)

    def update_children(self, moment: Moment) -> None:
        for child in self._children:
            child.update(moment)

    def leds(self) -> Iterator[LedGroup]:
        for child in self._children:
            yield from child.leds()

    def disable(self) -> None:
        for child in self._children:
            child.disable()

    def start_led(self) -> int:
        return self._start_position

    def description(self) -> str:
        return self._description

    def children(self) -> tuple[LedEffect, ...]:
        return tuple(self._children)
