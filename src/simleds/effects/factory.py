"""Effect factory: turns profile containers into the effect tree."""

import logging
from typing import Optional

from simleds.models import (
    ContainerBase,
    FlagContainer,
    GroupContainer,
    LedProfile,
    RpmContainer,
    RpmSegmentsContainer,
    StackingType,
)

from .base import Clock, LedEffect, default_clock
from .blink import BlinkEffect
from .groups import AlwaysOn, EffectGroup, condition_for
from .layout import resolve_layout
from .rpm import RpmGradientEffect, RpmSegmentsEffect

logger = logging.getLogger(__name__)


def create_led_effect(
    container: ContainerBase,
    start_position: int,
    clock: Clock = default_clock,
) -> Optional[LedEffect]:
    """Create the effect of one container placed at ``start_position``.

    Returns None for containers without a runtime effect (redline and speed
    limiter containers and unknown container types).
    """
    if isinstance(container, RpmContainer):
        effect = RpmGradientEffect(container, start_position, clock)
    elif isinstance(container, RpmSegmentsContainer):
        effect = RpmSegmentsEffect(container, start_position, clock)
    elif isinstance(container, FlagContainer):
        effect = BlinkEffect.flag(container.FLAG, container, start_position, clock)
    elif isinstance(container, GroupContainer):
        effect = create_group_effect(container, start_position, clock)
    else:
        logger.debug(f"No effect for {container.TAG or type(container).__name__} at {start_position}")
        return None

    logger.debug(f"Created {type(effect).__name__} at LED {start_position}")
    return effect


def create_group_effect(
    container: GroupContainer,
    start_position: int,
    clock: Clock = default_clock,
) -> EffectGroup:
    """Create a group effect and, recursively, its children."""
    children = resolve_layout(
        container.led_containers,
        start_position,
        container.stacking_type,
        lambda child, start: create_led_effect(child, start, clock),
    )
    return EffectGroup(
        start_position,
        children,
        condition_for(container, clock),
        description=container.description or "",
    )


def create_root_group(profile: LedProfile, clock: Clock = default_clock) -> EffectGroup:
    """Create the root of a profile's effect tree: always on, layered from LED 1."""
    children = resolve_layout(
        profile.led_containers,
        1,
        StackingType.LAYERED,
        lambda child, start: create_led_effect(child, start, clock),
    )
    root = EffectGroup(1, children, AlwaysOn(), description=profile.name)
    logger.info(
        f"Built effect tree for profile '{profile.name}': "
        f"{len(children)} top-level effects, {root.led_count()} LEDs"
    )
    return root
