"""Placement of containers inside a group."""

import logging
import sys
from collections.abc import Callable, Iterable
from typing import Optional

from simleds.models import ContainerBase, StackingType

from .base import LedEffect

logger = logging.getLogger(__name__)

MAX_POSITION = sys.maxsize

EffectBuilder = Callable[[ContainerBase, int], Optional[LedEffect]]
"""Builds the effect of a container placed at an absolute start position."""


def saturating_add(position: int, offset: int) -> int:
    """Add to an LED position, clamping at MAX_POSITION."""
    return min(position + offset, MAX_POSITION)


def resolve_layout(
    containers: Iterable[ContainerBase],
    group_start: int,
    stacking: StackingType,
    build: EffectBuilder,
) -> list[LedEffect]:
    """Build the effects of a group's children at their absolute positions.

    Disabled containers and containers without a runtime effect are skipped
    and take no room.

    Args:
        containers: Child containers in profile order
        group_start: 1-based absolute start of the parent group
        stacking: LAYERED places each child at ``group_start + start_position - 1``;
            LEFT_TO_RIGHT packs children from ``group_start`` by their LED counts
        build: Creates the effect for a container at an absolute position

    Returns:
        The built child effects, in order
    """
    effects = []
    cursor = group_start
    for container in containers:
        if not container.enabled:
            logger.debug(f"Skipping disabled container '{container.description or container.TAG}'")
            continue

        if stacking is StackingType.LAYERED:
            start = saturating_add(group_start, container.start_position - 1)
        else:
            start = cursor

        effect = build(container, start)
        if effect is None:
            continue

        if stacking is StackingType.LEFT_TO_RIGHT:
            cursor = saturating_add(cursor, effect.led_count())
        effects.append(effect)
    return effects
