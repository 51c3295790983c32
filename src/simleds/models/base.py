"""Shared building blocks for profile models."""

from datetime import timedelta
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_pascal

from .color import Color, parse_color_value


class ProfileModel(BaseModel):
    """Base for everything read from a profile document.

    Profiles use PascalCase keys; snake_case field names are accepted too.
    Models are frozen once parsed.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_pascal,
        populate_by_name=True,
    )


def _duration_from_ms(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected a whole number of milliseconds")
    if value < 0:
        raise ValueError("duration cannot be negative")
    return timedelta(milliseconds=value)


def _duration_to_ms(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


Milliseconds = Annotated[
    timedelta,
    PlainValidator(_duration_from_ms),
    PlainSerializer(_duration_to_ms, return_type=int),
]
"""A duration written in profiles as integer milliseconds."""

ProfileColor = Annotated[Color, BeforeValidator(parse_color_value)]
"""A color written in profiles as a CSS name, ``#rrggbb`` or ``r,g,b``."""

StartPosition = Annotated[int, Field(ge=1, description="1-based LED position")]
