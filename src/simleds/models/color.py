"""Color model for LED strips."""

import math
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError
from pydantic_extra_types.color import Color as CssColor


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so colors can be shared between LED buffers and
    compared by value.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def parse(cls, value: Union[str, "Color"]) -> "Color":
        """Parse a profile color string.

        Accepts CSS color names, ``#rrggbb`` hex strings and ``"r,g,b"``
        triples with each component in 0-255.

        Raises:
            ValueError: If the string is not a recognizable color

        Example:
            >>> Color.parse("0, 255, 0")
            Color(r=0, g=255, b=0)
            >>> Color.parse("Lime").to_hex()
            '#00FF00'
        """
        if isinstance(value, Color):
            return value

        text = value.strip()
        parts = text.split(",")
        if len(parts) == 3:
            try:
                r, g, b = (int(part.strip()) for part in parts)
            except ValueError:
                raise ValueError(f"'{value}' is not a valid r,g,b color") from None
            for component in (r, g, b):
                if not 0 <= component <= 255:
                    raise ValueError(f"color component {component} in '{value}' is outside 0-255")
            return cls(r=r, g=g, b=b)

        try:
            r, g, b = CssColor(text).as_rgb_tuple(alpha=False)
        except PydanticCustomError:
            raise ValueError(f"'{value}' is not a valid color") from None
        return cls(r=r, g=g, b=b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def lerp(self, other: "Color", t: float) -> "Color":
        """Linearly interpolate towards ``other`` in RGB space.

        Args:
            other: Color reached at ``t == 1``
            t: Interpolation factor, clamped to 0-1

        Example:
            >>> Color.parse("Lime").lerp(Color.parse("Red"), 0.25)
            Color(r=64, g=191, b=0)
        """
        t = min(max(t, 0.0), 1.0)

        def channel(a: int, b: int) -> int:
            # half rounds up, matching 8-bit color conversion of most tools
            return int(math.floor(a + (b - a) * t + 0.5))

        return Color(
            r=channel(self.r, other.r),
            g=channel(self.g, other.g),
            b=channel(self.b, other.b),
        )


def parse_color_value(value: Any) -> Any:
    """Before-validator turning profile color strings into Color models."""
    if isinstance(value, str):
        return Color.parse(value)
    return value
