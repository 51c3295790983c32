"""Text outline of an effect tree."""

from .base import LedEffect


def describe_tree(effect: LedEffect, indent: int = 0) -> list[str]:
    """Render one line per effect: name, first LED, LED count and description.

    Example:
        >>> print("\\n".join(describe_tree(root)))
        EffectGroup @1 x18 'My profile'
          RpmGradientEffect @1 x10 'RPM gradient'
          BlinkEffect @11 x3 'Yellow flag'
    """
    line = (
        f"{'  ' * indent}{type(effect).__name__} @{effect.start_led()} "
        f"x{effect.led_count()} '{effect.description()}'"
    )
    lines = [line]
    for child in effect.children():
        lines.extend(describe_tree(child, indent + 1))
    return lines
