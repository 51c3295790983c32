"""Engine RPM driven effects."""

from .gradient import RpmGradientEffect
from .segments import RpmSegmentsEffect, SegmentEffect, threshold_value

__all__ = ["RpmGradientEffect", "RpmSegmentsEffect", "SegmentEffect", "threshold_value"]
