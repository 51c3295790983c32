"""LED outputs."""

from .protocols import LedSink
from .sinks import BufferSink, ConsoleSink

__all__ = ["BufferSink", "ConsoleSink", "LedSink"]
