"""Core run loop."""

from .engine import LedEngine

__all__ = ["LedEngine"]
