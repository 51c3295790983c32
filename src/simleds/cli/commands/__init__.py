"""CLI commands."""

from .check import check
from .config import config
from .replay import replay

__all__ = ["check", "config", "replay"]
