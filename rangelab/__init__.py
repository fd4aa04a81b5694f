"""Preflop range matrices, hand tiers, range adjustments and practice drills."""

from rangelab.service import RangeService
from rangelab.webapp import create_app

__all__ = ["RangeService", "create_app"]

__version__ = "1.0.0"
