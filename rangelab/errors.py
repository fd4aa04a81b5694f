"""Exception types raised at the parsing and validation boundaries.

Every error derives from ``ValueError`` so HTTP handlers and scripts can
treat them as recoverable input problems.
"""

from __future__ import annotations


class RangeLabError(ValueError):
    """Base class for all range toolkit input errors."""


class ParseError(RangeLabError):
    """A card, hand or hand-string token could not be parsed."""


class InvalidCardFormat(ParseError):
    """Malformed 2-character card token such as ``"Ax"`` or ``"10h"``."""


class InvalidHandFormat(ParseError):
    """Malformed 4-character hand token, or one naming the same card twice."""


class InvalidHandString(ParseError):
    """Canonical hand string that is not one of the 169 starting hands."""


class InvalidFrequency(RangeLabError):
    """Frequency outside [0, 1] (or not a number) under the strict policy."""


class InvalidMatrixShape(RangeLabError):
    """Matrix payload that is not a 13x13 grid of rows."""


class UnknownPosition(RangeLabError):
    pass


class UnknownActionType(RangeLabError):
    pass


class UnknownChart(RangeLabError, KeyError):
    """No strategy chart is published for the requested seat."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownArchetype(RangeLabError, KeyError):
    """Lookup failure for opponent archetypes and range presets."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
