"""Shared constants for the range toolkit."""

from __future__ import annotations

from typing import Dict, List

from rangelab.errors import UnknownPosition

# Grid axis order: row/col 0 is the ace.
CARD_RANKS = "AKQJT98765432"
CARD_SUITS = "hdcs"

MATRIX_SIZE = len(CARD_RANKS)
TOTAL_COMBOS = 1326

PAIR_COMBOS = 6
SUITED_COMBOS = 4
OFFSUIT_COMBOS = 12

POSITIONS: List[str] = ["UTG", "UTG1", "UTG2", "LJ", "HJ", "CO", "BTN", "SB", "BB"]
PRACTICE_POSITIONS: List[str] = ["UTG", "HJ", "CO", "BTN", "SB", "BB"]

SUIT_SYMBOLS: Dict[str, str] = {
    "h": "♥",
    "d": "♦",
    "c": "♣",
    "s": "♠",
}

MIN_RANGE_PERCENT = 1
MAX_RANGE_PERCENT = 100


def validate_position(position: str) -> str:
    """Return the upper-cased position label or raise for unknown seats."""
    label = str(position or "").strip().upper()
    if label not in POSITIONS:
        raise UnknownPosition(f"Unknown position: {position!r} (expected one of {POSITIONS})")
    return label
