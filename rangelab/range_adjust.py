"""Range-width adjustments for observed action and board texture."""

from __future__ import annotations

import math
from typing import Dict, Optional, Sequence

from rangelab.archetypes import archetype_by_key
from rangelab.cards import CardLike, board_texture_score, has_connected_ranks, is_monotone
from rangelab.constants import MAX_RANGE_PERCENT, MIN_RANGE_PERCENT
from rangelab.errors import RangeLabError, UnknownActionType

ACTION_MULTIPLIERS: Dict[str, float] = {
    "limp": 1.5,
    "minraise": 1.2,
    "standard_raise": 1.0,
    "big_raise": 0.7,
    "3bet": 0.4,
    "4bet": 0.15,
}

MONOTONE_DISCOUNT = 0.9
CONNECTED_DISCOUNT = 0.95


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def action_multiplier(action_type: Optional[str]) -> float:
    if action_type is None:
        return 1.0
    if action_type not in ACTION_MULTIPLIERS:
        raise UnknownActionType(
            f"Unknown action type: {action_type!r} (expected one of {list(ACTION_MULTIPLIERS)})"
        )
    return ACTION_MULTIPLIERS[action_type]


def board_adjustment(board: Sequence[CardLike]) -> float:
    """Wetter boards narrow the continuing range. Needs 3+ cards to apply."""
    factor = 1.0
    if len(board) < 3:
        return factor
    if is_monotone(board):
        factor *= MONOTONE_DISCOUNT
    if has_connected_ranks(board):
        factor *= CONNECTED_DISCOUNT
    return factor


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _base_percent(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RangeLabError(f"base range percent must be a number, got {value!r}")
    if not math.isfinite(value):
        raise RangeLabError(f"base range percent must be finite, got {value!r}")
    return float(value)


def range_adjustment_breakdown(
    base_range_percent: float,
    action_type: Optional[str] = None,
    board: Sequence[CardLike] = (),
) -> dict:
    """All intermediate factors plus the final adjusted percentage."""
    base = _base_percent(base_range_percent)
    action = action_multiplier(action_type)
    texture = board_adjustment(board)
    adjusted = int(
        _clamp(_round_half_up(base * action * texture), MIN_RANGE_PERCENT, MAX_RANGE_PERCENT)
    )
    return {
        "base_range_percent": base,
        "action_type": action_type,
        "action_multiplier": action,
        "monotone": is_monotone(board),
        "connected": has_connected_ranks(board),
        "board_adjustment": round(texture, 6),
        "texture_score": round(board_texture_score(board), 2),
        "adjusted_range_percent": adjusted,
    }


def adjust_range(
    base_range_percent: float,
    action_type: Optional[str] = None,
    board: Sequence[CardLike] = (),
) -> int:
    """
    Narrow or widen a range estimate.

    ``clamp(1, 100, round(base * action_multiplier * board_adjustment))``
    """
    return range_adjustment_breakdown(base_range_percent, action_type, board)[
        "adjusted_range_percent"
    ]


def adjust_for_archetype(
    archetype_key: str,
    action_type: Optional[str] = None,
    board: Sequence[CardLike] = (),
) -> int:
    """Adjusted range starting from an archetype's VPIP."""
    archetype = archetype_by_key(archetype_key)
    return adjust_range(archetype.base_range_percent, action_type, board)
