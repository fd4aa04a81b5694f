"""Static preflop opening ranges by position, seeded from the strength tiers."""

from __future__ import annotations

from typing import Dict, List, Tuple

from rangelab.categories import HAND_CATEGORIES, HandCategory, seed_matrix
from rangelab.constants import validate_position
from rangelab.range_matrix import compute_range_stats

_PREMIUM = HAND_CATEGORIES[HandCategory.PREMIUM]
_STRONG = HAND_CATEGORIES[HandCategory.STRONG]
_PLAYABLE = HAND_CATEGORIES[HandCategory.PLAYABLE]
_SPECULATIVE = HAND_CATEGORIES[HandCategory.SPECULATIVE]


def _tiers(*tiers: Tuple[str, ...]) -> List[str]:
    return [hand for tier in tiers for hand in tier]


def _unique(hands: List[str]) -> List[str]:
    return list(dict.fromkeys(hands))


OPENING_RANGES: Dict[str, List[str]] = {
    "UTG": _unique(_tiers(_PREMIUM, _STRONG) + ["ATs", "KQs", "99", "88"]),
    "UTG1": _unique(_tiers(_PREMIUM, _STRONG) + ["ATs", "KQs", "QJs", "99", "88", "77"]),
    "UTG2": _unique(
        _tiers(_PREMIUM, _STRONG)
        + ["ATs", "A9s", "KQs", "KJs", "QJs", "JTs", "99", "88", "77"]
    ),
    "LJ": _unique(
        _tiers(_PREMIUM, _STRONG, _PLAYABLE)
        + ["A8s", "A7s", "KTs", "K9s", "QTs", "T9s", "66", "55"]
    ),
    "HJ": _unique(
        _tiers(_PREMIUM, _STRONG, _PLAYABLE)
        + ["A6s", "A5s", "A4s", "K9s", "K8s", "Q9s", "J9s", "T9s", "98s", "87s", "66", "55", "44"]
    ),
    "CO": _unique(
        _tiers(_PREMIUM, _STRONG, _PLAYABLE, _SPECULATIVE)
        + ["ATo", "KJo", "QJo", "JTo"]
    ),
    "BTN": _unique(
        _tiers(_PREMIUM, _STRONG, _PLAYABLE, _SPECULATIVE)
        + ["ATo", "A9o", "KJo", "KTo", "QJo", "QTo", "JTo", "T9o"]
        + ["K7s", "K6s", "Q8s", "J8s", "T8s", "97s", "86s", "75s", "65s", "54s"]
    ),
    "SB": _unique(
        _tiers(_PREMIUM, _STRONG, _PLAYABLE)
        + ["A8s", "A7s", "K9s", "Q9s", "J9s", "T9s", "98s", "87s", "76s"]
        + ["ATo", "KJo", "QJo"]
    ),
    # BB defends wide.
    "BB": _unique(
        _tiers(_PREMIUM, _STRONG, _PLAYABLE, _SPECULATIVE)
        + ["K5s", "K4s", "K3s", "K2s", "Q7s", "Q6s", "J7s", "T7s", "96s", "85s", "74s", "64s", "53s", "43s"]
        + ["ATo", "A9o", "A8o", "KJo", "KTo", "QJo", "QTo", "JTo", "T9o", "98o", "87o"]
    ),
}


def opening_range(position: str) -> dict:
    """
    Opening range payload for one seat: ``{position, matrix, stats}``.

    Stats are rounded for display (whole combos, one-decimal percentage).
    """
    label = validate_position(position)
    matrix = seed_matrix(OPENING_RANGES[label])
    stats = compute_range_stats(matrix)
    return {
        "position": label,
        "hands": list(OPENING_RANGES[label]),
        "matrix": matrix.to_dict(),
        "stats": {
            "totalCombos": int(round(stats.total_combos)),
            "rangePercentage": round(stats.range_percentage, 1),
            "totalHands": stats.total_hands,
        },
    }
