"""Starting-hand strength tiers used to seed ranges and script practice answers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from rangelab.range_matrix import (
    RangeMatrix,
    all_starting_hands,
    canonical_hand,
    create_empty_matrix,
    set_matrix_value,
)

logger = logging.getLogger(__name__)


class HandCategory(Enum):
    """Strength tiers, strongest first. OTHER is the implicit fold tier."""
    PREMIUM = "premium"
    STRONG = "strong"
    PLAYABLE = "playable"
    SPECULATIVE = "speculative"
    OTHER = "other"


HAND_CATEGORIES: Dict[HandCategory, Tuple[str, ...]] = {
    HandCategory.PREMIUM: ("AA", "KK", "QQ", "AKs"),
    HandCategory.STRONG: ("JJ", "TT", "AKo", "AQs", "AJs", "KQs"),
    HandCategory.PLAYABLE: ("99", "88", "77", "ATs", "KJs", "QJs", "JTs", "AQo"),
    HandCategory.SPECULATIVE: (
        "66", "55", "44", "33", "22",
        "A5s", "A4s", "A3s", "A2s",
        "KTs", "QTs", "T9s", "98s", "87s", "76s",
    ),
}

TIER_FREQUENCIES: Dict[HandCategory, float] = {
    HandCategory.PREMIUM: 1.0,
    HandCategory.STRONG: 0.9,
    HandCategory.PLAYABLE: 0.7,
    HandCategory.SPECULATIVE: 0.4,
}
FALLBACK_FREQUENCY = 0.5


def find_category_overlaps() -> Dict[str, List[HandCategory]]:
    """Hands listed in more than one tier table."""
    seen: Dict[str, List[HandCategory]] = {}
    for category, hands in HAND_CATEGORIES.items():
        for hand in hands:
            seen.setdefault(canonical_hand(hand), []).append(category)
    return {hand: tiers for hand, tiers in seen.items() if len(tiers) > 1}


def _build_lookup() -> Dict[str, HandCategory]:
    overlaps = find_category_overlaps()
    for hand, tiers in overlaps.items():
        logger.warning(
            "Hand %s appears in several tiers (%s); using %s",
            hand,
            ", ".join(t.name for t in tiers),
            tiers[0].name,
        )
    lookup: Dict[str, HandCategory] = {}
    # Insertion order of HAND_CATEGORIES is the priority order.
    for category, hands in HAND_CATEGORIES.items():
        for hand in hands:
            lookup.setdefault(canonical_hand(hand), category)
    return lookup


_CATEGORY_LOOKUP = _build_lookup()


def classify_hand(hand: str) -> HandCategory:
    """Tier for a canonical hand string; raises InvalidHandString if unparseable."""
    return _CATEGORY_LOOKUP.get(canonical_hand(hand), HandCategory.OTHER)


def hands_in_category(category: HandCategory) -> List[str]:
    if category is HandCategory.OTHER:
        return [h for h in all_starting_hands() if h not in _CATEGORY_LOOKUP]
    return list(HAND_CATEGORIES[category])


def tier_frequency(hand: str) -> float:
    return TIER_FREQUENCIES.get(classify_hand(hand), FALLBACK_FREQUENCY)


def seed_matrix(hands: Iterable[str]) -> RangeMatrix:
    """New matrix with each listed hand set to its tier frequency."""
    matrix = create_empty_matrix()
    for hand in hands:
        set_matrix_value(matrix, hand, tier_frequency(hand))
    return matrix


def category_summary() -> List[dict]:
    """Tier sizes and default frequencies for UI legends."""
    out: List[dict] = []
    for category in HandCategory:
        out.append(
            {
                "category": category.value,
                "hands": hands_in_category(category),
                "default_frequency": TIER_FREQUENCIES.get(category, 0.0),
            }
        )
    return out
