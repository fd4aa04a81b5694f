"""Static 6-max raise-first-in (RFI) preflop charts, 200bb deep.

Each chart maps a canonical hand to ``(raise_percent, ev_bb)``. Hands a chart
does not list are pure folds. Frequencies are kept as published percentages
(0-100) and converted to [0, 1] when a range matrix is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from rangelab.constants import validate_position
from rangelab.errors import UnknownChart
from rangelab.range_matrix import (
    RangeMatrix,
    all_starting_hands,
    canonical_hand,
    combo_count,
    combos_to_matrix,
    compute_range_stats,
)

STACK_DEPTH_BB = 200
TABLE_SIZE = 6
CHART_ACTIONS = ("raise", "call", "fold", "allin")

_UTG_RAISES = {
    "AA": (100, 2.45), "KK": (100, 1.92), "QQ": (100, 1.45), "JJ": (100, 1.05), "TT": (100, 0.72),
    "99": (100, 0.45), "88": (100, 0.28), "77": (75, 0.12), "66": (50, 0.05), "AKs": (100, 1.35),
    "AQs": (100, 0.95), "AJs": (100, 0.68), "ATs": (100, 0.52), "KQs": (100, 0.55), "KJs": (100, 0.38),
    "KTs": (100, 0.25), "QJs": (100, 0.28), "QTs": (85, 0.15), "JTs": (80, 0.12), "AKo": (100, 0.95),
    "AQo": (100, 0.55), "AJo": (100, 0.32), "ATo": (75, 0.12), "KQo": (85, 0.18), "A9s": (50, 0.08),
    "A5s": (75, 0.12), "A4s": (50, 0.08),
}

_HJ_RAISES = {
    "AA": (100, 2.52), "KK": (100, 1.98), "QQ": (100, 1.52), "JJ": (100, 1.12), "TT": (100, 0.78),
    "99": (100, 0.52), "88": (100, 0.35), "77": (100, 0.22), "66": (85, 0.12), "55": (65, 0.08),
    "AKs": (100, 1.42), "AQs": (100, 1.02), "AJs": (100, 0.75), "ATs": (100, 0.58), "KQs": (100, 0.62),
    "KJs": (100, 0.45), "KTs": (100, 0.32), "QJs": (100, 0.35), "QTs": (100, 0.22), "JTs": (100, 0.18),
    "AKo": (100, 1.02), "AQo": (100, 0.62), "AJo": (100, 0.38), "ATo": (100, 0.22), "KQo": (100, 0.28),
    "KJo": (75, 0.12), "T9s": (75, 0.08), "98s": (50, 0.05), "A9s": (100, 0.22), "A8s": (85, 0.15),
    "A7s": (65, 0.08), "A6s": (50, 0.05), "A5s": (100, 0.18), "A4s": (85, 0.12), "A3s": (65, 0.08),
    "A2s": (50, 0.05), "K9s": (75, 0.08),
}

_CO_RAISES = {
    "AA": (100, 2.65), "KK": (100, 2.12), "QQ": (100, 1.65), "JJ": (100, 1.25), "TT": (100, 0.92),
    "99": (100, 0.65), "88": (100, 0.48), "77": (100, 0.35), "66": (100, 0.25), "55": (100, 0.18),
    "44": (85, 0.12), "33": (65, 0.08), "22": (50, 0.05), "AKs": (100, 1.55), "AQs": (100, 1.15),
    "AJs": (100, 0.88), "ATs": (100, 0.72), "KQs": (100, 0.75), "KJs": (100, 0.58), "KTs": (100, 0.45),
    "QJs": (100, 0.48), "QTs": (100, 0.35), "JTs": (100, 0.32), "AKo": (100, 1.15), "AQo": (100, 0.75),
    "AJo": (100, 0.52), "ATo": (100, 0.35), "KQo": (100, 0.42), "KJo": (100, 0.28), "KTo": (85, 0.15),
    "QJo": (100, 0.22), "QTo": (75, 0.12), "JTo": (85, 0.15), "T9s": (100, 0.22), "98s": (100, 0.18),
    "87s": (100, 0.15), "76s": (100, 0.12), "65s": (100, 0.10), "54s": (85, 0.08), "A9s": (100, 0.38),
    "A8s": (100, 0.32), "A7s": (100, 0.28), "A6s": (100, 0.25), "A5s": (100, 0.32), "A4s": (100, 0.28),
    "A3s": (100, 0.25), "A2s": (100, 0.22), "K9s": (100, 0.22), "K8s": (85, 0.12), "K7s": (75, 0.08),
    "K6s": (65, 0.05), "K5s": (85, 0.10), "K4s": (75, 0.08), "K3s": (65, 0.05), "K2s": (50, 0.03),
    "Q9s": (100, 0.18), "Q8s": (75, 0.08), "Q6s": (50, 0.03), "J9s": (100, 0.15), "J8s": (75, 0.08),
    "T8s": (85, 0.10), "97s": (75, 0.08), "86s": (65, 0.05), "75s": (50, 0.03), "64s": (50, 0.03),
    "A9o": (85, 0.15), "A8o": (65, 0.08), "A7o": (50, 0.05), "A5o": (65, 0.08), "A4o": (50, 0.05),

}

_BTN_RAISES = {
    "AA": (100, 2.85), "KK": (100, 2.32), "QQ": (100, 1.85), "JJ": (100, 1.45), "TT": (100, 1.12),
    "99": (100, 0.82), "88": (100, 0.62), "77": (100, 0.48), "66": (100, 0.38), "55": (100, 0.32),
    "44": (100, 0.28), "33": (100, 0.25), "22": (100, 0.22), "AKs": (100, 1.72), "AQs": (100, 1.32),
    "AJs": (100, 1.05), "ATs": (100, 0.88), "KQs": (100, 0.92), "KJs": (100, 0.75), "KTs": (100, 0.62),
    "QJs": (100, 0.65), "QTs": (100, 0.52), "JTs": (100, 0.48), "AKo": (100, 1.32), "AQo": (100, 0.92),
    "AJo": (100, 0.68), "ATo": (100, 0.52), "KQo": (100, 0.58), "KJo": (100, 0.42), "KTo": (100, 0.32),
    "QJo": (100, 0.38), "QTo": (100, 0.28), "JTo": (100, 0.32), "T9s": (100, 0.38), "98s": (100, 0.32),
    "87s": (100, 0.28), "76s": (100, 0.25), "65s": (100, 0.22), "54s": (100, 0.20), "A9s": (100, 0.52),
    "A8s": (100, 0.45), "A7s": (100, 0.42), "A6s": (100, 0.38), "A5s": (100, 0.45), "A4s": (100, 0.42),
    "A3s": (100, 0.38), "A2s": (100, 0.35), "K9s": (100, 0.38), "K8s": (100, 0.28), "K7s": (100, 0.25),
    "K6s": (100, 0.22), "K5s": (100, 0.25), "K4s": (100, 0.22), "K3s": (100, 0.20), "K2s": (100, 0.18),
    "Q9s": (100, 0.32), "Q8s": (100, 0.22), "Q7s": (85, 0.12), "Q6s": (100, 0.18), "Q5s": (85, 0.12),
    "Q4s": (75, 0.08), "Q3s": (65, 0.05), "Q2s": (50, 0.03), "J9s": (100, 0.28), "J8s": (100, 0.20),
    "J7s": (85, 0.12), "J6s": (75, 0.08), "J5s": (65, 0.05), "J4s": (50, 0.03), "T8s": (100, 0.22),
    "T7s": (85, 0.12), "T6s": (65, 0.05), "97s": (100, 0.18), "96s": (85, 0.10), "95s": (50, 0.03),
    "86s": (100, 0.15), "85s": (75, 0.08), "75s": (100, 0.12), "74s": (65, 0.05), "64s": (100, 0.10),
    "63s": (65, 0.05), "53s": (100, 0.08), "52s": (65, 0.05), "43s": (85, 0.08), "42s": (50, 0.03),
    "32s": (50, 0.03), "A9o": (100, 0.32), "A8o": (100, 0.25), "A7o": (100, 0.22), "A6o": (100, 0.18),
    "A5o": (100, 0.22), "A4o": (100, 0.20), "A3o": (100, 0.18), "A2o": (100, 0.15), "K9o": (100, 0.18),
    "K8o": (85, 0.10), "K7o": (75, 0.08), "K6o": (65, 0.05), "K5o": (50, 0.03), "Q9o": (100, 0.15),
    "Q8o": (75, 0.08), "J9o": (100, 0.12), "J8o": (75, 0.05), "T9o": (100, 0.15), "T8o": (85, 0.08),

}

_SB_RAISES = {
    "AA": (100, 2.95), "KK": (100, 2.42), "QQ": (100, 1.95), "JJ": (100, 1.55), "TT": (100, 1.22),
    "99": (100, 0.92), "88": (100, 0.72), "77": (100, 0.58), "66": (100, 0.48), "55": (100, 0.42),
    "44": (100, 0.38), "33": (100, 0.35), "22": (100, 0.32), "AKs": (100, 1.82), "AQs": (100, 1.42),
    "AJs": (100, 1.15), "ATs": (100, 0.98), "KQs": (100, 1.02), "KJs": (100, 0.85), "KTs": (100, 0.72),
    "QJs": (100, 0.75), "QTs": (100, 0.62), "JTs": (100, 0.58), "AKo": (100, 1.42), "AQo": (100, 1.02),
    "AJo": (100, 0.78), "ATo": (100, 0.62), "KQo": (100, 0.68), "KJo": (100, 0.52), "KTo": (100, 0.42),
    "QJo": (100, 0.48), "QTo": (100, 0.38), "JTo": (100, 0.42), "T9s": (100, 0.48), "98s": (100, 0.42),
    "87s": (100, 0.38), "76s": (100, 0.35), "65s": (100, 0.32), "54s": (100, 0.30), "A9s": (100, 0.62),
    "A8s": (100, 0.55), "A7s": (100, 0.52), "A6s": (100, 0.48), "A5s": (100, 0.55), "A4s": (100, 0.52),
    "A3s": (100, 0.48), "A2s": (100, 0.45), "K9s": (100, 0.48), "K8s": (100, 0.38), "K7s": (100, 0.35),
    "K6s": (100, 0.32), "K5s": (100, 0.35), "K4s": (100, 0.32), "K3s": (100, 0.30), "K2s": (100, 0.28),
    "Q9s": (100, 0.42), "Q8s": (100, 0.32), "Q7s": (100, 0.22), "Q6s": (100, 0.28), "Q5s": (100, 0.22),
    "Q4s": (100, 0.18), "Q3s": (100, 0.15), "Q2s": (100, 0.12), "J9s": (100, 0.38), "J8s": (100, 0.30),
    "J7s": (100, 0.22), "J6s": (100, 0.18), "J5s": (100, 0.15), "J4s": (100, 0.12), "J3s": (100, 0.08),
    "J2s": (85, 0.05), "T8s": (100, 0.32), "T7s": (100, 0.22), "T6s": (100, 0.15), "T5s": (85, 0.08),
    "T4s": (75, 0.05), "T3s": (65, 0.03), "T2s": (50, 0.02), "97s": (100, 0.28), "96s": (100, 0.20),
    "95s": (100, 0.12), "94s": (75, 0.05), "93s": (65, 0.03), "92s": (50, 0.02), "86s": (100, 0.25),
    "85s": (100, 0.18), "84s": (85, 0.10), "83s": (65, 0.05), "82s": (50, 0.02), "75s": (100, 0.22),
    "74s": (100, 0.15), "73s": (85, 0.08), "72s": (50, 0.02), "64s": (100, 0.20), "63s": (100, 0.15),
    "62s": (85, 0.08), "53s": (100, 0.18), "52s": (100, 0.12), "43s": (100, 0.18), "42s": (100, 0.12),
    "32s": (100, 0.10), "A9o": (100, 0.42), "A8o": (100, 0.35), "A7o": (100, 0.32), "A6o": (100, 0.28),
    "A5o": (100, 0.32), "A4o": (100, 0.30), "A3o": (100, 0.28), "A2o": (100, 0.25), "K9o": (100, 0.28),
    "K8o": (100, 0.20), "K7o": (100, 0.18), "K6o": (100, 0.15), "K5o": (100, 0.12), "K4o": (100, 0.10),
    "K3o": (100, 0.08), "K2o": (100, 0.05), "Q9o": (100, 0.25), "Q8o": (100, 0.18), "Q7o": (100, 0.12),
    "Q6o": (100, 0.08), "Q5o": (100, 0.05), "Q4o": (85, 0.03), "Q3o": (75, 0.02), "Q2o": (65, 0.01),
    "J9o": (100, 0.22), "J8o": (100, 0.15), "J7o": (100, 0.10), "J6o": (85, 0.05), "J5o": (75, 0.03),
    "J4o": (65, 0.02), "J3o": (50, 0.01), "T9o": (100, 0.25), "T8o": (100, 0.18), "T7o": (100, 0.12),
    "T6o": (85, 0.05), "T5o": (65, 0.02), "T4o": (50, 0.01), "98o": (100, 0.18), "97o": (100, 0.12),
    "96o": (85, 0.05), "95o": (65, 0.02), "87o": (100, 0.15), "86o": (100, 0.10), "85o": (75, 0.05),
    "84o": (50, 0.02), "76o": (100, 0.12), "75o": (85, 0.08), "74o": (65, 0.03), "65o": (100, 0.10),
    "64o": (85, 0.05), "63o": (50, 0.02), "54o": (100, 0.08), "53o": (75, 0.03), "52o": (50, 0.01),
    "43o": (85, 0.05), "42o": (50, 0.02), "32o": (50, 0.01),
}

_CHARTS: Dict[str, Tuple[float, Dict[str, Tuple[int, float]]]] = {
    "UTG": (2.5, _UTG_RAISES),
    "HJ": (2.5, _HJ_RAISES),
    "CO": (2.5, _CO_RAISES),
    "BTN": (2.5, _BTN_RAISES),
    "SB": (3.0, _SB_RAISES),
}


@dataclass(frozen=True)
class ChartAction:
    action: str
    frequency: float
    ev: float
    size: Optional[float] = None

    def to_dict(self) -> dict:
        out = {"action": self.action, "frequency": self.frequency, "ev": self.ev}
        if self.size is not None:
            out["size"] = self.size
        return out


@dataclass(frozen=True)
class HandStrategy:
    """Mixed strategy for one starting hand; action frequencies sum to 100."""

    hand: str
    actions: Tuple[ChartAction, ...]

    @property
    def combos(self) -> int:
        return combo_count(self.hand)

    def frequency(self, action: str) -> float:
        return sum(a.frequency for a in self.actions if a.action == action)

    @property
    def play_frequency(self) -> float:
        """Share of the hand that does not fold, in [0, 1]."""
        return (100.0 - self.frequency("fold")) / 100.0

    @property
    def expected_value(self) -> float:
        return sum(a.frequency / 100.0 * a.ev for a in self.actions)

    @property
    def playable(self) -> bool:
        return self.frequency("fold") < 100

    def to_dict(self) -> dict:
        return {
            "hand": self.hand,
            "actions": [a.to_dict() for a in self.actions],
            "totalCombos": self.combos,
            "ev": round(self.expected_value, 4),
        }


def chart_positions() -> List[str]:
    return list(_CHARTS)


def _chart(position: str) -> Tuple[str, float, Dict[str, Tuple[int, float]]]:
    label = validate_position(position)
    if label not in _CHARTS:
        raise UnknownChart(
            f"No RFI chart for {label} (charts exist for {', '.join(_CHARTS)})"
        )
    open_size, raises = _CHARTS[label]
    return label, open_size, raises


def _strategy(hand: str, open_size: float, raises: Dict[str, Tuple[int, float]]) -> HandStrategy:
    if hand not in raises:
        return HandStrategy(hand=hand, actions=(ChartAction("fold", 100, 0.0),))
    raise_pct, ev = raises[hand]
    actions = [ChartAction("raise", raise_pct, ev, size=open_size)]
    if raise_pct < 100:
        actions.append(ChartAction("fold", 100 - raise_pct, 0.0))
    return HandStrategy(hand=hand, actions=tuple(actions))


def hand_strategy(position: str, hand: str) -> HandStrategy:
    """Chart strategy for one hand; ``hand`` may use either rank order."""
    _label, open_size, raises = _chart(position)
    return _strategy(canonical_hand(hand), open_size, raises)


def chart_strategies(position: str) -> List[HandStrategy]:
    """All 169 hands for a seat, in grid order."""
    _label, open_size, raises = _chart(position)
    return [_strategy(hand, open_size, raises) for hand in all_starting_hands()]


def playable_hands(position: str) -> List[HandStrategy]:
    """Hands that are not a pure fold."""
    return [s for s in chart_strategies(position) if s.playable]


def hands_by_ev(position: str) -> List[HandStrategy]:
    return sorted(chart_strategies(position), key=lambda s: s.expected_value, reverse=True)


def chart_combos(position: str) -> List[dict]:
    """Playable hands as ``{hand, actions: [{action, frequency}]}`` with frequency in [0, 1]."""
    return [
        {"hand": s.hand, "actions": [{"action": "play", "frequency": s.play_frequency}]}
        for s in playable_hands(position)
    ]


def chart_matrix(position: str) -> RangeMatrix:
    return combos_to_matrix(chart_combos(position))


def chart_summary(position: str) -> dict:
    """Combo-weighted action frequencies (percent) and average EV across all 169 hands."""
    strategies = chart_strategies(position)
    total_combos = sum(s.combos for s in strategies)
    summary = {
        "totalHands": len(strategies),
        "playableHands": sum(1 for s in strategies if s.playable),
    }
    for action in CHART_ACTIONS:
        weighted = sum(s.frequency(action) * s.combos for s in strategies)
        summary[f"{action}Freq"] = int(round(weighted / total_combos))
    summary["avgEV"] = round(sum(s.expected_value * s.combos for s in strategies) / total_combos, 2)
    return summary


def gto_strategy(position: str) -> dict:
    """Full chart payload for one seat: scenario, per-hand strategies, summary and matrix."""
    label, open_size, _raises = _chart(position)
    matrix = chart_matrix(label)
    return {
        "scenario": {
            "id": f"6max-cash-{STACK_DEPTH_BB}bb-rfi-{label.lower()}",
            "position": label,
            "action_line": "rfi",
            "stack_depth": STACK_DEPTH_BB,
            "table_size": TABLE_SIZE,
            "open_size": open_size,
        },
        "hands": [s.to_dict() for s in chart_strategies(label)],
        "summary": chart_summary(label),
        "matrix": matrix.to_dict(),
        "stats": compute_range_stats(matrix).to_dict(),
    }
