"""Application service layer for the range toolkit."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, List, Optional

from rangelab.archetypes import (
    DEFAULT_PRESET,
    archetype_by_key,
    archetype_options,
    preset_by_key,
    preset_options,
)
from rangelab.cards import as_card, card_to_string, hand_to_display_string, parse_hand
from rangelab.categories import category_summary, classify_hand, tier_frequency
from rangelab.constants import POSITIONS, PRACTICE_POSITIONS, SUIT_SYMBOLS, validate_position
from rangelab.errors import RangeLabError
from rangelab.gto_charts import chart_positions, gto_strategy, hand_strategy, playable_hands
from rangelab.opening_ranges import opening_range
from rangelab.practice import PRACTICE_ACTIONS, PracticeSession, correct_action
from rangelab.range_adjust import ACTION_MULTIPLIERS, range_adjustment_breakdown
from rangelab.range_matrix import (
    RangeMatrix,
    canonical_hand,
    combo_count,
    compute_range_stats,
    combos_to_matrix,
)

logger = logging.getLogger(__name__)


class RangeService:
    """High-level API used by HTTP handlers and scripts."""

    DEFAULT_MAX_SESSIONS = 500

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS):
        self.max_sessions = max(1, int(max_sessions))
        self.practice_sessions: "OrderedDict[str, PracticeSession]" = OrderedDict()
        self._lock = threading.Lock()

    def app_config(self) -> Dict[str, Any]:
        return {
            "positions": list(POSITIONS),
            "practice_positions": list(PRACTICE_POSITIONS),
            "practice_actions": list(PRACTICE_ACTIONS),
            "action_types": [
                {"key": key, "multiplier": mult} for key, mult in ACTION_MULTIPLIERS.items()
            ],
            "archetypes": archetype_options(),
            "range_presets": preset_options(),
            "categories": category_summary(),
            "chart_positions": chart_positions(),
            "suit_symbols": dict(SUIT_SYMBOLS),
        }

    def opening_range(self, position: str) -> Dict[str, Any]:
        return opening_range(position)

    def gto_chart(self, position: str, hand: Optional[str] = None) -> Dict[str, Any]:
        """Full RFI chart for a seat, or one hand's strategy when ``hand`` is given."""
        if hand:
            strategy = hand_strategy(position, hand)
            return {
                "position": validate_position(position),
                "strategy": strategy.to_dict(),
                "playable": strategy.playable,
            }
        return gto_strategy(position)

    def playable_chart_hands(self, position: str) -> Dict[str, Any]:
        return {
            "position": validate_position(position),
            "hands": [s.to_dict() for s in playable_hands(position)],
        }

    def range_stats(self, payload: dict) -> Dict[str, Any]:
        """Stats for either a full ``matrix`` or a ``combos`` list."""
        if "matrix" in payload:
            matrix = RangeMatrix.from_dict(payload)
        elif "combos" in payload:
            combos = payload.get("combos")
            if not isinstance(combos, list):
                raise RangeLabError("combos must be a list")
            matrix = combos_to_matrix(combos)
        else:
            raise RangeLabError("matrix or combos is required")
        return {
            "matrix": matrix.to_dict(),
            "stats": compute_range_stats(matrix).to_dict(),
        }

    def adjust(self, payload: dict) -> Dict[str, Any]:
        """
        Adjusted range percentage from a base, an archetype or a preset.

        Priority for the starting width: explicit ``base_range_percent``,
        then ``archetype``, then ``preset`` (default: standard).
        """
        base = payload.get("base_range_percent")
        source = "base"
        if base is None and payload.get("archetype"):
            base = archetype_by_key(str(payload["archetype"])).base_range_percent
            source = "archetype"
        elif base is None:
            base = preset_by_key(str(payload.get("preset") or DEFAULT_PRESET)).percentage
            source = "preset"

        board_raw = payload.get("board") or []
        if not isinstance(board_raw, list):
            raise RangeLabError("board must be a list of cards")
        board = [as_card(c) for c in board_raw]

        result = range_adjustment_breakdown(base, payload.get("action_type"), board)
        result["board"] = [card_to_string(c) for c in board]
        result["base_source"] = source
        return result

    def classify(self, payload: dict) -> Dict[str, Any]:
        """Classify a canonical ``hand`` ("AKs") or hole ``cards`` ("AhKh")."""
        cards = payload.get("cards")
        if cards:
            hand = hand_to_display_string(parse_hand(str(cards)))
        else:
            hand = canonical_hand(str(payload.get("hand", "")))
        category = classify_hand(hand)
        out: Dict[str, Any] = {
            "hand": hand,
            "category": category.value,
            "default_frequency": tier_frequency(hand),
            "combos": combo_count(hand),
        }
        position = payload.get("position")
        if position:
            label = validate_position(str(position))
            out["position"] = label
            out["correct_action"] = correct_action(category, label)
        return out

    def _session(self, session_id: str) -> PracticeSession:
        session = self.practice_sessions.get(str(session_id))
        if session is None:
            raise KeyError(f"Unknown practice session: {session_id}")
        return session

    @staticmethod
    def _dead_cards(payload: dict) -> list:
        dead = payload.get("dead_cards") or []
        if not isinstance(dead, list):
            raise RangeLabError("dead_cards must be a list of cards")
        return dead

    def practice_start(self, payload: Optional[dict] = None) -> Dict[str, Any]:
        payload = payload or {}
        session = PracticeSession()
        scenario = session.deal(
            seed=payload.get("seed"),
            position=payload.get("position"),
            dead_cards=self._dead_cards(payload),
        )
        with self._lock:
            self.practice_sessions[session.session_id] = session
            while len(self.practice_sessions) > self.max_sessions:
                evicted, _ = self.practice_sessions.popitem(last=False)
                logger.info("Evicted practice session %s", evicted)
        return {"session": session.summary(), "scenario": scenario.to_dict()}

    def practice_scenario(self, payload: dict) -> Dict[str, Any]:
        """Deal the next scenario in an existing session."""
        with self._lock:
            session = self._session(payload.get("session_id", ""))
            scenario = session.deal(
                seed=payload.get("seed"),
                position=payload.get("position"),
                dead_cards=self._dead_cards(payload),
            )
        return {"session": session.summary(), "scenario": scenario.to_dict()}

    def practice_decision(self, payload: dict) -> Dict[str, Any]:
        with self._lock:
            session = self._session(payload.get("session_id", ""))
            scenario = session.current
            if scenario is None:
                raise RangeLabError("No open scenario in this session; deal a new one first")
            if payload.get("scenario_id") and payload["scenario_id"] != scenario.scenario_id:
                raise RangeLabError("scenario_id does not match the open scenario")
            result = session.record(scenario, payload.get("action", ""))
        return {"result": result, "session": session.summary()}

    def practice_summary(self, session_id: str) -> Dict[str, Any]:
        with self._lock:
            session = self._session(session_id)
            history: List[Dict[str, Any]] = list(session.history)
        return {"session": session.summary(), "history": history}
