"""Preflop practice drills: deal a hand, pick a seat, script the answer."""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from rangelab.cards import (
    Card,
    CardLike,
    as_card,
    Hand,
    card_to_string,
    hand_to_display_string,
    remove_cards,
    shuffled_deck,
)
from rangelab.categories import HandCategory, classify_hand
from rangelab.constants import PRACTICE_POSITIONS, validate_position
from rangelab.errors import RangeLabError

PRACTICE_ACTIONS = ["fold", "call", "raise"]

LATE_POSITIONS = {"BTN", "CO", "HJ"}
STEAL_POSITIONS = {"BTN", "SB"}


def correct_action(category: HandCategory, position: str) -> str:
    """Scripted preflop answer for a tier and seat."""
    if category in (HandCategory.PREMIUM, HandCategory.STRONG):
        return "raise"
    if category is HandCategory.PLAYABLE:
        return "raise" if position in LATE_POSITIONS else "call"
    if category is HandCategory.SPECULATIVE:
        return "raise" if position in STEAL_POSITIONS else "fold"
    return "fold"


@dataclass
class PracticeScenario:
    """One dealt practice spot."""

    scenario_id: str
    seed: int
    hero_hand: Hand
    hero_position: str
    hand: str
    category: HandCategory
    correct_action: str
    created_at: str
    dead_cards: Tuple[Card, ...] = ()

    def to_dict(self, reveal: bool = False) -> dict:
        out = {
            "scenario_id": self.scenario_id,
            "seed": self.seed,
            "hero_hand": [card_to_string(c) for c in self.hero_hand],
            "hero_position": self.hero_position,
            "hand": self.hand,
            "dead_cards": [card_to_string(c) for c in self.dead_cards],
            "legal_actions": list(PRACTICE_ACTIONS),
            "created_at": self.created_at,
            "decision_prompt": f"Hero ({self.hero_position}) holds {self.hand}. Fold, call or raise?",
        }
        if reveal:
            out["category"] = self.category.value
            out["correct_action"] = self.correct_action
        return out


def _coerce_seed(seed: object) -> int:
    if isinstance(seed, bool):
        raise RangeLabError(f"seed must be an integer, got {seed!r}")
    try:
        return int(seed)
    except (TypeError, ValueError, OverflowError) as exc:
        raise RangeLabError(f"seed must be an integer, got {seed!r}") from exc


def generate_practice_scenario(
    seed: Optional[int] = None,
    position: Optional[str] = None,
    dead_cards: Iterable[CardLike] = (),
) -> PracticeScenario:
    """
    Deal two hero cards and a seat; the same seed always deals the same spot.

    ``dead_cards`` (a board, or cards already shown) are removed from the
    shuffled deck before dealing.
    """
    if seed is None:
        seed = random.randint(1, 10_000_000)
    seed = _coerce_seed(seed)
    rng = random.Random(seed)
    dead = tuple(as_card(c) for c in dead_cards)
    deck = remove_cards(shuffled_deck(rng), dead)
    if len(deck) < 2:
        raise RangeLabError("Not enough live cards left to deal a hand")
    hero_hand: Hand = (deck[0], deck[1])
    hero_position = rng.choice(PRACTICE_POSITIONS)
    if position is not None:
        hero_position = validate_position(position)

    hand = hand_to_display_string(hero_hand)
    category = classify_hand(hand)
    return PracticeScenario(
        scenario_id=f"prc_{uuid.uuid4().hex[:12]}",
        seed=seed,
        hero_hand=hero_hand,
        hero_position=hero_position,
        hand=hand,
        category=category,
        correct_action=correct_action(category, hero_position),
        created_at=datetime.now(timezone.utc).isoformat(),
        dead_cards=dead,
    )


@dataclass
class PracticeSession:
    """Running tally of graded practice decisions."""

    session_id: str = field(default_factory=lambda: f"ps_{uuid.uuid4().hex[:12]}")
    correct: int = 0
    total: int = 0
    history: List[Dict[str, object]] = field(default_factory=list)
    current: Optional[PracticeScenario] = None

    @property
    def accuracy(self) -> int:
        if self.total <= 0:
            return 0
        return int(round(self.correct / self.total * 100))

    def deal(
        self,
        seed: Optional[int] = None,
        position: Optional[str] = None,
        dead_cards: Iterable[CardLike] = (),
    ) -> PracticeScenario:
        self.current = generate_practice_scenario(
            seed=seed, position=position, dead_cards=dead_cards
        )
        return self.current

    def record(self, scenario: PracticeScenario, action: str) -> dict:
        """Grade one decision and update the tally."""
        chosen = str(action or "").strip().lower()
        if chosen not in PRACTICE_ACTIONS:
            raise ValueError(f"action must be one of {PRACTICE_ACTIONS}")
        is_correct = chosen == scenario.correct_action
        self.total += 1
        if is_correct:
            self.correct += 1
        result = {
            "scenario_id": scenario.scenario_id,
            "hand": scenario.hand,
            "hero_position": scenario.hero_position,
            "category": scenario.category.value,
            "chosen_action": chosen,
            "correct_action": scenario.correct_action,
            "is_correct": is_correct,
        }
        self.history.append(result)
        if self.current is not None and self.current.scenario_id == scenario.scenario_id:
            self.current = None
        return result

    def summary(self) -> dict:
        return {
            "session_id": self.session_id,
            "correct": self.correct,
            "total": self.total,
            "accuracy": self.accuracy,
        }
