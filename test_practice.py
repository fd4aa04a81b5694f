#!/usr/bin/env python3
"""Tests for scripted preflop practice drills."""

from __future__ import annotations

import pytest

from rangelab.cards import card_to_string, full_deck
from rangelab.categories import HandCategory, classify_hand
from rangelab.constants import PRACTICE_POSITIONS
from rangelab.errors import InvalidCardFormat, RangeLabError, UnknownPosition
from rangelab.practice import (
    PracticeSession,
    correct_action,
    generate_practice_scenario,
)


def test_scripted_actions_by_tier_and_position():
    for position in PRACTICE_POSITIONS:
        assert correct_action(HandCategory.PREMIUM, position) == "raise"
        assert correct_action(HandCategory.STRONG, position) == "raise"
        assert correct_action(HandCategory.OTHER, position) == "fold"

    assert correct_action(HandCategory.PLAYABLE, "CO") == "raise"
    assert correct_action(HandCategory.PLAYABLE, "UTG") == "call"
    assert correct_action(HandCategory.PLAYABLE, "BB") == "call"
    assert correct_action(HandCategory.SPECULATIVE, "SB") == "raise"
    assert correct_action(HandCategory.SPECULATIVE, "HJ") == "fold"


def test_aces_and_seven_deuce_in_every_seat():
    for position in PRACTICE_POSITIONS:
        assert classify_hand("AA") is HandCategory.PREMIUM
        assert correct_action(classify_hand("AA"), position) == "raise"
        assert classify_hand("72o") is HandCategory.OTHER
        assert correct_action(classify_hand("72o"), position) == "fold"


def test_seeded_scenarios_are_reproducible():
    first = generate_practice_scenario(seed=42)
    second = generate_practice_scenario(seed=42)
    assert first.hero_hand == second.hero_hand
    assert first.hero_position == second.hero_position
    assert first.scenario_id != second.scenario_id
    assert first.hero_hand[0] != first.hero_hand[1]
    assert first.hero_position in PRACTICE_POSITIONS
    assert first.category is classify_hand(first.hand)
    assert first.correct_action == correct_action(first.category, first.hero_position)


def test_position_override():
    scenario = generate_practice_scenario(seed=1, position="btn")
    assert scenario.hero_position == "BTN"
    assert scenario.hero_hand == generate_practice_scenario(seed=1).hero_hand
    with pytest.raises(UnknownPosition):
        generate_practice_scenario(seed=1, position="dealer")


def test_scenario_hides_answer_unless_revealed():
    scenario = generate_practice_scenario(seed=9)
    public = scenario.to_dict()
    assert "correct_action" not in public
    assert public["legal_actions"] == ["fold", "call", "raise"]
    assert len(public["hero_hand"]) == 2
    revealed = scenario.to_dict(reveal=True)
    assert revealed["correct_action"] == scenario.correct_action


def test_session_tally():
    session = PracticeSession()
    assert session.accuracy == 0

    scenario = session.deal(seed=5)
    right = session.record(scenario, scenario.correct_action.upper())
    assert right["is_correct"] is True
    assert session.current is None

    scenario = session.deal(seed=6)
    wrong = next(a for a in ("fold", "call", "raise") if a != scenario.correct_action)
    assert session.record(scenario, wrong)["is_correct"] is False

    scenario = session.deal(seed=7)
    session.record(scenario, scenario.correct_action)

    assert session.summary()["correct"] == 2
    assert session.summary()["total"] == 3
    assert session.accuracy == 67
    assert len(session.history) == 3

    with pytest.raises(ValueError):
        session.record(scenario, "shove")


def test_dead_cards_stay_out_of_the_deal():
    live = generate_practice_scenario(seed=5)
    dealt = [card_to_string(c) for c in live.hero_hand]

    blocked = generate_practice_scenario(seed=5, dead_cards=dealt)
    assert set(blocked.hero_hand).isdisjoint(live.hero_hand)
    assert blocked.to_dict()["dead_cards"] == dealt

    with pytest.raises(InvalidCardFormat):
        generate_practice_scenario(seed=5, dead_cards=["Zz"])
    with pytest.raises(RangeLabError):
        generate_practice_scenario(seed=5, dead_cards=full_deck()[:51])


@pytest.mark.parametrize("seed", [[1], {"n": 1}, "abc", True, float("inf")])
def test_non_integer_seed_is_an_input_error(seed):
    with pytest.raises(RangeLabError):
        generate_practice_scenario(seed=seed)
