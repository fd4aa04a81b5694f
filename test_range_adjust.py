#!/usr/bin/env python3
"""Tests for action/board range adjustments and opponent archetypes."""

from __future__ import annotations

import pytest

from rangelab.archetypes import (
    ARCHETYPES,
    archetype_by_key,
    archetype_options,
    preset_by_key,
)
from rangelab.cards import parse_card
from rangelab.errors import RangeLabError, UnknownActionType, UnknownArchetype
from rangelab.range_adjust import (
    adjust_for_archetype,
    adjust_range,
    board_adjustment,
    range_adjustment_breakdown,
)


def test_three_bet_narrows_range():
    assert adjust_range(25, "3bet", []) == 10


def test_result_is_clamped_to_bounds():
    assert adjust_range(100, "limp", []) == 100
    assert adjust_range(0.2, "4bet") == 1
    assert adjust_range(0, None) == 1


def test_no_action_leaves_base_untouched():
    assert adjust_range(37) == 37
    assert adjust_range(40, None, ["Ah", "Kh"]) == 40


def test_board_texture_discounts():
    assert adjust_range(40, None, ["Ah", "Kh", "Qh"]) == 34
    assert adjust_range(40, None, ["Ah", "8h", "2h"]) == 36
    assert adjust_range(40, None, ["Ah", "Kd", "2c"]) == 38
    assert adjust_range(40, None, ["Ah", "8d", "2c"]) == 40
    cards = [parse_card("9s"), parse_card("Ts"), parse_card("Js")]
    assert adjust_range(40, "standard_raise", cards) == 34
    assert board_adjustment(["Ah", "Kh"]) == 1.0


def test_halves_round_up():
    assert adjust_range(2.5, "standard_raise") == 3
    assert adjust_range(5, "limp") == 8


def test_invalid_inputs():
    with pytest.raises(UnknownActionType):
        adjust_range(25, "overbet_jam")
    with pytest.raises(RangeLabError):
        adjust_range("25", "3bet")
    with pytest.raises(RangeLabError):
        adjust_range(float("inf"), "3bet")


def test_breakdown_reports_factors():
    breakdown = range_adjustment_breakdown(30, "big_raise", ["7c", "8c", "9c"])
    assert breakdown["action_multiplier"] == 0.7
    assert breakdown["monotone"] is True
    assert breakdown["connected"] is True
    assert breakdown["board_adjustment"] == pytest.approx(0.855)
    assert breakdown["texture_score"] == pytest.approx(2.1)
    assert breakdown["adjusted_range_percent"] == 18


def test_archetypes_supply_base_range():
    assert archetype_by_key("rock").base_range_percent == 10
    assert adjust_for_archetype("rock", "3bet") == 4
    assert adjust_for_archetype("fish", "limp") == 75
    assert adjust_for_archetype("station") == 40
    assert {opt["key"] for opt in archetype_options()} == set(ARCHETYPES)
    assert preset_by_key("standard").percentage == 25

    with pytest.raises(UnknownArchetype):
        archetype_by_key("whale")
    with pytest.raises(KeyError):
        preset_by_key("whale")
