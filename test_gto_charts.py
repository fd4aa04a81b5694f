#!/usr/bin/env python3
"""Tests for the static RFI strategy charts."""

from __future__ import annotations

import pytest

from rangelab.errors import InvalidHandString, UnknownChart, UnknownPosition
from rangelab.gto_charts import (
    chart_combos,
    chart_matrix,
    chart_positions,
    chart_strategies,
    chart_summary,
    gto_strategy,
    hand_strategy,
    hands_by_ev,
    playable_hands,
)
from rangelab.range_matrix import compute_range_stats, get_matrix_value


def test_chart_positions():
    assert chart_positions() == ["UTG", "HJ", "CO", "BTN", "SB"]


def test_hand_strategy_lookup():
    aces = hand_strategy("UTG", "AA")
    assert [(a.action, a.frequency, a.size) for a in aces.actions] == [("raise", 100, 2.5)]
    assert aces.actions[0].ev == 2.45
    assert aces.playable
    assert aces.play_frequency == 1.0
    assert aces.combos == 6

    mixed = hand_strategy("utg", "QKo")
    assert mixed.hand == "KQo"
    assert mixed.frequency("raise") == 85
    assert mixed.frequency("fold") == 15
    assert mixed.play_frequency == pytest.approx(0.85)

    trash = hand_strategy("UTG", "72o")
    assert not trash.playable
    assert trash.to_dict()["actions"] == [{"action": "fold", "frequency": 100, "ev": 0.0}]

    assert hand_strategy("SB", "AA").actions[0].size == 3.0


def test_unknown_seats_and_hands():
    with pytest.raises(UnknownChart):
        hand_strategy("BB", "AA")
    with pytest.raises(KeyError):
        playable_hands("UTG1")
    with pytest.raises(UnknownPosition):
        hand_strategy("XX", "AA")
    with pytest.raises(InvalidHandString):
        hand_strategy("BTN", "AK")


def test_every_strategy_is_a_full_mix():
    for position in chart_positions():
        strategies = chart_strategies(position)
        assert len(strategies) == 169
        for strategy in strategies:
            assert sum(a.frequency for a in strategy.actions) == 100
            assert all(0 <= a.frequency <= 100 for a in strategy.actions)


def test_playable_hands_widen_towards_the_button():
    counts = {position: len(playable_hands(position)) for position in chart_positions()}
    assert counts == {"UTG": 27, "HJ": 37, "CO": 70, "BTN": 105, "SB": 158}
    assert all(s.playable for s in playable_hands("CO"))


def test_chart_matrix_uses_play_frequency():
    matrix = chart_matrix("UTG")
    assert get_matrix_value(matrix, "AA") == 1.0
    assert get_matrix_value(matrix, "KQo") == pytest.approx(0.85)
    assert get_matrix_value(matrix, "72o") == 0.0
    assert compute_range_stats(matrix).total_combos == pytest.approx(150.3)
    assert len(chart_combos("UTG")) == 27

    widths = [compute_range_stats(chart_matrix(p)).range_percentage for p in ("UTG", "HJ", "CO", "BTN")]
    assert widths == sorted(widths)


def test_chart_summary():
    assert chart_summary("UTG") == {
        "totalHands": 169,
        "playableHands": 27,
        "raiseFreq": 11,
        "callFreq": 0,
        "foldFreq": 89,
        "allinFreq": 0,
        "avgEV": 0.07,
    }


def test_hands_by_ev_and_payload():
    assert hands_by_ev("UTG")[0].hand == "AA"

    payload = gto_strategy("btn")
    assert payload["scenario"]["id"] == "6max-cash-200bb-rfi-btn"
    assert payload["scenario"]["open_size"] == 2.5
    assert len(payload["hands"]) == 169
    assert payload["summary"]["playableHands"] == 105
    assert len(payload["matrix"]["matrix"]) == 13
    assert payload["stats"]["totalHands"] == 1326
