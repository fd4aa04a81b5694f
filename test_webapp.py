#!/usr/bin/env python3
"""HTTP tests for the Flask app using its test client."""

from __future__ import annotations

import pytest

from rangelab.service import RangeService
from rangelab.webapp import RuntimeConfig, create_app


def _runtime(**overrides) -> RuntimeConfig:
    values = dict(
        env="test",
        host="127.0.0.1",
        port=8787,
        debug=False,
        allowed_hosts=set(),
        log_level="INFO",
        max_practice_sessions=10,
    )
    values.update(overrides)
    return RuntimeConfig(**values)


@pytest.fixture()
def client():
    app = create_app(runtime=_runtime())
    app.config["TESTING"] = True
    return app.test_client()


def test_health_and_config(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}
    assert resp.headers["X-Content-Type-Options"] == "nosniff"

    config = client.get("/api/config").get_json()
    assert "BTN" in config["positions"]
    assert {a["key"] for a in config["action_types"]} >= {"limp", "3bet", "4bet"}
    assert len(config["categories"]) == 5


def test_opening_range_endpoint(client):
    resp = client.get("/api/ranges?position=BTN")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["position"] == "BTN"
    assert len(body["matrix"]["matrix"]) == 13
    assert body["stats"]["totalHands"] == 1326
    assert body["stats"]["totalCombos"] > 0

    assert client.get("/api/ranges?position=ZZ").status_code == 400
    missing = client.get("/api/ranges")
    assert missing.status_code == 400
    assert missing.get_json()["error"] == "position is required"


def test_range_stats_endpoint(client):
    full = {"matrix": [[1.0] * 13 for _ in range(13)]}
    body = client.post("/api/ranges/stats", json=full).get_json()
    assert body["stats"] == {"totalCombos": 1326, "rangePercentage": 100.0, "totalHands": 1326}

    combos = {"combos": [{"hand": "AKs", "actions": [{"frequency": 0.5}]}]}
    body = client.post("/api/ranges/stats", json=combos).get_json()
    assert body["stats"]["totalCombos"] == 2

    bad = {"matrix": [[1.5] * 13 for _ in range(13)]}
    assert client.post("/api/ranges/stats", json=bad).status_code == 400
    assert client.post("/api/ranges/stats", json={}).status_code == 400


def test_adjust_endpoint(client):
    body = client.post(
        "/api/ranges/adjust",
        json={"base_range_percent": 25, "action_type": "3bet", "board": []},
    ).get_json()
    assert body["adjusted_range_percent"] == 10
    assert body["base_source"] == "base"

    body = client.post("/api/ranges/adjust", json={"archetype": "nit"}).get_json()
    assert body["adjusted_range_percent"] == 15
    assert body["base_source"] == "archetype"

    body = client.post("/api/ranges/adjust", json={"board": ["ah", "kh", "qh"]}).get_json()
    assert body["base_source"] == "preset"
    assert body["board"] == ["Ah", "Kh", "Qh"]
    assert body["adjusted_range_percent"] == 21

    assert client.post("/api/ranges/adjust", json={"action_type": "jam"}).status_code == 400
    assert client.post("/api/ranges/adjust", json={"archetype": "whale"}).status_code == 400
    assert client.post("/api/ranges/adjust", json={"board": ["Zz", "Kh", "Qh"]}).status_code == 400


def test_classify_endpoint(client):
    body = client.post("/api/hands/classify", json={"hand": "AA", "position": "UTG"}).get_json()
    assert body["category"] == "premium"
    assert body["correct_action"] == "raise"
    assert body["combos"] == 6

    body = client.post("/api/hands/classify", json={"cards": "7h2d"}).get_json()
    assert body["hand"] == "72o"
    assert body["category"] == "other"

    resp = client.post("/api/hands/classify", json={"cards": "AhAh"})
    assert resp.status_code == 400
    assert "same card" in resp.get_json()["error"]


def test_practice_flow(client):
    started = client.post("/api/practice/session", json={"seed": 11}).get_json()
    session_id = started["session"]["session_id"]
    scenario = started["scenario"]
    assert "correct_action" not in scenario

    answer = client.post(
        "/api/hands/classify",
        json={"hand": scenario["hand"], "position": scenario["hero_position"]},
    ).get_json()["correct_action"]

    decided = client.post(
        "/api/practice/decision",
        json={"session_id": session_id, "scenario_id": scenario["scenario_id"], "action": answer},
    ).get_json()
    assert decided["result"]["is_correct"] is True
    assert decided["session"]["total"] == 1
    assert decided["session"]["accuracy"] == 100

    again = client.post("/api/practice/decision", json={"session_id": session_id, "action": "fold"})
    assert again.status_code == 400

    dealt = client.post("/api/practice/scenario", json={"session_id": session_id}).get_json()
    assert dealt["scenario"]["scenario_id"] != scenario["scenario_id"]

    summary = client.get(f"/api/practice/session?session_id={session_id}").get_json()
    assert summary["session"]["total"] == 1
    assert len(summary["history"]) == 1

    unknown = client.post("/api/practice/scenario", json={"session_id": "nope"})
    assert unknown.status_code == 400
    assert unknown.get_json()["error"] == "Unknown practice session: nope"


def test_practice_sessions_are_bounded():
    service = RangeService(max_sessions=2)
    ids = [service.practice_start({"seed": s})["session"]["session_id"] for s in (1, 2, 3)]
    assert list(service.practice_sessions) == ids[1:]


def test_unknown_api_path_and_host_guard(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}

    guarded = create_app(runtime=_runtime(allowed_hosts={"ranges.example.com"})).test_client()
    assert guarded.get("/api/health").status_code == 400
    allowed = guarded.get("/api/health", base_url="http://ranges.example.com")
    assert allowed.status_code == 200


def test_chart_endpoints(client):
    body = client.get("/api/charts?position=UTG").get_json()
    assert body["scenario"]["position"] == "UTG"
    assert body["summary"]["playableHands"] == 27

    hand = client.get("/api/charts?position=utg&hand=KQo").get_json()
    assert hand["position"] == "UTG"
    assert hand["playable"] is True
    assert hand["strategy"]["actions"][0] == {"action": "raise", "frequency": 85, "ev": 0.18, "size": 2.5}

    playable = client.get("/api/charts/playable?position=CO").get_json()
    assert len(playable["hands"]) == 70

    assert client.get("/api/charts?position=BB").status_code == 400
    assert client.get("/api/charts?position=UTG&hand=AK").status_code == 400
    assert client.get("/api/charts").status_code == 400
    assert "UTG" in client.get("/api/config").get_json()["chart_positions"]


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/ranges/stats", {"combos": ["AKs"]}),
        ("/api/ranges/stats", {"combos": [{"hand": "AKs", "actions": [0.5]}]}),
        ("/api/ranges/stats", {"matrix": "not a grid"}),
        ("/api/practice/session", {"seed": [1]}),
        ("/api/practice/session", {"seed": 3, "dead_cards": "AhKh"}),
        ("/api/practice/session", {"seed": 3, "dead_cards": [7]}),
    ],
)
def test_malformed_payloads_are_client_errors(client, path, payload):
    resp = client.post(path, json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["error"]


def test_practice_deal_avoids_dead_cards(client):
    body = client.post(
        "/api/practice/session", json={"seed": 3, "dead_cards": ["Ah", "Kh"]}
    ).get_json()
    scenario = body["scenario"]
    assert scenario["dead_cards"] == ["Ah", "Kh"]
    assert not {"Ah", "Kh"} & set(scenario["hero_hand"])
