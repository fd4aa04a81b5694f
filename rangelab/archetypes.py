"""Opponent archetypes and range presets used as starting points for range reads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from rangelab.errors import UnknownArchetype


@dataclass(frozen=True)
class Archetype:
    """Opponent style label; VPIP doubles as the starting range percentage."""

    key: str
    label: str
    description: str
    vpip: float
    pfr: float
    af: float

    @property
    def base_range_percent(self) -> float:
        return self.vpip


@dataclass(frozen=True)
class RangePreset:
    key: str
    label: str
    description: str
    percentage: float


ARCHETYPES: Dict[str, Archetype] = {
    "rock": Archetype(
        key="rock",
        label="Rock",
        description="Plays only the top of the deck and rarely bluffs.",
        vpip=10,
        pfr=8,
        af=1.5,
    ),
    "nit": Archetype(
        key="nit",
        label="Nit",
        description="Very selective range, avoids high-variance spots.",
        vpip=15,
        pfr=12,
        af=2.0,
    ),
    "tag": Archetype(
        key="tag",
        label="TAG",
        description="Solid tight-aggressive player with disciplined ranges.",
        vpip=22,
        pfr=18,
        af=3.0,
    ),
    "lag": Archetype(
        key="lag",
        label="LAG",
        description="Wide ranges, frequent pressure and barreling.",
        vpip=30,
        pfr=25,
        af=4.0,
    ),
    "maniac": Archetype(
        key="maniac",
        label="Maniac",
        description="Extreme aggression and over-bluff frequency.",
        vpip=45,
        pfr=35,
        af=5.0,
    ),
    "fish": Archetype(
        key="fish",
        label="Fish",
        description="Recreational player who enters too many pots passively.",
        vpip=50,
        pfr=10,
        af=1.0,
    ),
    "station": Archetype(
        key="station",
        label="Calling Station",
        description="Calls too much, under-bluffs, hates folding pairs.",
        vpip=40,
        pfr=8,
        af=0.5,
    ),
}


RANGE_PRESETS: Dict[str, RangePreset] = {
    "tight": RangePreset("tight", "Tight", "Premium holdings only.", 12),
    "tag": RangePreset("tag", "TAG", "Tight-aggressive regular.", 18),
    "standard": RangePreset("standard", "Standard", "Typical player range.", 25),
    "lag": RangePreset("lag", "LAG", "Loose-aggressive regular.", 35),
    "fish": RangePreset("fish", "Loose-Passive", "Recreational player.", 50),
}

DEFAULT_PRESET = "standard"


def archetype_by_key(key: str) -> Archetype:
    """Lookup helper with strict validation."""
    if key not in ARCHETYPES:
        raise UnknownArchetype(f"Unknown archetype: {key}")
    return ARCHETYPES[key]


def preset_by_key(key: str) -> RangePreset:
    if key not in RANGE_PRESETS:
        raise UnknownArchetype(f"Unknown range preset: {key}")
    return RANGE_PRESETS[key]


def archetype_options() -> list[dict]:
    """Serialize archetypes and presets for UI dropdowns."""
    return [
        {
            "key": v.key,
            "label": v.label,
            "description": v.description,
            "vpip": v.vpip,
            "pfr": v.pfr,
            "af": v.af,
        }
        for v in ARCHETYPES.values()
    ]


def preset_options() -> list[dict]:
    return [
        {
            "key": p.key,
            "label": p.label,
            "description": p.description,
            "percentage": p.percentage,
        }
        for p in RANGE_PRESETS.values()
    ]
