"""Card and hand value types, parsing, and light board-texture features."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from rangelab.constants import CARD_RANKS, CARD_SUITS
from rangelab.errors import InvalidCardFormat, InvalidHandFormat

RANK_TO_VALUE = {r: 14 - i for i, r in enumerate(CARD_RANKS)}


@dataclass(frozen=True)
class Card:
    """One playing card, e.g. ``Card("A", "h")``."""

    rank: str
    suit: str

    def __str__(self) -> str:
        return card_to_string(self)

    @property
    def value(self) -> int:
        return RANK_TO_VALUE[self.rank]


Hand = Tuple[Card, Card]
CardLike = Union[Card, str]


def parse_card(token: str) -> Card:
    """
    Parse a 2-character card token such as ``"Ah"`` or ``"td"``.

    Rank and suit are matched case-insensitively and normalized to upper-case
    rank plus lower-case suit.

    Raises:
        InvalidCardFormat: wrong length, unknown rank or unknown suit.
    """
    if not isinstance(token, str) or len(token) != 2:
        raise InvalidCardFormat(f"Invalid card string: {token!r}")
    rank = token[0].upper()
    suit = token[1].lower()
    if rank not in CARD_RANKS:
        raise InvalidCardFormat(f"Invalid rank {token[0]!r} in card {token!r}")
    if suit not in CARD_SUITS:
        raise InvalidCardFormat(f"Invalid suit {token[1]!r} in card {token!r}")
    return Card(rank=rank, suit=suit)


def card_to_string(card: Card) -> str:
    return f"{card.rank}{card.suit}"


def as_card(card: CardLike) -> Card:
    """Accept either a Card or its string form."""
    if isinstance(card, Card):
        return card
    return parse_card(card)


def parse_hand(token: str) -> Hand:
    """
    Parse a 4-character hole-card token such as ``"AhKd"``.

    Raises:
        InvalidHandFormat: wrong length, either card malformed, or the same
            card named twice.
    """
    if not isinstance(token, str) or len(token) != 4:
        raise InvalidHandFormat(f"Invalid hand string: {token!r}")
    try:
        first = parse_card(token[:2])
        second = parse_card(token[2:])
    except InvalidCardFormat as exc:
        raise InvalidHandFormat(f"Invalid hand string {token!r}: {exc}") from exc
    if first == second:
        raise InvalidHandFormat(f"Hand {token!r} names the same card twice")
    return (first, second)


def hand_to_display_string(hand: Sequence[Card]) -> str:
    """Canonical starting-hand string: ``"AKs"``, ``"T9o"``, ``"QQ"``."""
    first, second = hand
    high, low = (first, second) if first.value >= second.value else (second, first)
    if high.rank == low.rank:
        return f"{high.rank}{low.rank}"
    suffix = "s" if high.suit == low.suit else "o"
    return f"{high.rank}{low.rank}{suffix}"


def rank_value(rank: str) -> int:
    """A=14, K=13, ..., 2=2."""
    try:
        return RANK_TO_VALUE[rank.upper()]
    except (KeyError, AttributeError) as exc:
        raise InvalidCardFormat(f"Invalid rank: {rank!r}") from exc


def compare_cards(a: Card, b: Card) -> int:
    """Sort comparator putting higher ranks first."""
    return b.value - a.value


def full_deck() -> List[Card]:
    """Return an ordered 52-card deck, aces first."""
    return [Card(rank=r, suit=s) for r in CARD_RANKS for s in CARD_SUITS]


def shuffled_deck(rng: Optional[random.Random] = None) -> List[Card]:
    deck = full_deck()
    (rng or random.Random()).shuffle(deck)
    return deck


def remove_cards(deck: List[Card], cards: Iterable[CardLike]) -> List[Card]:
    used = {as_card(c) for c in cards}
    return [c for c in deck if c not in used]


def is_monotone(board: Sequence[CardLike]) -> bool:
    """True for a 3+ card board whose cards all share one suit."""
    if len(board) < 3:
        return False
    return len({as_card(c).suit for c in board}) == 1


def has_connected_ranks(board: Sequence[CardLike]) -> bool:
    """True when any two rank-adjacent board cards are within two ranks.

    Paired boards count as connected (a gap of zero).
    """
    if len(board) < 3:
        return False
    ranks = sorted(as_card(c).value for c in board)
    return any(b - a <= 2 for a, b in zip(ranks, ranks[1:]))


def board_texture_score(board: Sequence[CardLike]) -> float:
    """Rough texture score; higher means wetter board."""
    if len(board) < 3:
        return 0.0
    cards = [as_card(c) for c in board]
    ranks = sorted((c.value for c in cards), reverse=True)
    suit_counts: dict[str, int] = {}
    for c in cards:
        suit_counts[c.suit] = suit_counts.get(c.suit, 0) + 1
    max_suit = max(suit_counts.values())
    connected = sum(1 for a, b in zip(ranks, ranks[1:]) if abs(a - b) <= 2)
    paired = len(set(ranks)) < len(ranks)
    texture = 0.0
    texture += 0.9 * max(0, max_suit - 2)
    texture += 0.6 * connected
    texture += 0.8 if paired else 0.0
    return texture
