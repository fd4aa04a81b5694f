"""13x13 starting-hand range matrix and combinatoric statistics.

Layout: rows and columns both run A..2. The diagonal holds pocket pairs, the
upper triangle (row < col) suited hands, the lower triangle (row > col)
offsuit hands. Every cell is a play frequency in [0, 1].
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from rangelab.constants import (
    CARD_RANKS,
    MATRIX_SIZE,
    OFFSUIT_COMBOS,
    PAIR_COMBOS,
    SUITED_COMBOS,
    TOTAL_COMBOS,
)
from rangelab.errors import InvalidFrequency, InvalidHandString, InvalidMatrixShape, RangeLabError


def _validate_frequency(value: Any, clamp: bool = False) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFrequency(f"Frequency must be a number, got {value!r}")
    freq = float(value)
    if math.isnan(freq):
        raise InvalidFrequency("Frequency must not be NaN")
    if clamp:
        return max(0.0, min(1.0, freq))
    if freq < 0.0 or freq > 1.0:
        raise InvalidFrequency(f"Frequency {freq} is outside [0, 1]")
    return freq


def _zero_grid() -> List[List[float]]:
    return [[0.0] * MATRIX_SIZE for _ in range(MATRIX_SIZE)]


@dataclass
class RangeMatrix:
    """Frequency grid owned by the caller; see module docstring for layout."""

    matrix: List[List[float]] = field(default_factory=_zero_grid)
    ranks: str = CARD_RANKS

    def copy(self) -> "RangeMatrix":
        return RangeMatrix(matrix=[list(row) for row in self.matrix], ranks=self.ranks)

    def cells(self) -> Iterable[Tuple[int, int, float]]:
        for row in range(MATRIX_SIZE):
            for col in range(MATRIX_SIZE):
                yield row, col, self.matrix[row][col]

    def hands(self, min_frequency: float = 0.0) -> List[str]:
        """Canonical hands whose frequency is above ``min_frequency``."""
        return [
            indices_to_hand(row, col)
            for row, col, freq in self.cells()
            if freq > min_frequency
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matrix": [list(row) for row in self.matrix],
            "ranks": list(self.ranks),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RangeMatrix":
        """Build a matrix from its JSON shape, validating size and values."""
        raw = payload.get("matrix") if isinstance(payload, Mapping) else None
        if not isinstance(raw, list) or len(raw) != MATRIX_SIZE:
            raise InvalidMatrixShape(f"matrix must be a {MATRIX_SIZE}x{MATRIX_SIZE} list")
        grid: List[List[float]] = []
        for row in raw:
            if not isinstance(row, list) or len(row) != MATRIX_SIZE:
                raise InvalidMatrixShape(f"matrix must be a {MATRIX_SIZE}x{MATRIX_SIZE} list")
            grid.append([_validate_frequency(v) for v in row])
        return cls(matrix=grid)


@dataclass(frozen=True)
class RangeStats:
    total_combos: float
    range_percentage: float
    total_hands: int = TOTAL_COMBOS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCombos": round(self.total_combos, 4),
            "rangePercentage": round(self.range_percentage, 4),
            "totalHands": self.total_hands,
        }


def create_empty_matrix() -> RangeMatrix:
    """Return a new 13x13 matrix with all 169 cells at zero."""
    return RangeMatrix()


def matrix_indices(hand: str) -> Tuple[int, int, bool]:
    """
    Resolve a canonical hand string to ``(row, col, suited)``.

    ``"AKs"`` -> (0, 1, True), ``"QQ"`` -> (2, 2, False),
    ``"AKo"`` -> (1, 0, False). Ranks may be given in either order.

    Raises:
        InvalidHandString: anything that is not one of the 169 hands.
    """
    if not isinstance(hand, str) or len(hand) not in (2, 3):
        raise InvalidHandString(f"Invalid hand: {hand!r}")
    r1 = hand[0].upper()
    r2 = hand[1].upper()
    if r1 not in CARD_RANKS or r2 not in CARD_RANKS:
        raise InvalidHandString(f"Invalid hand: {hand!r}")
    i1 = CARD_RANKS.index(r1)
    i2 = CARD_RANKS.index(r2)

    if len(hand) == 2:
        if i1 != i2:
            raise InvalidHandString(f"Hand {hand!r} needs an 's' or 'o' suffix")
        return i1, i2, False

    suffix = hand[2].lower()
    if i1 == i2 or suffix not in ("s", "o"):
        raise InvalidHandString(f"Invalid hand: {hand!r}")
    high, low = min(i1, i2), max(i1, i2)
    if suffix == "s":
        return high, low, True
    return low, high, False


def indices_to_hand(row: int, col: int) -> str:
    """Inverse of :func:`matrix_indices`."""
    if not (0 <= row < MATRIX_SIZE and 0 <= col < MATRIX_SIZE):
        raise IndexError(f"Matrix position out of range: ({row}, {col})")
    if row == col:
        return f"{CARD_RANKS[row]}{CARD_RANKS[col]}"
    if row < col:
        return f"{CARD_RANKS[row]}{CARD_RANKS[col]}s"
    return f"{CARD_RANKS[col]}{CARD_RANKS[row]}o"


def canonical_hand(hand: str) -> str:
    """Normalize ``"kas"`` / ``"AKs"`` style input to ``"AKs"``."""
    row, col, _suited = matrix_indices(hand)
    return indices_to_hand(row, col)


def set_matrix_value(
    matrix: RangeMatrix,
    hand: str,
    frequency: float,
    clamp: bool = False,
) -> None:
    """
    Write ``frequency`` into the single cell for ``hand``.

    By default frequencies outside [0, 1] raise InvalidFrequency; pass
    ``clamp=True`` to clamp them into range instead.
    """
    row, col, _suited = matrix_indices(hand)
    matrix.matrix[row][col] = _validate_frequency(frequency, clamp=clamp)


def get_matrix_value(matrix: RangeMatrix, hand: str) -> float:
    row, col, _suited = matrix_indices(hand)
    return matrix.matrix[row][col]


def cell_combos(row: int, col: int) -> int:
    if row == col:
        return PAIR_COMBOS
    if row < col:
        return SUITED_COMBOS
    return OFFSUIT_COMBOS


def combo_count(hand: str) -> int:
    """6 for pairs, 4 for suited hands, 12 for offsuit hands."""
    row, col, _suited = matrix_indices(hand)
    return cell_combos(row, col)


def count_combos(matrix: RangeMatrix) -> float:
    """Frequency-weighted number of two-card combos in the range."""
    return sum(cell_combos(row, col) * freq for row, col, freq in matrix.cells() if freq > 0)


def range_percentage(matrix: RangeMatrix) -> float:
    return count_combos(matrix) / TOTAL_COMBOS * 100.0


def compute_range_stats(matrix: RangeMatrix) -> RangeStats:
    total = count_combos(matrix)
    return RangeStats(
        total_combos=total,
        range_percentage=total / TOTAL_COMBOS * 100.0,
    )


def combos_to_matrix(entries: Iterable[Mapping[str, Any]]) -> RangeMatrix:
    """
    Build a matrix from ``[{"hand": "AKs", "actions": [{"frequency": 0.7}]}]``.

    The first action's frequency is used; missing frequencies count as 1.0.
    """
    matrix = create_empty_matrix()
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise RangeLabError(f"combo entry must be an object, got {entry!r}")
        actions = entry.get("actions") or []
        if not isinstance(actions, list):
            raise RangeLabError(f"actions must be a list, got {actions!r}")
        freq = 1.0
        if actions:
            first = actions[0]
            if not isinstance(first, Mapping):
                raise RangeLabError(f"action must be an object, got {first!r}")
            if first.get("frequency") is not None:
                freq = first["frequency"]
        set_matrix_value(matrix, entry.get("hand"), freq)
    return matrix


def all_starting_hands() -> List[str]:
    """All 169 canonical starting hands in grid order."""
    return [indices_to_hand(row, col) for row in range(MATRIX_SIZE) for col in range(MATRIX_SIZE)]
