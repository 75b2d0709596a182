"""Exact minimum-cost alignment of three sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import product

from .scoring import GAP, ScoreMatrix


@dataclass(frozen=True)
class ThreeWayAlignment:
    """Optimal alignment of three sequences.

    Each move is a bit mask: bit 0, 1, 2 set when the first, second or
    third sequence contributes a character to that column.
    """

    cost: float
    moves: tuple[int, ...]
    rows: tuple[str, str, str]

    @property
    def code(self) -> str:
        """The moves written as a string of digits."""
        return "".join(str(move) for move in self.moves)


def _advance(state: tuple[int, ...], mask: int, sign: int = 1) -> tuple[int, ...]:
    return tuple(pos + sign * (mask >> bit & 1) for bit, pos in enumerate(state))


def align_three(
    first: str, second: str, third: str, matrix: ScoreMatrix | None = None
) -> ThreeWayAlignment:
    """Find a minimum sum-of-pairs alignment by dynamic programming over all moves.

    Among equal-cost predecessors the last one tried wins.
    """
    if matrix is None:
        matrix = ScoreMatrix(alphabet=None)
    seqs = (first, second, third)
    end = tuple(len(s) for s in seqs)
    origin = (0, 0, 0)

    cost: dict[tuple[int, ...], float] = {origin: 0}
    via: dict[tuple[int, ...], int] = {}

    for state in product(*(range(n + 1) for n in end)):
        base = cost[state]
        for mask in range(1, 8):
            target = _advance(state, mask)
            if any(t > n for t, n in zip(target, end)):
                continue
            a, b, c = (
                seq[pos] if mask >> bit & 1 else GAP
                for bit, (seq, pos) in enumerate(zip(seqs, state))
            )
            total = base + matrix.score(a, b) + matrix.score(b, c) + matrix.score(a, c)
            if total <= cost.get(target, math.inf):
                cost[target] = total
                via[target] = mask

    moves = []
    state = end
    while state != origin:
        mask = via[state]
        moves.append(mask)
        state = _advance(state, mask, -1)
    moves.reverse()

    rows = []
    for bit, seq in enumerate(seqs):
        chars = iter(seq)
        rows.append("".join(next(chars) if mask >> bit & 1 else GAP for mask in moves))

    return ThreeWayAlignment(cost=cost[end], moves=tuple(moves), rows=tuple(rows))