"""Pairwise character scoring and sum-of-pairs alignment cost."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

GAP = "-"


@dataclass(frozen=True)
class ScoreMatrix:
    """Cost of placing two characters in the same alignment column.

    Lower is better. Any pair involving a gap costs ``gap_penalty``.
    When ``alphabet`` is set, pairs of characters outside it cost nothing;
    when it is ``None`` every pair is scored by plain equality.
    """

    gap_penalty: float = 2
    mismatch: float = 3
    match: float = 0
    alphabet: str | None = "ACGT"

    def score(self, a: str, b: str) -> float:
        """Return the cost of aligning ``a`` against ``b``."""
        if a == GAP or b == GAP:
            return self.gap_penalty
        if self.alphabet is not None and (a not in self.alphabet or b not in self.alphabet):
            return 0
        return self.match if a == b else self.mismatch


def sum_of_pairs(sequences: Sequence[str], matrix: ScoreMatrix) -> float:
    """Total pairwise cost of an alignment, summed column by column."""
    if not sequences:
        raise ValueError("an alignment needs at least one sequence")
    width = len(sequences[0])
    if any(len(row) != width for row in sequences):
        raise ValueError("aligned sequences must all have the same length")
    return sum(
        matrix.score(a, b)
        for column in zip(*sequences)
        for a, b in combinations(column, 2)
    )