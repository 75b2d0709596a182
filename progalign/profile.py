"""Alignment profiles and profile-to-profile alignment."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .scoring import GAP, ScoreMatrix

Column = dict[str, float]

GAP_COLUMN: Column = {GAP: 1.0}


@dataclass
class Profile:
    """A block of aligned sequences with per-column character frequencies.

    ``order`` holds the input index of each sequence, row for row.
    """

    columns: list[Column]
    sequences: list[str]
    order: list[int] = field(default_factory=list)


def build_profile(sequences: Sequence[str], order: Sequence[int]) -> Profile:
    """Build a profile from equally long aligned sequences."""
    if not sequences:
        raise ValueError("a profile needs at least one sequence")
    rows = list(sequences)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("aligned sequences must all have the same length")
    columns = []
    for column in zip(*rows):
        counts = Counter(column)
        columns.append({char: counts[char] / len(rows) for char in sorted(counts)})
    return Profile(columns=columns, sequences=rows, order=list(order))


def column_score(left: Column, right: Column, matrix: ScoreMatrix) -> float:
    """Expected pairwise cost between two frequency columns."""
    return sum(
        left_freq * right_freq * matrix.score(a, b)
        for a, left_freq in left.items()
        for b, right_freq in right.items()
    )


class _Step(Enum):
    BOTH = 0
    LEFT = 1
    RIGHT = 2


def merge_profiles(left: Profile, right: Profile, matrix: ScoreMatrix) -> Profile:
    """Align two profiles against each other and return the combined profile.

    Ties prefer aligning both columns, then consuming the left profile alone.
    """
    n, m = len(left.columns), len(right.columns)
    left_gap = [column_score(col, GAP_COLUMN, matrix) for col in left.columns]
    right_gap = [column_score(GAP_COLUMN, col, matrix) for col in right.columns]

    cost = [[0.0] * (m + 1) for _ in range(n + 1)]
    step = [[_Step.BOTH] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        cost[i][0] = cost[i - 1][0] + left_gap[i - 1]
        step[i][0] = _Step.LEFT
    for j in range(1, m + 1):
        cost[0][j] = cost[0][j - 1] + right_gap[j - 1]
        step[0][j] = _Step.RIGHT

    for i, left_col in enumerate(left.columns, start=1):
        for j, right_col in enumerate(right.columns, start=1):
            both = cost[i - 1][j - 1] + column_score(left_col, right_col, matrix)
            right_only = cost[i][j - 1] + right_gap[j - 1]
            left_only = cost[i - 1][j] + left_gap[i - 1]
            if both <= right_only and both <= left_only:
                cost[i][j], step[i][j] = both, _Step.BOTH
            elif left_only <= right_only:
                cost[i][j], step[i][j] = left_only, _Step.LEFT
            else:
                cost[i][j], step[i][j] = right_only, _Step.RIGHT

    path: list[tuple[int | None, int | None]] = []
    i, j = n, m
    while i > 0 or j > 0:
        move = step[i][j]
        if move is _Step.BOTH:
            i, j = i - 1, j - 1
            path.append((i, j))
        elif move is _Step.LEFT:
            i -= 1
            path.append((i, None))
        else:
            j -= 1
            path.append((None, j))
    path.reverse()

    merged = [
        "".join(GAP if i is None else row[i] for i, _ in path) for row in left.sequences
    ]
    merged += [
        "".join(GAP if j is None else row[j] for _, j in path) for row in right.sequences
    ]
    return build_profile(merged, [*left.order, *right.order])