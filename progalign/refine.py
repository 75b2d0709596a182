"""Edit-distance guided alignment and local refinement of alignments."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Sequence

from .guide_tree import build_guide_tree, progressive_align
from .profile import build_profile, merge_profiles
from .scoring import GAP, ScoreMatrix, sum_of_pairs


def edit_distance(left: str, right: str, matrix: ScoreMatrix) -> float:
    """Minimum cost of a pairwise global alignment of two sequences."""
    previous = [j * matrix.gap_penalty for j in range(len(right) + 1)]
    for i, a in enumerate(left, start=1):
        current = [i * matrix.gap_penalty]
        for j, b in enumerate(right, start=1):
            current.append(
                min(
                    previous[j - 1] + matrix.score(a, b),
                    current[j - 1] + matrix.score(GAP, b),
                    previous[j] + matrix.score(a, GAP),
                )
            )
        previous = current
    return float(previous[-1])


def distance_matrix(sequences: Sequence[str], matrix: ScoreMatrix) -> list[list[float]]:
    """Square matrix of pairwise edit distances."""
    count = len(sequences)
    distances = [[0.0] * count for _ in range(count)]
    for i, j in combinations(range(count), 2):
        distances[i][j] = distances[j][i] = edit_distance(sequences[i], sequences[j], matrix)
    return distances


def refine_leave_one_out(
    aligned: Sequence[str],
    order: Sequence[int],
    originals: Sequence[str],
    matrix: ScoreMatrix,
) -> tuple[list[str], float]:
    """Remove each row in turn and realign its original sequence to the rest.

    ``order`` gives the index in ``originals`` of each aligned row.
    Returns the cheapest alignment found and its cost.
    """
    rows = list(aligned)
    if len(order) != len(rows):
        raise ValueError("one order entry is needed for each aligned row")
    best_rows, best_score = rows, sum_of_pairs(rows, matrix)
    for i, index in enumerate(order):
        rest = build_profile(rows[:i] + rows[i + 1:], [])
        single = build_profile([originals[index]], [])
        merged = merge_profiles(rest, single, matrix)
        score = sum_of_pairs(merged.sequences, matrix)
        if score < best_score:
            best_rows, best_score = merged.sequences, score
    return best_rows, best_score


def _column_cost(char: str, counts: Counter, matrix: ScoreMatrix) -> float:
    return sum(
        (number - (other == char)) * matrix.score(char, other)
        for other, number in counts.items()
    )


def refine_gap_swaps(aligned: Sequence[str], matrix: ScoreMatrix) -> list[str]:
    """Slide residues into neighbouring gaps while that lowers the cost.

    A residue may move anywhere between its neighbouring residues in the
    same row; passes repeat until no move helps.
    """
    rows = [list(row) for row in aligned]
    if not rows:
        raise ValueError("an alignment needs at least one sequence")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("aligned sequences must all have the same length")

    counts = [Counter(column) for column in zip(*rows)]
    residues = [
        [-1, *(pos for pos, char in enumerate(row) if char != GAP), width] for row in rows
    ]

    def cost(row: list[str], p: int, q: int) -> float:
        return _column_cost(row[p], counts[p], matrix) + _column_cost(row[q], counts[q], matrix)

    def swap(row: list[str], p: int, q: int) -> None:
        counts[p][row[p]] -= 1
        counts[q][row[q]] -= 1
        row[p], row[q] = row[q], row[p]
        counts[p][row[p]] += 1
        counts[q][row[q]] += 1

    stable = False
    while not stable:
        stable = True
        for row, positions in zip(rows, residues):
            for j in range(1, len(positions) - 1):
                p, low, high = positions[j], positions[j - 1], positions[j + 1]
                for q in range(low + 1, high):
                    before = cost(row, p, q)
                    swap(row, p, q)
                    if cost(row, p, q) < before:
                        stable = False
                        positions[j] = q
                        break
                    swap(row, p, q)

    return ["".join(row) for row in rows]


def align(
    sequences: Sequence[str], matrix: ScoreMatrix | None = None
) -> tuple[list[str], float]:
    """Progressive alignment on an edit-distance guide tree, then gap swaps.

    Rows come back in the order the guide tree joined them.
    """
    if matrix is None:
        matrix = ScoreMatrix()
    seqs = list(sequences)
    if not seqs:
        raise ValueError("at least one sequence is needed")
    tree = build_guide_tree(distance_matrix(seqs, matrix), len(seqs))
    leaves = [build_profile([seq], [index]) for index, seq in enumerate(seqs)]
    root = progressive_align(tree, leaves, matrix)[tree.root()]
    rows = refine_gap_swaps(root.sequences, matrix)
    return rows, sum_of_pairs(rows, matrix)