"""K-mer frequency distances and alignment refined by splitting the guide tree."""

from __future__ import annotations

import cmath
import math
from itertools import combinations
from typing import Sequence

from .guide_tree import GuideTree, build_guide_tree, progressive_align
from .profile import Profile, build_profile, merge_profiles
from .scoring import ScoreMatrix, sum_of_pairs

_CODES = {"A": 0, "C": 1, "G": 2, "T": 3}


def fft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Radix-2 transform using a positive exponent; ``inverse`` undoes it.

    The number of values must be a power of two.
    """
    data = [complex(value) for value in values]
    size = len(data)
    if size == 0 or size & (size - 1):
        raise ValueError("the number of values must be a power of two")

    reversed_bits = [0] * size
    for i in range(1, size):
        reversed_bits[i] = reversed_bits[i >> 1] >> 1 | (i & 1) * (size >> 1)
    data = [data[r] for r in reversed_bits]

    sign = -1 if inverse else 1
    span = 2
    while span <= size:
        root = cmath.exp(sign * 2j * math.pi / span)
        half = span // 2
        for start in range(0, size, span):
            twiddle = 1 + 0j
            for j in range(start, start + half):
                x, y = data[j], data[j + half] * twiddle
                data[j], data[j + half] = x + y, x - y
                twiddle *= root
        span *= 2

    if inverse:
        data = [value / size for value in data]
    return data


def kmer_index(sequence: str, start: int, k: int) -> int:
    """Base-4 number of the k-mer at ``start`` (A=0, C=1, G=2, T=3)."""
    if k < 0:
        raise ValueError("k must not be negative")
    if start < 0 or start + k > len(sequence):
        raise ValueError("the k-mer does not fit inside the sequence")
    index = 0
    for char in sequence[start:start + k]:
        try:
            code = _CODES[char]
        except KeyError:
            raise ValueError(f"character {char!r} is not in the alphabet ACGT") from None
        index = index * 4 + code
    return index


def kmer_frequencies(sequence: str, k: int, size: int) -> list[complex]:
    """Count every k-mer of ``sequence`` into a vector of ``size`` slots."""
    counts = [0j] * size
    for start in range(len(sequence) - k + 1):
        index = kmer_index(sequence, start, k)
        if index >= size:
            raise ValueError("the frequency vector is too short for this k")
        counts[index] += 1
    return counts


def kmer_distance(left: str, right: str, k: int = 3) -> float:
    """One minus the transform-based k-mer similarity of two sequences."""
    if k < 0:
        raise ValueError("k must not be negative")
    size = 1
    while size <= 1 << (2 * k):
        size <<= 1

    left_counts = kmer_frequencies(left, k, size)
    right_counts = kmer_frequencies(right, k, size)
    left_norm = math.sqrt(sum(abs(v) ** 2 for v in left_counts))
    right_norm = math.sqrt(sum(abs(v) ** 2 for v in right_counts))
    if not left_norm or not right_norm:
        raise ValueError("each sequence needs at least one k-mer")

    product = [a * b for a, b in zip(fft(left_counts), fft(right_counts))]
    total = sum(value.real for value in fft(product, inverse=True))
    return 1.0 - total / (left_norm * right_norm)


def kmer_distance_matrix(sequences: Sequence[str]) -> list[list[float]]:
    """Square matrix of single-character k-mer distances, zero on the diagonal."""
    count = len(sequences)
    distances = [[0.0] * count for _ in range(count)]
    for i, j in combinations(range(count), 2):
        distances[i][j] = distances[j][i] = kmer_distance(sequences[i], sequences[j], 1)
    return distances


def aligned_distance(left: str, right: str, matrix: ScoreMatrix) -> float:
    """Column-by-column cost of two rows of the same alignment."""
    if len(left) != len(right):
        raise ValueError("aligned sequences must have the same length")
    return sum(matrix.score(a, b) for a, b in zip(left, right))


def refine_by_tree_split(
    tree: GuideTree, profiles: Sequence[Profile], matrix: ScoreMatrix, best: Profile
) -> tuple[Profile, float]:
    """Re-align across every edge of the tree and keep the cheapest result.

    ``profiles`` holds one profile per tree node, as produced by
    progressive alignment. Returns the best profile and its cost.
    """
    if len(profiles) <= tree.root():
        raise ValueError("one profile is needed for each node of the tree")
    best_profile = best
    best_score = sum_of_pairs(best.sequences, matrix)

    def visit(node: int, outside: Profile) -> None:
        nonlocal best_profile, best_score
        if tree.is_leaf(node):
            return
        left, right = tree.children[node]
        for kept, split in ((right, left), (left, right)):
            joined = merge_profiles(profiles[kept], outside, matrix)
            candidate = merge_profiles(joined, profiles[split], matrix)
            score = sum_of_pairs(candidate.sequences, matrix)
            if score < best_score:
                best_profile, best_score = candidate, score
            visit(split, joined)

    visit(tree.root(), Profile(columns=[], sequences=[], order=[]))
    return best_profile, best_score


def align_kmer(
    sequences: Sequence[str], matrix: ScoreMatrix | None = None
) -> tuple[Profile, float]:
    """Align with a k-mer guide tree, rebuild the tree from that alignment,
    realign, then refine by tree splits. Returns the profile and its cost."""
    if matrix is None:
        matrix = ScoreMatrix()
    seqs = list(sequences)
    if not seqs:
        raise ValueError("at least one sequence is needed")
    count = len(seqs)
    leaves = [build_profile([seq], [index]) for index, seq in enumerate(seqs)]

    tree = build_guide_tree(kmer_distance_matrix(seqs), count)
    middle = progressive_align(tree, leaves, matrix)[tree.root()]

    distances = [[0.0] * count for _ in range(count)]
    for (i, a), (j, b) in combinations(zip(middle.order, middle.sequences), 2):
        distances[i][j] = distances[j][i] = aligned_distance(a, b, matrix)

    tree = build_guide_tree(distances, count)
    profiles = progressive_align(tree, leaves, matrix)
    return refine_by_tree_split(tree, profiles, matrix, profiles[tree.root()])