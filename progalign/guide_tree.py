"""Average-linkage guide tree and progressive alignment along it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .profile import Profile, merge_profiles
from .scoring import ScoreMatrix


@dataclass
class GuideTree:
    """Binary tree whose leaves are nodes ``0 .. leaf_count - 1``.

    Internal nodes are numbered from ``leaf_count`` upward in the order
    they were joined; ``children`` maps each to its (left, right) pair.
    """

    leaf_count: int
    children: dict[int, tuple[int, int]] = field(default_factory=dict)

    def is_leaf(self, node: int) -> bool:
        """True when ``node`` has no children."""
        return node not in self.children

    def root(self) -> int:
        """Index of the most recently joined node (the root once complete)."""
        return self.leaf_count + len(self.children) - 1


def build_guide_tree(distances: Sequence[Sequence[float]], count: int) -> GuideTree:
    """Join the closest clusters repeatedly, averaging distances by cluster size.

    Only the leading ``count`` by ``count`` block of ``distances`` is read.
    """
    if count < 1:
        raise ValueError("a guide tree needs at least one sequence")
    if len(distances) < count or any(len(row) < count for row in distances[:count]):
        raise ValueError("distance matrix is smaller than the number of sequences")

    total = 2 * count - 1
    dist = [[0.0] * total for _ in range(total)]
    for i, row in enumerate(distances[:count]):
        dist[i][:count] = (float(value) for value in row[:count])

    size = [1] * count + [0] * (count - 1)
    active = list(range(count))
    tree = GuideTree(count)

    for node in range(count, total):
        best = math.inf
        pair: tuple[int, int] | None = None
        for a in active:
            for b in active:
                if a != b and dist[a][b] < best:
                    best = dist[a][b]
                    pair = (a, b)
        if pair is None:
            raise ValueError("distances must be finite numbers")
        left, right = pair

        joined = size[left] + size[right]
        for other in active:
            if other in pair:
                continue
            average = (dist[other][left] * size[left] + dist[other][right] * size[right]) / joined
            dist[other][node] = dist[node][other] = average

        tree.children[node] = pair
        size[node] = joined
        active.remove(left)
        active.remove(right)
        active.append(node)

    return tree


def progressive_align(
    tree: GuideTree, leaves: Sequence[Profile], matrix: ScoreMatrix
) -> list[Profile]:
    """Merge profiles bottom-up along the tree; returns one profile per node."""
    if len(leaves) != tree.leaf_count:
        raise ValueError("one leaf profile is needed for each leaf of the tree")
    profiles = list(leaves)
    for node in range(tree.leaf_count, tree.root() + 1):
        left, right = tree.children[node]
        profiles.append(merge_profiles(profiles[left], profiles[right], matrix))
    return profiles