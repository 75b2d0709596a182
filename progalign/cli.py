"""Command line entry point: read sequences, print their alignment and cost."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from .kmer import align_kmer
from .refine import align
from .scoring import ScoreMatrix


def read_sequences(stream: TextIO) -> list[str]:
    """Read a count followed by that many whitespace-separated sequences."""
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("expected the number of sequences")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"invalid sequence count {tokens[0]!r}") from None
    if count < 1:
        raise ValueError("the sequence count must be positive")
    sequences = tokens[1:1 + count]
    if len(sequences) < count:
        raise ValueError(f"expected {count} sequences, found {len(sequences)}")
    return sequences


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="progalign", description="Multiple alignment of DNA sequences."
    )
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or - for standard input"
    )
    parser.add_argument(
        "--method",
        choices=("dp", "kmer"),
        default="dp",
        help="guide tree from edit distances (dp) or k-mer distances (kmer)",
    )
    args = parser.parse_args(argv)
    matrix = ScoreMatrix()

    try:
        if args.input == "-":
            sequences = read_sequences(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as handle:
                sequences = read_sequences(handle)
        if args.method == "kmer":
            profile, score = align_kmer(sequences, matrix)
            rows = profile.sequences
        else:
            rows, score = align(sequences, matrix)
    except (OSError, ValueError) as exc:
        print(f"progalign: {exc}", file=sys.stderr)
        return 1

    for row in rows:
        print(row)
    print(f"{score:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())