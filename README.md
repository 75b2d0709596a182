# progalign

Progressive multiple sequence alignment for DNA sequences over the alphabet
`A`, `C`, `G`, `T`.

Sequences are joined along a guide tree built by average-linkage clustering of
pairwise distances. Each internal node of the tree aligns the profiles of its
two children with a dynamic-programming profile–profile alignment. The result
can then be refined, and is scored by the sum of pairs over all columns.

The default cost model, where lower is better:

- match: 0
- mismatch: 3
- gap against anything: 2
- two characters outside `ACGT` (neither a gap): 0

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

`progalign` reads the number of sequences, then the sequences themselves,
separated by any whitespace:

```
3
ACA
GAA
GGA
```

```
progalign sequences.txt
progalign < sequences.txt
progalign --method kmer sequences.txt
```

The input file is optional; without it, or with `-`, standard input is read.

- `--method dp` (the default) builds the guide tree from pairwise edit
  distances, aligns progressively and then slides residues into neighbouring
  gaps while that lowers the cost.
- `--method kmer` builds a first guide tree from single-character k-mer
  distances, rebuilds it from the distances in that first alignment, realigns,
  and refines by re-aligning across every edge of the tree.

The command prints the aligned sequences, one per line, followed by their
sum-of-pairs cost. Rows come out in the order the guide tree joined them, not
necessarily the input order. On a bad input it prints a message to standard
error and exits with status 1.

## Library use

```python
from progalign.refine import align
from progalign.scoring import ScoreMatrix, sum_of_pairs

matrix = ScoreMatrix()
rows, cost = align(["ACA", "GAA", "GGA"], matrix)
assert cost == sum_of_pairs(rows, matrix)
```

The modules:

- `progalign.scoring`: `ScoreMatrix` (with `gap_penalty`, `mismatch`, `match`
  and `alphabet` fields and a `score(a, b)` method) and `sum_of_pairs`.
- `progalign.profile`: `Profile`, `build_profile`, `column_score` and
  `merge_profiles` for profile–profile alignment.
- `progalign.guide_tree`: `GuideTree`, `build_guide_tree` (average linkage)
  and `progressive_align`, which returns one profile per tree node.
- `progalign.refine`: `edit_distance`, `distance_matrix`,
  `refine_leave_one_out` (realign each sequence against the rest and keep the
  cheapest result), `refine_gap_swaps` and the `align` pipeline used by
  `--method dp`.
- `progalign.kmer`: `fft`, `kmer_index`, `kmer_frequencies`, `kmer_distance`,
  `kmer_distance_matrix`, `aligned_distance`, `refine_by_tree_split` and the
  `align_kmer` pipeline used by `--method kmer`, which returns the final
  `Profile` and its cost. K-mer distances accept only `A`, `C`, `G`, `T`.
- `progalign.exact`: `align_three`, an exhaustive three-dimensional dynamic
  programme returning a `ThreeWayAlignment` with the minimum cost, the column
  moves and the aligned rows of exactly three sequences. By default it scores
  characters by plain equality, whatever the alphabet.

## Limits

- Input is the plain count-then-sequences format above; FASTA and other
  sequence file formats are not read.
- The command always uses the default cost model; other costs are available
  only through `ScoreMatrix` in the library.
- `align_three` is not offered on the command line.