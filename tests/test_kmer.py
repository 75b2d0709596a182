import pytest

from progalign.guide_tree import build_guide_tree, progressive_align
from progalign.kmer import (
    align_kmer,
    aligned_distance,
    fft,
    kmer_distance,
    kmer_distance_matrix,
    kmer_frequencies,
    kmer_index,
    refine_by_tree_split,
)
from progalign.profile import build_profile
from progalign.scoring import ScoreMatrix, sum_of_pairs

SEQS = ["ACGTACGT", "ACGTTGCA", "AGGTACCT", "TTGACGTA"]


def test_fft_round_trip():
    values = [1, 2, 3, 4, 0, 0, 0, 0]
    back = fft(fft(values), inverse=True)
    assert [v.real for v in back] == pytest.approx(values)
    assert [v.imag for v in back] == pytest.approx([0] * 8)


def test_fft_of_impulse_is_flat():
    result = fft([1, 0, 0, 0])
    assert [v.real for v in result] == pytest.approx([1, 1, 1, 1])
    assert [v.imag for v in result] == pytest.approx([0, 0, 0, 0])


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


def test_kmer_index_single_characters():
    assert [kmer_index("ACGT", i, 1) for i in range(4)] == [0, 1, 2, 3]


def test_kmer_index_errors():
    with pytest.raises(ValueError):
        kmer_index("AX", 0, 2)
    with pytest.raises(ValueError):
        kmer_index("AC", 1, 2)


def test_kmer_frequencies_counts_windows():
    counts = kmer_frequencies("ACGTA", 1, 8)
    assert [v.real for v in counts] == [2, 1, 1, 1, 0, 0, 0, 0]
    longer = kmer_frequencies("ACGTACGT", 3, 128)
    assert sum(v.real for v in longer) == len("ACGTACGT") - 3 + 1


def test_kmer_distance_symmetric():
    assert kmer_distance("ACGTAC", "GGTACA", 2) == pytest.approx(
        kmer_distance("GGTACA", "ACGTAC", 2)
    )


def test_kmer_distance_identical_distinct_bases():
    assert kmer_distance("ACGT", "ACGT", 1) == pytest.approx(-3.0)


def test_kmer_distance_needs_kmers():
    with pytest.raises(ValueError):
        kmer_distance("AC", "ACGT", 3)


def test_kmer_distance_matrix_shape():
    distances = kmer_distance_matrix(SEQS)
    assert len(distances) == len(SEQS)
    for i, row in enumerate(distances):
        assert row[i] == 0.0
        for j, value in enumerate(row):
            assert value == pytest.approx(distances[j][i])


def test_aligned_distance():
    matrix = ScoreMatrix()
    assert aligned_distance("A-C", "A-C", matrix) == matrix.gap_penalty
    with pytest.raises(ValueError):
        aligned_distance("AC", "A", matrix)


def test_refine_by_tree_split_never_worse():
    matrix = ScoreMatrix()
    leaves = [build_profile([s], [i]) for i, s in enumerate(SEQS)]
    tree = build_guide_tree(kmer_distance_matrix(SEQS), len(SEQS))
    profiles = progressive_align(tree, leaves, matrix)
    root = profiles[tree.root()]
    profile, score = refine_by_tree_split(tree, profiles, matrix, root)
    assert score <= sum_of_pairs(root.sequences, matrix)
    assert score == sum_of_pairs(profile.sequences, matrix)
    assert sorted(profile.order) == list(range(len(SEQS)))


def test_align_kmer_keeps_sequences():
    matrix = ScoreMatrix()
    profile, score = align_kmer(SEQS, matrix)
    assert sorted(profile.order) == list(range(len(SEQS)))
    for index, row in zip(profile.order, profile.sequences):
        assert row.replace("-", "") == SEQS[index]
    assert score == sum_of_pairs(profile.sequences, matrix)


def test_align_kmer_single_and_empty():
    profile, score = align_kmer(["ACGT"])
    assert profile.sequences == ["ACGT"]
    assert score == 0
    with pytest.raises(ValueError):
        align_kmer([])