import pytest

from progalign.profile import (
    GAP_COLUMN,
    build_profile,
    column_score,
    merge_profiles,
)
from progalign.scoring import ScoreMatrix, sum_of_pairs


def _degap(row):
    return row.replace("-", "")


def test_build_profile_frequencies():
    profile = build_profile(["AC", "AG"], [0, 1])
    assert profile.columns == [{"A": 1.0}, {"C": 0.5, "G": 0.5}]
    assert profile.sequences == ["AC", "AG"]
    assert profile.order == [0, 1]


def test_build_profile_frequencies_sum_to_one():
    profile = build_profile(["AC-T", "AGGT", "-CGA"], [2, 0, 1])
    for column in profile.columns:
        assert sum(column.values()) == pytest.approx(1.0)


def test_build_profile_rejects_empty():
    with pytest.raises(ValueError):
        build_profile([], [])


def test_build_profile_rejects_ragged():
    with pytest.raises(ValueError):
        build_profile(["ACG", "A"], [0, 1])


def test_column_score_against_gap_column():
    matrix = ScoreMatrix()
    assert column_score({"A": 0.5, "C": 0.5}, GAP_COLUMN, matrix) == matrix.gap_penalty


def test_column_score_single_characters():
    matrix = ScoreMatrix()
    assert column_score({"A": 1.0}, {"G": 1.0}, matrix) == matrix.score("A", "G")
    assert column_score({"A": 1.0}, {"A": 1.0}, matrix) == matrix.score("A", "A")


def test_merge_identical_sequences():
    matrix = ScoreMatrix()
    merged = merge_profiles(
        build_profile(["ACGT"], [0]), build_profile(["ACGT"], [1]), matrix
    )
    assert merged.sequences == ["ACGT", "ACGT"]
    assert merged.order == [0, 1]


def test_merge_inserts_gap():
    matrix = ScoreMatrix()
    merged = merge_profiles(
        build_profile(["ACGT"], [0]), build_profile(["AGT"], [1]), matrix
    )
    assert merged.sequences == ["ACGT", "A-GT"]
    assert sum_of_pairs(merged.sequences, matrix) == matrix.gap_penalty


def test_merge_preserves_residues_and_order():
    matrix = ScoreMatrix()
    left = merge_profiles(
        build_profile(["ACGTTA"], [2]), build_profile(["AGTA"], [0]), matrix
    )
    right = build_profile(["CGGTAC"], [1])
    merged = merge_profiles(left, right, matrix)
    assert merged.order == [2, 0, 1]
    assert [_degap(r) for r in merged.sequences] == ["ACGTTA", "AGTA", "CGGTAC"]
    assert len({len(r) for r in merged.sequences}) == 1


def test_merge_with_empty_sequence():
    matrix = ScoreMatrix()
    merged = merge_profiles(build_profile([""], [0]), build_profile(["AC"], [1]), matrix)
    assert merged.sequences == ["--", "AC"]