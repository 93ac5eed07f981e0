import pytest

from editmetrics.types import LevenshteinWeightTable
from editmetrics.weighted import levenshtein_matrix, weighted_distance

UNIFORM = LevenshteinWeightTable(1, 1, 1)
INDEL = LevenshteinWeightTable(1, 1, 2)


def test_empty_sequences():
    assert weighted_distance("", "") == 0
    assert weighted_distance("aaaa", "") == 4
    assert weighted_distance("", "aaaa") == 4


def test_uniform_distances():
    assert weighted_distance("aaaa", "aaaa") == 0
    assert weighted_distance("aaaa", "aaa") == 1
    assert weighted_distance("abaa", "baaa") == 2
    assert weighted_distance("aaaa", "aaab") == 1
    assert weighted_distance("aaaa", "bbbb") == 4


def test_indel_weights():
    assert weighted_distance("aaaa", "aaaa", INDEL) == 0
    assert weighted_distance("aaaa", "aaa", INDEL) == 1
    assert weighted_distance("abaa", "baaa", INDEL) == 2
    assert weighted_distance("aaaa", "aaab", INDEL) == 2
    assert weighted_distance("aaaa", "bbbb", INDEL) == 8


def test_documented_examples():
    assert weighted_distance("lewenstein", "levenshtein") == 2
    assert weighted_distance("lewenstein", "levenshtein", INDEL) == 3


@pytest.mark.parametrize(
    "weights,cutoff,expected",
    [
        (UNIFORM, None, 2),
        (UNIFORM, 4, 2),
        (UNIFORM, 1, 2),
        (UNIFORM, 0, 1),
        (INDEL, None, 4),
        (INDEL, 4, 4),
        (INDEL, 3, 4),
        (INDEL, 2, 3),
        (INDEL, 0, 1),
    ],
)
def test_score_cutoff(weights, cutoff, expected):
    assert weighted_distance("South Korea", "North Korea", weights, cutoff) == expected


@pytest.mark.parametrize(
    "weights,cutoff,expected",
    [(UNIFORM, None, 4), (UNIFORM, 2, 3), (INDEL, None, 6), (INDEL, 4, 5)],
)
def test_score_cutoff_second_pair(weights, cutoff, expected):
    assert weighted_distance("aabc", "cccd", weights, cutoff) == expected


def test_matrix_borders_follow_weights():
    weights = LevenshteinWeightTable(insert_cost=2, delete_cost=3, replace_cost=5)
    matrix = levenshtein_matrix("abc", "wxyz", weights)
    assert len(matrix) == 4
    assert all(len(row) == 5 for row in matrix)
    assert matrix[0] == [j * 2 for j in range(5)]
    assert [row[0] for row in matrix] == [i * 3 for i in range(4)]


def test_matrix_corner_is_distance():
    matrix = levenshtein_matrix("kitten", "sitting", INDEL)
    assert matrix[-1][-1] == weighted_distance("kitten", "sitting", INDEL)


@pytest.mark.parametrize("s1,s2", [("kitten", "sitting"), ("abc", ""), ("flaw", "lawn")])
def test_symmetric_for_symmetric_weights(s1, s2):
    assert weighted_distance(s1, s2) == weighted_distance(s2, s1)