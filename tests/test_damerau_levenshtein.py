import pytest

from editmetrics import damerau_levenshtein as dl
from editmetrics.damerau_levenshtein import CachedDamerauLevenshtein

TEST = "aaaa"
NO_SUFFIX = "aaa"
NO_SUFFIX2 = "aaab"
SWAPPED1 = "abaa"
SWAPPED2 = "baaa"
REPLACE_ALL = "bbbb"


def checked_distance(s1, s2, score_cutoff=None):
    res1 = dl.distance(s1, s2, score_cutoff)
    res2 = CachedDamerauLevenshtein(s1).distance(s2, score_cutoff)
    assert res1 == res2
    return res1


def checked_normalized_similarity(s1, s2, score_cutoff=0.0):
    res1 = dl.normalized_similarity(s1, s2, score_cutoff)
    res2 = CachedDamerauLevenshtein(s1).normalized_similarity(s2, score_cutoff)
    assert res1 == pytest.approx(res2, rel=1e-4)
    return res1


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        (TEST, TEST, 0),
        (TEST, NO_SUFFIX, 1),
        (SWAPPED1, SWAPPED2, 1),
        (TEST, NO_SUFFIX2, 1),
        (TEST, REPLACE_ALL, 4),
        ("CA", "ABC", 2),
    ],
)
def test_distance(s1, s2, expected):
    assert checked_distance(s1, s2) == expected


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        (TEST, TEST, 1.0),
        (TEST, NO_SUFFIX, 0.75),
        (SWAPPED1, SWAPPED2, 0.75),
        (TEST, NO_SUFFIX2, 0.75),
        (TEST, REPLACE_ALL, 0.0),
        ("CA", "ABC", 0.33333),
    ],
)
def test_normalized_similarity(s1, s2, expected):
    assert checked_normalized_similarity(s1, s2) == pytest.approx(expected, rel=1e-4)


def test_distance_above_cutoff_returns_cutoff_plus_one():
    assert checked_distance(TEST, REPLACE_ALL, 2) == 3
    assert checked_distance(TEST, REPLACE_ALL, 4) == 4


def test_similarity_respects_cutoff():
    cached = CachedDamerauLevenshtein(TEST)
    assert dl.similarity(TEST, NO_SUFFIX) == cached.similarity(NO_SUFFIX) == 3
    assert dl.similarity(TEST, NO_SUFFIX, 4) == 0


def test_normalized_distance_and_cutoff():
    cached = CachedDamerauLevenshtein(SWAPPED1)
    assert dl.normalized_distance(SWAPPED1, SWAPPED2) == pytest.approx(0.25)
    assert cached.normalized_distance(SWAPPED2) == pytest.approx(0.25)
    assert dl.normalized_distance(SWAPPED1, SWAPPED2, 0.2) == 1.0
    assert dl.normalized_similarity(SWAPPED1, SWAPPED2, 0.8) == 0.0


def test_empty_sequences():
    assert dl.distance("", "") == 0
    assert dl.normalized_distance("", "") == 0.0
    assert dl.normalized_similarity("", "") == 1.0
    assert dl.distance(TEST, "") == len(TEST)


@pytest.mark.parametrize(
    "s1, s2",
    [("CA", "ABC"), (SWAPPED1, SWAPPED2), ("kitten", "sitting"), ("", "abc")],
)
def test_symmetric(s1, s2):
    assert dl.distance(s1, s2) == dl.distance(s2, s1)


def test_works_on_lists():
    assert dl.distance([1, 2, 3], [2, 1, 3]) == 1