import pytest

from editmetrics import prefix
from editmetrics.prefix import CachedPrefix

PAIRS = [("abcde", "abxyz"), ("", ""), ("", "abc"), ("same", "same"), ("xyz", "abc"), ("ab", "abcd")]


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_distance_plus_similarity_is_longer_length(s1, s2):
    assert prefix.distance(s1, s2) + prefix.similarity(s1, s2) == max(len(s1), len(s2))


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_symmetric(s1, s2):
    assert prefix.similarity(s1, s2) == prefix.similarity(s2, s1)
    assert prefix.distance(s1, s2) == prefix.distance(s2, s1)


@pytest.mark.parametrize("s", ["a", "hello", "aaaa"])
def test_identical(s):
    assert prefix.similarity(s, s) == len(s)
    assert prefix.distance(s, s) == 0
    assert prefix.normalized_similarity(s, s) == 1.0


def test_similarity_value():
    assert prefix.similarity("abcde", "abxyz") == 2


def test_similarity_cutoff():
    assert prefix.similarity("abcde", "abxyz", score_cutoff=3) == 0
    assert prefix.similarity("abcde", "abxyz", score_cutoff=2) == prefix.similarity("abcde", "abxyz")


def test_distance_cutoff():
    assert prefix.distance("abcde", "abxyz", score_cutoff=1) == 1 + 1


def test_normalized_empty():
    assert prefix.normalized_distance("", "") == 0.0
    assert prefix.normalized_similarity("", "") == 1.0


def test_normalized_completely_different():
    assert prefix.normalized_distance("abc", "xyz") == 1.0
    assert prefix.normalized_similarity("abc", "xyz") == 0.0


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_normalized_sum_to_one(s1, s2):
    assert prefix.normalized_distance(s1, s2) + prefix.normalized_similarity(s1, s2) == pytest.approx(1.0)


def test_normalized_cutoffs():
    norm = prefix.normalized_distance("abcde", "abxyz")
    assert prefix.normalized_distance("abcde", "abxyz", score_cutoff=norm - 0.01) == 1.0
    sim = prefix.normalized_similarity("abcde", "abxyz")
    assert prefix.normalized_similarity("abcde", "abxyz", score_cutoff=sim + 0.01) == 0.0


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_cached_matches_functions(s1, s2):
    scorer = CachedPrefix(s1)
    assert scorer.distance(s2) == prefix.distance(s1, s2)
    assert scorer.similarity(s2) == prefix.similarity(s1, s2)
    assert scorer.normalized_distance(s2) == prefix.normalized_distance(s1, s2)
    assert scorer.normalized_similarity(s2) == prefix.normalized_similarity(s1, s2)