import pytest

from editmetrics import damerau_levenshtein, levenshtein, osa

PAIRS = [
    ("aaaa", "aaaa"),
    ("aaaa", "aaa"),
    ("abaa", "baaa"),
    ("aaaa", "bbbb"),
    ("CA", "ABC"),
    ("South Korea", "North Korea"),
    ("kitten", "sitting"),
    ("", "abc"),
    ("", ""),
]


def test_pinned_values():
    assert osa.distance("abaa", "baaa") == 1
    assert osa.distance("CA", "ABC") == 3
    assert osa.distance("aaaa", "aaa") == 1


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_between_damerau_and_levenshtein(s1, s2):
    dist = osa.distance(s1, s2)
    assert damerau_levenshtein.distance(s1, s2) <= dist <= levenshtein.distance(s1, s2)


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_symmetric(s1, s2):
    assert osa.distance(s1, s2) == osa.distance(s2, s1)


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_zero_only_for_equal(s1, s2):
    assert (osa.distance(s1, s2) == 0) == (s1 == s2)


@pytest.mark.parametrize("s1, s2", PAIRS)
def test_similarity_and_normalization_consistent(s1, s2):
    maximum = max(len(s1), len(s2))
    dist = osa.distance(s1, s2)
    assert osa.similarity(s1, s2) == maximum - dist
    norm = osa.normalized_distance(s1, s2)
    assert norm == pytest.approx(dist / maximum if maximum else 0.0)
    assert osa.normalized_similarity(s1, s2) == pytest.approx(1.0 - norm)


def test_distance_cutoff():
    full = osa.distance("aaaa", "bbbb")
    assert osa.distance("aaaa", "bbbb", full - 2) == full - 1
    assert osa.distance("aaaa", "bbbb", full) == full


def test_similarity_cutoff():
    sim = osa.similarity("aaaa", "aaa")
    assert osa.similarity("aaaa", "aaa", sim + 1) == 0
    assert osa.similarity("aaaa", "aaa", sim) == sim


def test_normalized_cutoffs():
    norm = osa.normalized_distance("abaa", "baaa")
    assert osa.normalized_distance("abaa", "baaa", norm / 2) == 1.0
    sim = osa.normalized_similarity("abaa", "baaa")
    assert osa.normalized_similarity("abaa", "baaa", (sim + 1.0) / 2) == 0.0


def test_works_on_lists():
    assert osa.distance([1, 2, 3], [2, 1, 3]) == damerau_levenshtein.distance([1, 2, 3], [2, 1, 3])