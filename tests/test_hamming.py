import pytest

from editmetrics import hamming

PAIRS = [("aaaa", "aaaa"), ("aaaa", "bbbb"), ("abaa", "baaa"), ("", ""), ("karolin", "kathrin")]


@pytest.mark.parametrize(
    "func",
    [hamming.distance, hamming.similarity, hamming.normalized_distance, hamming.normalized_similarity],
)
def test_unequal_lengths_raise(func):
    with pytest.raises(ValueError, match="not the same length"):
        func("aaaa", "aaa")


def test_completely_different():
    assert hamming.distance("aaaa", "bbbb") == len("aaaa")
    assert hamming.similarity("aaaa", "bbbb") == 0
    assert hamming.normalized_distance("aaaa", "bbbb") == 1.0
    assert hamming.normalized_similarity("aaaa", "bbbb") == 0.0


def test_identical():
    assert hamming.distance("aaaa", "aaaa") == 0
    assert hamming.similarity("aaaa", "aaaa") == len("aaaa")
    assert hamming.normalized_similarity("aaaa", "aaaa") == 1.0


def test_swapped_characters():
    assert hamming.distance("abaa", "baaa") == 2


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_distance_plus_similarity_is_length(s1, s2):
    assert hamming.distance(s1, s2) + hamming.similarity(s1, s2) == len(s1)


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_symmetric(s1, s2):
    assert hamming.distance(s1, s2) == hamming.distance(s2, s1)


@pytest.mark.parametrize("s1,s2", PAIRS)
def test_normalized_sum_to_one(s1, s2):
    total = hamming.normalized_distance(s1, s2) + hamming.normalized_similarity(s1, s2)
    assert total == pytest.approx(1.0)


def test_empty_normalized():
    assert hamming.normalized_distance("", "") == 0.0


def test_distance_cutoff():
    assert hamming.distance("aaaa", "bbbb", score_cutoff=2) == 2 + 1
    assert hamming.distance("aaaa", "bbbb", score_cutoff=4) == hamming.distance("aaaa", "bbbb")


def test_similarity_cutoff():
    assert hamming.similarity("abaa", "baaa", score_cutoff=3) == 0
    assert hamming.similarity("abaa", "baaa", score_cutoff=2) == hamming.similarity("abaa", "baaa")


def test_normalized_cutoffs():
    norm = hamming.normalized_distance("abaa", "baaa")
    assert hamming.normalized_distance("abaa", "baaa", score_cutoff=norm - 0.01) == 1.0
    sim = hamming.normalized_similarity("abaa", "baaa")
    assert hamming.normalized_similarity("abaa", "baaa", score_cutoff=sim + 0.01) == 0.0


def test_lists():
    assert hamming.distance([1, 2, 3], [1, 0, 3]) == hamming.distance("abc", "axc")