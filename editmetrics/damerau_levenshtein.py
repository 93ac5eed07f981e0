"""Damerau-Levenshtein distance: edits plus transpositions of adjacent elements."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "CachedDamerauLevenshtein",
]


def _damerau_levenshtein(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Unrestricted Damerau-Levenshtein distance computed with the full matrix.

    Row ``r`` and column ``c`` of the matrix hold the distance of ``s1[:r - 1]``
    and ``s2[:c - 1]``; row and column 0 act as an "infinite" border.
    """
    len1, len2 = len(s1), len(s2)
    infinite = len1 + len2

    matrix = [[0] * (len2 + 2) for _ in range(len1 + 2)]
    matrix[0][0] = infinite
    for i in range(len1 + 1):
        matrix[i + 1][0] = infinite
        matrix[i + 1][1] = i
    for j in range(len2 + 1):
        matrix[0][j + 1] = infinite
        matrix[1][j + 1] = j

    last_row: dict[Any, int] = {}
    for pos1, ch1 in enumerate(s1):
        prev = matrix[pos1 + 1]
        row = matrix[pos1 + 2]
        last_match_col = 0
        for pos2, ch2 in enumerate(s2):
            i1 = last_row.get(ch2, 0)
            j1 = last_match_col
            cost = 1
            if ch1 == ch2:
                cost = 0
                last_match_col = pos2 + 1
            row[pos2 + 2] = min(
                prev[pos2 + 1] + cost,
                row[pos2 + 1] + 1,
                prev[pos2 + 2] + 1,
                matrix[i1][j1] + (pos1 - i1) + 1 + (pos2 - j1),
            )
        last_row[ch1] = pos1 + 1

    return matrix[-1][-1]


def _maximum(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    return max(len(s1), len(s2))


def _cap_distance(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int | None = None) -> int:
    """Return the Damerau-Levenshtein distance, capped at ``score_cutoff + 1``."""
    return _cap_distance(_damerau_levenshtein(s1, s2), score_cutoff)


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int = 0) -> int:
    """Return the longer length minus the distance, or 0 when below ``score_cutoff``."""
    sim = _maximum(s1, s2) - _damerau_levenshtein(s1, s2)
    return sim if sim >= score_cutoff else 0


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return the distance divided by the longer length, or 1.0 above ``score_cutoff``."""
    maximum = _maximum(s1, s2)
    norm = _damerau_levenshtein(s1, s2) / maximum if maximum else 0.0
    return norm if norm <= score_cutoff else 1.0


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    sim = 1.0 - normalized_distance(s1, s2)
    return sim if sim >= score_cutoff else 0.0


class CachedDamerauLevenshtein:
    """Damerau-Levenshtein metric with a fixed first sequence."""

    def __init__(self, s1: Sequence[Any]) -> None:
        self.s1 = s1

    def distance(self, s2: Sequence[Any], score_cutoff: int | None = None) -> int:
        return distance(self.s1, s2, score_cutoff)

    def similarity(self, s2: Sequence[Any], score_cutoff: int = 0) -> int:
        return similarity(self.s1, s2, score_cutoff)

    def normalized_distance(self, s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
        return normalized_distance(self.s1, s2, score_cutoff)

    def normalized_similarity(self, s2: Sequence[Any], score_cutoff: float = 0.0) -> float:
        return normalized_similarity(self.s1, s2, score_cutoff)