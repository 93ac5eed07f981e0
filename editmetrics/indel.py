"""Indel distance: edit distance with insertions and deletions only."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from editmetrics import lcs_seq
from editmetrics.lcs_seq import CachedLCSseq

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "CachedIndel",
]


def _cap_distance(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _from_lcs(lcs: int, maximum: int) -> int:
    return maximum - 2 * lcs


def _normalized_distance(dist: int, maximum: int, score_cutoff: float) -> float:
    cutoff_distance = math.ceil(maximum * score_cutoff)
    dist = _cap_distance(dist, cutoff_distance)
    norm = dist / maximum if maximum else 0.0
    return norm if norm <= score_cutoff else 1.0


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int | None = None) -> int:
    """Return the number of insertions and deletions, capped at ``score_cutoff + 1``."""
    maximum = len(s1) + len(s2)
    return _cap_distance(_from_lcs(lcs_seq.similarity(s1, s2), maximum), score_cutoff)


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int = 0) -> int:
    """Return the combined length minus the distance, or 0 below ``score_cutoff``."""
    sim = len(s1) + len(s2) - distance(s1, s2)
    return sim if sim >= score_cutoff else 0


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return the distance divided by the combined length, or 1.0 above ``score_cutoff``."""
    return _normalized_distance(distance(s1, s2), len(s1) + len(s2), score_cutoff)


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    sim = 1.0 - normalized_distance(s1, s2)
    return sim if sim >= score_cutoff else 0.0


class CachedIndel:
    """Indel metric with a fixed first sequence."""

    def __init__(self, s1: Sequence[Any]) -> None:
        self.s1 = s1
        self._lcs = CachedLCSseq(s1)

    def distance(self, s2: Sequence[Any], score_cutoff: int | None = None) -> int:
        maximum = len(self.s1) + len(s2)
        return _cap_distance(_from_lcs(self._lcs.similarity(s2), maximum), score_cutoff)

    def similarity(self, s2: Sequence[Any], score_cutoff: int = 0) -> int:
        sim = len(self.s1) + len(s2) - self.distance(s2)
        return sim if sim >= score_cutoff else 0

    def normalized_distance(self, s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
        return _normalized_distance(self.distance(s2), len(self.s1) + len(s2), score_cutoff)

    def normalized_similarity(self, s2: Sequence[Any], score_cutoff: float = 0.0) -> float:
        sim = 1.0 - self.normalized_distance(s2)
        return sim if sim >= score_cutoff else 0.0