"""Distance based on the length of the common prefix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from editmetrics.common import common_prefix_length

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "CachedPrefix",
]


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int = 0) -> int:
    """Return the common prefix length, or 0 when it is below ``score_cutoff``."""
    sim = common_prefix_length(s1, s2)
    return sim if sim >= score_cutoff else 0


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int | None = None) -> int:
    """Return the longer length minus the common prefix, capped at ``score_cutoff + 1``."""
    dist = max(len(s1), len(s2)) - common_prefix_length(s1, s2)
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return the distance scaled to 0..1, or 1.0 when above ``score_cutoff``."""
    maximum = max(len(s1), len(s2))
    norm = distance(s1, s2) / maximum if maximum else 0.0
    return norm if norm <= score_cutoff else 1.0


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    sim = 1.0 - normalized_distance(s1, s2)
    return sim if sim >= score_cutoff else 0.0


class CachedPrefix:
    """Prefix metric with a fixed first sequence."""

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