"""Hamming distance between sequences of equal length."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["distance", "similarity", "normalized_distance", "normalized_similarity"]


def _mismatches(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    if len(s1) != len(s2):
        raise ValueError("Sequences are not the same length.")
    return sum(a != b for a, b in zip(s1, s2))


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int | None = None) -> int:
    """Return the number of differing positions, capped at ``score_cutoff + 1``.

    Raises ValueError when the sequences differ in length.
    """
    dist = _mismatches(s1, s2)
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int = 0) -> int:
    """Return the number of equal positions, or 0 when below ``score_cutoff``."""
    sim = len(s1) - _mismatches(s1, s2)
    return sim if sim >= score_cutoff else 0


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return the distance scaled to 0..1, or 1.0 when above ``score_cutoff``."""
    dist = _mismatches(s1, s2)
    norm = dist / len(s1) if s1 else 0.0
    return norm if norm <= score_cutoff else 1.0


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    sim = 1.0 - normalized_distance(s1, s2)
    return sim if sim >= score_cutoff else 0.0