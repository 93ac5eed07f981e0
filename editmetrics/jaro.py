"""Jaro similarity."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["similarity", "distance", "normalized_similarity", "normalized_distance"]


def _jaro(p: Sequence[Any], t: Sequence[Any]) -> float:
    p_len, t_len = len(p), len(t)
    if not p_len or not t_len:
        return float(not p_len and not t_len)

    bound = max(p_len, t_len) // 2
    if bound > 0:
        bound -= 1

    p_flag = [False] * p_len
    t_flag = [False] * t_len
    common = 0
    for i, ch in enumerate(t):
        low = max(0, i - bound)
        high = min(i + bound, p_len - 1)
        for j in range(low, high + 1):
            if not p_flag[j] and p[j] == ch:
                p_flag[j] = t_flag[i] = True
                common += 1
                break

    if not common:
        return 0.0

    matched_t = (ch for ch, flag in zip(t, t_flag) if flag)
    matched_p = (ch for ch, flag in zip(p, p_flag) if flag)
    transpositions = sum(a != b for a, b in zip(matched_t, matched_p)) // 2

    return (common / p_len + common / t_len + (common - transpositions) / common) / 3.0


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0) -> float:
    """Return the Jaro similarity in 0..1, or 0.0 when below ``score_cutoff``."""
    if score_cutoff > 1.0:
        return 0.0
    sim = _jaro(s1, s2)
    return sim if sim >= score_cutoff else 0.0


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return 1 minus the Jaro similarity, or 1.0 when above ``score_cutoff``."""
    dist = 1.0 - _jaro(s1, s2)
    return dist if dist <= score_cutoff else 1.0


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Same as :func:`similarity`; the score is already normalized."""
    return similarity(s1, s2, score_cutoff)


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Same as :func:`distance`; the score is already normalized."""
    return distance(s1, s2, score_cutoff)