"""Jaro-Winkler similarity."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from editmetrics.common import common_prefix_length
from editmetrics.jaro import similarity as jaro_similarity

__all__ = ["similarity", "distance", "normalized_similarity", "normalized_distance"]

_MAX_PREFIX = 4
_BOOST_THRESHOLD = 0.7


def _jaro_winkler(s1: Sequence[Any], s2: Sequence[Any], prefix_weight: float) -> float:
    prefix = min(common_prefix_length(s1, s2), _MAX_PREFIX)
    sim = jaro_similarity(s1, s2)
    if sim > _BOOST_THRESHOLD:
        sim += prefix * prefix_weight * (1.0 - sim)
    return sim


def similarity(
    s1: Sequence[Any],
    s2: Sequence[Any],
    prefix_weight: float = 0.1,
    score_cutoff: float = 0.0,
) -> float:
    """Return the Jaro-Winkler similarity, or 0.0 when below ``score_cutoff``.

    A common prefix of up to four elements raises the Jaro score when it
    is above 0.7.
    """
    sim = _jaro_winkler(s1, s2, prefix_weight)
    return sim if sim >= score_cutoff else 0.0


def distance(
    s1: Sequence[Any],
    s2: Sequence[Any],
    prefix_weight: float = 0.1,
    score_cutoff: float = 1.0,
) -> float:
    """Return 1 minus the Jaro-Winkler similarity, or 1.0 when above ``score_cutoff``."""
    dist = 1.0 - _jaro_winkler(s1, s2, prefix_weight)
    return dist if dist <= score_cutoff else 1.0


def normalized_similarity(
    s1: Sequence[Any],
    s2: Sequence[Any],
    prefix_weight: float = 0.1,
    score_cutoff: float = 0.0,
) -> float:
    """Same as :func:`similarity`; the score is already normalized."""
    return similarity(s1, s2, prefix_weight, score_cutoff)


def normalized_distance(
    s1: Sequence[Any],
    s2: Sequence[Any],
    prefix_weight: float = 0.1,
    score_cutoff: float = 1.0,
) -> float:
    """Same as :func:`distance`; the score is already normalized."""
    return distance(s1, s2, prefix_weight, score_cutoff)