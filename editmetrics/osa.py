"""Optimal string alignment distance: edits plus non-overlapping adjacent transpositions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["distance", "similarity", "normalized_distance", "normalized_similarity"]


def _osa(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """OSA distance computed row by row; ``rows[i][j]`` is the distance of ``s1[:i]`` and ``s2[:j]``."""
    rows = [list(range(len(s2) + 1))]
    for pos1, ch1 in enumerate(s1):
        prev = rows[-1]
        row = [pos1 + 1]
        for pos2, ch2 in enumerate(s2):
            cost = 0 if ch1 == ch2 else 1
            best = min(prev[pos2 + 1] + 1, row[pos2] + 1, prev[pos2] + cost)
            if pos1 and pos2 and ch1 == s2[pos2 - 1] and s1[pos1 - 1] == ch2:
                best = min(best, rows[-2][pos2 - 1] + cost)
            row.append(best)
        rows.append(row)
    return rows[-1][-1]


def _maximum(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    return max(len(s1), len(s2))


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int | None = None) -> int:
    """Return the OSA distance, or ``score_cutoff + 1`` when it exceeds the cutoff."""
    dist = _osa(s1, s2)
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int = 0) -> int:
    """Return the longer length minus the distance, or 0 when below ``score_cutoff``."""
    sim = _maximum(s1, s2) - _osa(s1, s2)
    return sim if sim >= score_cutoff else 0


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return the distance divided by the longer length, or 1.0 above ``score_cutoff``."""
    maximum = _maximum(s1, s2)
    norm = _osa(s1, s2) / maximum if maximum else 0.0
    return norm if norm <= score_cutoff else 1.0


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    sim = 1.0 - normalized_distance(s1, s2)
    return sim if sim >= score_cutoff else 0.0