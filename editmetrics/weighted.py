"""Weighted Levenshtein distance computed with the full Wagner-Fischer matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from editmetrics.types import LevenshteinWeightTable

__all__ = ["levenshtein_matrix", "weighted_distance"]

_UNIFORM = LevenshteinWeightTable()


def levenshtein_matrix(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable = _UNIFORM,
) -> list[list[int]]:
    """Return the cost matrix; ``matrix[i][j]`` is the distance of ``s1[:i]`` and ``s2[:j]``."""
    rows = [[j * weights.insert_cost for j in range(len(s2) + 1)]]
    for i, ch1 in enumerate(s1, 1):
        prev = rows[-1]
        row = [i * weights.delete_cost]
        for j, ch2 in enumerate(s2):
            cost = 0 if ch1 == ch2 else weights.replace_cost
            row.append(
                min(
                    prev[j + 1] + weights.delete_cost,
                    row[j] + weights.insert_cost,
                    prev[j] + cost,
                )
            )
        rows.append(row)
    return rows


def weighted_distance(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable = _UNIFORM,
    score_cutoff: int | None = None,
) -> int:
    """Return the weighted edit distance, or ``score_cutoff + 1`` when it exceeds the cutoff."""
    dist = levenshtein_matrix(s1, s2, weights)[-1][-1]
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1