"""Longest common subsequence metric."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any

from editmetrics.common import common_affix
from editmetrics.types import EditOp, Editops, EditType

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "editops",
    "CachedLCSseq",
]


def _pattern_masks(s1: Sequence[Hashable]) -> dict[Hashable, int]:
    """Map every element of ``s1`` to a bit mask of the positions it occupies."""
    masks: dict[Hashable, int] = {}
    for pos, ch in enumerate(s1):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    return masks


def _lcs_length(masks: dict[Hashable, int], len1: int, s2: Sequence[Any]) -> int:
    """Bit-parallel LCS length of the pattern described by ``masks`` and ``s2``."""
    if not len1:
        return 0
    full = (1 << len1) - 1
    state = full
    for ch in s2:
        matches = state & masks.get(ch, 0)
        state = ((state + matches) | (state - matches)) & full
    return len1 - bin(state).count("1")


def _cap_similarity(sim: int, score_cutoff: int) -> int:
    return sim if sim >= score_cutoff else 0


def _cap_distance(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _normalize(dist: int, maximum: int, score_cutoff: float) -> float:
    norm = dist / maximum if maximum else 0.0
    return norm if norm <= score_cutoff else 1.0


def similarity(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int = 0) -> int:
    """Return the length of the longest common subsequence, or 0 below ``score_cutoff``."""
    sim = _lcs_length(_pattern_masks(s1), len(s1), s2)
    return _cap_similarity(sim, score_cutoff)


def distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: int | None = None) -> int:
    """Return the longer length minus the LCS length, capped at ``score_cutoff + 1``."""
    dist = max(len(s1), len(s2)) - similarity(s1, s2)
    return _cap_distance(dist, score_cutoff)


def normalized_distance(s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
    """Return the distance scaled to 0..1, or 1.0 when above ``score_cutoff``."""
    return _normalize(distance(s1, s2), max(len(s1), len(s2)), score_cutoff)


def normalized_similarity(
    s1: Sequence[Any], s2: Sequence[Any], score_cutoff: float = 0.0
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    sim = 1.0 - normalized_distance(s1, s2)
    return sim if sim >= score_cutoff else 0.0


def editops(s1: Sequence[Any], s2: Sequence[Any]) -> Editops:
    """Return insertions and deletions that turn ``s1`` into ``s2`` along an LCS."""
    affix = common_affix(s1, s2)
    prefix = affix.prefix_len
    a = s1[prefix:len(s1) - affix.suffix_len]
    b = s2[prefix:len(s2) - affix.suffix_len]

    table = [[0] * (len(b) + 1)]
    for ch1 in a:
        prev = table[-1]
        row = [0]
        for j, ch2 in enumerate(b):
            row.append(prev[j] + 1 if ch1 == ch2 else max(prev[j + 1], row[j]))
        table.append(row)

    ops: list[EditOp] = []
    i, j = len(a), len(b)
    while i or j:
        if i and j and a[i - 1] == b[j - 1]:
            i -= 1
            j -= 1
        elif j and (not i or table[i][j - 1] >= table[i - 1][j]):
            j -= 1
            ops.append(EditOp(EditType.INSERT, prefix + i, prefix + j))
        else:
            i -= 1
            ops.append(EditOp(EditType.DELETE, prefix + i, prefix + j))
    ops.reverse()
    return Editops(ops, len(s1), len(s2))


class CachedLCSseq:
    """LCS metric with a fixed first sequence whose bit masks are built once."""

    def __init__(self, s1: Sequence[Any]) -> None:
        self.s1 = s1
        self._masks = _pattern_masks(s1)

    def _lcs(self, s2: Sequence[Any]) -> int:
        return _lcs_length(self._masks, len(self.s1), s2)

    def similarity(self, s2: Sequence[Any], score_cutoff: int = 0) -> int:
        return _cap_similarity(self._lcs(s2), score_cutoff)

    def distance(self, s2: Sequence[Any], score_cutoff: int | None = None) -> int:
        dist = max(len(self.s1), len(s2)) - self._lcs(s2)
        return _cap_distance(dist, score_cutoff)

    def normalized_distance(self, s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
        return _normalize(self.distance(s2), max(len(self.s1), len(s2)), score_cutoff)

    def normalized_similarity(self, s2: Sequence[Any], score_cutoff: float = 0.0) -> float:
        sim = 1.0 - self.normalized_distance(s2)
        return sim if sim >= score_cutoff else 0.0