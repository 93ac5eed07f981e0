"""Levenshtein distance with optional weights for insertion, deletion and substitution."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from typing import Any

from editmetrics import indel
from editmetrics.common import common_affix
from editmetrics.indel import CachedIndel
from editmetrics.types import EditOp, Editops, EditType, LevenshteinWeightTable, Opcodes
from editmetrics.weighted import weighted_distance

__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "maximum",
    "editops",
    "opcodes",
    "CachedLevenshtein",
]

_UNIFORM = LevenshteinWeightTable()


def _pattern_masks(s1: Sequence[Hashable]) -> dict[Hashable, int]:
    masks: dict[Hashable, int] = {}
    for pos, ch in enumerate(s1):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    return masks


def _columns(masks: dict[Hashable, int], len1: int, s2: Sequence[Any]) -> Iterator[tuple[int, int]]:
    """Yield the vertical delta vectors (VP, VN) after each element of ``s2``.

    Bit ``k`` of VP (VN) is set when ``D[k + 1][j] - D[k][j]`` is +1 (-1).
    """
    full = (1 << len1) - 1
    vp, vn = full, 0
    for ch in s2:
        x = masks.get(ch, 0) | vn
        d0 = ((((x & vp) + vp) ^ vp) | x) & full
        hp = (vn | ~(d0 | vp)) & full
        hn = vp & d0
        hp = ((hp << 1) | 1) & full
        hn = (hn << 1) & full
        vp = (hn | ~(d0 | hp)) & full
        vn = hp & d0
        yield vp, vn


def _uniform_distance(masks: dict[Hashable, int], len1: int, s2: Sequence[Any]) -> int:
    vp, vn = (1 << len1) - 1, 0
    for vp, vn in _columns(masks, len1, s2):
        pass
    return len(s2) + vp.bit_count() - vn.bit_count()


def _cap_distance(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def maximum(len1: int, len2: int, weights: LevenshteinWeightTable = _UNIFORM) -> int:
    """Return the largest possible weighted distance between sequences of these lengths."""
    max_dist = len1 * weights.delete_cost + len2 * weights.insert_cost
    if len1 >= len2:
        return min(max_dist, len2 * weights.replace_cost + (len1 - len2) * weights.delete_cost)
    return min(max_dist, len1 * weights.replace_cost + (len2 - len1) * weights.insert_cost)


def _raw_distance(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable,
    masks: dict[Hashable, int] | None = None,
    indel_scorer: CachedIndel | None = None,
) -> int:
    ins, dele, rep = weights.insert_cost, weights.delete_cost, weights.replace_cost
    if ins == dele:
        if ins == 0:
            return 0
        if ins == rep:
            if masks is None:
                affix = common_affix(s1, s2)
                s1 = s1[affix.prefix_len:len(s1) - affix.suffix_len]
                s2 = s2[affix.prefix_len:len(s2) - affix.suffix_len]
                masks = _pattern_masks(s1)
            return _uniform_distance(masks, len(s1), s2) * ins
        if rep >= ins + dele:
            dist = indel_scorer.distance(s2) if indel_scorer else indel.distance(s1, s2)
            return dist * ins
    return weighted_distance(s1, s2, weights)


def _normalize(dist: int, max_dist: int, score_cutoff: float) -> float:
    norm = dist / max_dist if max_dist else 0.0
    return norm if norm <= score_cutoff else 1.0


def _norm_similarity(norm_dist: float, score_cutoff: float) -> float:
    sim = 1.0 - norm_dist
    return sim if sim >= score_cutoff else 0.0


def distance(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable = _UNIFORM,
    score_cutoff: int | None = None,
) -> int:
    """Return the weighted Levenshtein distance, or ``score_cutoff + 1`` when it exceeds the cutoff."""
    return _cap_distance(_raw_distance(s1, s2, weights), score_cutoff)


def similarity(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable = _UNIFORM,
    score_cutoff: int = 0,
) -> int:
    """Return the maximum distance minus the distance, or 0 when below ``score_cutoff``."""
    sim = maximum(len(s1), len(s2), weights) - _raw_distance(s1, s2, weights)
    return sim if sim >= score_cutoff else 0


def normalized_distance(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable = _UNIFORM,
    score_cutoff: float = 1.0,
) -> float:
    """Return the distance divided by the maximum distance, or 1.0 above ``score_cutoff``."""
    max_dist = maximum(len(s1), len(s2), weights)
    return _normalize(_raw_distance(s1, s2, weights), max_dist, score_cutoff)


def normalized_similarity(
    s1: Sequence[Any],
    s2: Sequence[Any],
    weights: LevenshteinWeightTable = _UNIFORM,
    score_cutoff: float = 0.0,
) -> float:
    """Return 1 minus the normalized distance, or 0.0 when below ``score_cutoff``."""
    return _norm_similarity(normalized_distance(s1, s2, weights), score_cutoff)


def editops(s1: Sequence[Any], s2: Sequence[Any]) -> Editops:
    """Return a minimal list of uniform-cost edit operations that turn ``s1`` into ``s2``."""
    affix = common_affix(s1, s2)
    prefix = affix.prefix_len
    a = s1[prefix:len(s1) - affix.suffix_len]
    b = s2[prefix:len(s2) - affix.suffix_len]

    columns = [((1 << len(a)) - 1, 0)]
    columns.extend(_columns(_pattern_masks(a), len(a), b))

    def cell(i: int, j: int) -> int:
        vp, vn = columns[j]
        low = (1 << i) - 1
        return j + (vp & low).bit_count() - (vn & low).bit_count()

    ops: list[EditOp] = []
    i, j = len(a), len(b)
    current = cell(i, j)
    while i or j:
        if i and j and a[i - 1] == b[j - 1]:
            i -= 1
            j -= 1
            continue
        if i and cell(i - 1, j) + 1 == current:
            i -= 1
            ops.append(EditOp(EditType.DELETE, prefix + i, prefix + j))
        elif j and cell(i, j - 1) + 1 == current:
            j -= 1
            ops.append(EditOp(EditType.INSERT, prefix + i, prefix + j))
        else:
            i -= 1
            j -= 1
            ops.append(EditOp(EditType.REPLACE, prefix + i, prefix + j))
        current -= 1
    ops.reverse()
    return Editops(ops, len(s1), len(s2))


def opcodes(s1: Sequence[Any], s2: Sequence[Any]) -> Opcodes:
    """Return the edit operations that turn ``s1`` into ``s2`` as blocks."""
    return editops(s1, s2).as_opcodes()


class CachedLevenshtein:
    """Levenshtein metric with a fixed first sequence and fixed weights."""

    def __init__(self, s1: Sequence[Any], weights: LevenshteinWeightTable = _UNIFORM) -> None:
        self.s1 = s1
        self.weights = weights
        self._masks = _pattern_masks(s1)
        self._indel = CachedIndel(s1)

    def _raw(self, s2: Sequence[Any]) -> int:
        return _raw_distance(self.s1, s2, self.weights, self._masks, self._indel)

    def _maximum(self, s2: Sequence[Any]) -> int:
        return maximum(len(self.s1), len(s2), self.weights)

    def distance(self, s2: Sequence[Any], score_cutoff: int | None = None) -> int:
        return _cap_distance(self._raw(s2), score_cutoff)

    def similarity(self, s2: Sequence[Any], score_cutoff: int = 0) -> int:
        sim = self._maximum(s2) - self._raw(s2)
        return sim if sim >= score_cutoff else 0

    def normalized_distance(self, s2: Sequence[Any], score_cutoff: float = 1.0) -> float:
        return _normalize(self._raw(s2), self._maximum(s2), score_cutoff)

    def normalized_similarity(self, s2: Sequence[Any], score_cutoff: float = 0.0) -> float:
        return _norm_similarity(self.normalized_distance(s2), score_cutoff)