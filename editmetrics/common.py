"""Helpers shared by the metrics: affix handling and sentence splitting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import groupby
from typing import Any

from editmetrics.types import StringAffix

__all__ = [
    "common_prefix_length",
    "common_suffix_length",
    "common_affix",
    "is_space",
    "SplittedSentence",
    "sorted_split",
    "DecomposedSet",
    "set_decomposition",
]

_NARROW_SPACES = frozenset(
    {0x0009, 0x000A, 0x000B, 0x000C, 0x000D, 0x001C, 0x001D, 0x001E, 0x001F, 0x0020}
)

_WIDE_SPACES = _NARROW_SPACES | frozenset(
    {
        0x0085,
        0x00A0,
        0x1680,
        0x2000,
        0x2001,
        0x2002,
        0x2003,
        0x2004,
        0x2005,
        0x2006,
        0x2007,
        0x2008,
        0x2009,
        0x200A,
        0x2028,
        0x2029,
        0x202F,
        0x205F,
        0x3000,
    }
)


def _code(ch: Any) -> int:
    return ord(ch) if isinstance(ch, str) else int(ch)


def is_space(ch: Any) -> bool:
    """Tell whether a character (or code point) counts as whitespace."""
    return _code(ch) in _WIDE_SPACES


def _is_byte_space(ch: Any) -> bool:
    return _code(ch) in _NARROW_SPACES


def common_prefix_length(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Return the length of the common prefix of two sequences."""
    length = 0
    for a, b in zip(s1, s2):
        if a != b:
            break
        length += 1
    return length


def common_suffix_length(s1: Sequence[Any], s2: Sequence[Any]) -> int:
    """Return the length of the common suffix of two sequences."""
    return common_prefix_length(list(reversed(s1)), list(reversed(s2)))


def common_affix(s1: Sequence[Any], s2: Sequence[Any]) -> StringAffix:
    """Return the common prefix length and the common suffix length of what remains."""
    prefix = common_prefix_length(s1, s2)
    suffix = common_suffix_length(s1[prefix:], s2[prefix:])
    return StringAffix(prefix, suffix)


@dataclass
class SplittedSentence:
    """A sentence held as a list of words."""

    words: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.words = list(self.words)

    def dedupe(self) -> int:
        """Drop adjacent duplicate words and return how many were removed."""
        old_count = len(self.words)
        self.words = [word for word, _ in groupby(self.words)]
        return old_count - len(self.words)

    def word_count(self) -> int:
        """Return the number of words."""
        return len(self.words)

    def __len__(self) -> int:
        if not self.words:
            return 0
        return len(self.words) - 1 + sum(len(word) for word in self.words)

    def join(self) -> Any:
        """Join the words with single spaces."""
        if not self.words:
            return ""
        first = self.words[0]
        if isinstance(first, str):
            return " ".join(self.words)
        if isinstance(first, (bytes, bytearray)):
            return b" ".join(bytes(word) for word in self.words)
        separator: Any = " " if any(isinstance(ch, str) for w in self.words for ch in w) else 0x20
        joined: list[Any] = list(first)
        for word in self.words[1:]:
            joined.append(separator)
            joined.extend(word)
        return joined


def sorted_split(sentence: Sequence[Any]) -> SplittedSentence:
    """Split a sentence on whitespace and sort the words."""
    test = _is_byte_space if isinstance(sentence, (bytes, bytearray)) else is_space
    words: list[Any] = []
    start: int | None = None
    for pos, ch in enumerate(sentence):
        if test(ch):
            if start is not None:
                words.append(sentence[start:pos])
                start = None
        elif start is None:
            start = pos
    if start is not None:
        words.append(sentence[start:])
    words.sort()
    return SplittedSentence(words)


@dataclass
class DecomposedSet:
    """Words only in a, words only in b, and words in both."""

    difference_ab: SplittedSentence
    difference_ba: SplittedSentence
    intersection: SplittedSentence


def set_decomposition(a: SplittedSentence, b: SplittedSentence) -> DecomposedSet:
    """Split two deduplicated word lists into their differences and intersection."""
    words_a = SplittedSentence(a.words)
    words_b = SplittedSentence(b.words)
    words_a.dedupe()
    words_b.dedupe()

    intersection: list[Any] = []
    difference_ab: list[Any] = []
    difference_ba = list(words_b.words)

    for word in words_a.words:
        try:
            difference_ba.remove(word)
        except ValueError:
            difference_ab.append(word)
        else:
            intersection.append(word)

    return DecomposedSet(
        SplittedSentence(difference_ab),
        SplittedSentence(difference_ba),
        SplittedSentence(intersection),
    )