"""Edit-distance and similarity metrics for strings and sequences."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "damerau_levenshtein",
    "hamming",
    "indel",
    "jaro",
    "jaro_winkler",
    "lcs_seq",
    "levenshtein",
    "osa",
    "postfix",
    "prefix",
    "types",
    "weighted",
]