# editmetrics

Edit-distance and similarity metrics for strings and for any other sequences
of comparable, hashable items (lists, tuples, bytes).

Each metric module offers the same four functions:

- `distance(s1, s2, ...)`
- `similarity(s1, s2, ...)`
- `normalized_distance(s1, s2, ...)`, a float between 0 and 1
- `normalized_similarity(s1, s2, ...)`, a float between 0 and 1

All of them take an optional `score_cutoff`. For a distance, a result above the
cutoff comes back as `score_cutoff + 1` (or `1.0` once normalized). For a
similarity, a result below the cutoff comes back as `0` (or `0.0`).

## Metrics

| Module | Metric |
|---|---|
| `editmetrics.levenshtein` | Levenshtein, with optional insert, delete and replace weights |
| `editmetrics.indel` | Insertions and deletions only |
| `editmetrics.lcs_seq` | Longest common subsequence |
| `editmetrics.hamming` | Hamming; raises `ValueError` when the lengths differ |
| `editmetrics.jaro` | Jaro similarity |
| `editmetrics.jaro_winkler` | Jaro-Winkler, with a `prefix_weight` (default 0.1) |
| `editmetrics.osa` | Optimal string alignment |
| `editmetrics.damerau_levenshtein` | Unrestricted Damerau-Levenshtein |
| `editmetrics.prefix` | Length of the common prefix |
| `editmetrics.postfix` | Length of the common suffix |

For Jaro and Jaro-Winkler the score is already between 0 and 1, so the
normalized functions return the same values as `similarity` and `distance`.

Supporting modules:

- `editmetrics.types`: `EditType`, `EditOp`, `Opcode`, `Editops`, `Opcodes`,
  `LevenshteinWeightTable`, `StringAffix`, `ScoreAlignment`.
- `editmetrics.common`: `common_prefix_length`, `common_suffix_length`,
  `common_affix`, `is_space`, `sorted_split`, `set_decomposition` and the
  `SplittedSentence` and `DecomposedSet` classes.
- `editmetrics.weighted`: `levenshtein_matrix` and `weighted_distance`, the
  full-matrix weighted Levenshtein computation.

## Installation

```
pip install editmetrics
```

## Examples

```python
from editmetrics import levenshtein, indel, jaro_winkler
from editmetrics.types import LevenshteinWeightTable

levenshtein.distance("lewenstein", "levenshtein")                                   # 2
levenshtein.distance("lewenstein", "levenshtein", LevenshteinWeightTable(1, 1, 2))  # 3
indel.distance("South Korea", "North Korea")                                         # 4
indel.distance("South Korea", "North Korea", score_cutoff=2)                         # 3
jaro_winkler.similarity("MARTHA", "MARHTA")
```

`levenshtein.maximum(len1, len2, weights)` gives the largest possible weighted
distance between sequences of those lengths; the similarity and normalized
scores are based on it.

### Comparing one sequence against many

The cached scorers keep the first sequence and compare it with many others:

```python
from editmetrics.levenshtein import CachedLevenshtein

scorer = CachedLevenshtein("aaaa")
[scorer.distance(word) for word in ["aaa", "abaa", "bbbb"]]  # [1, 1, 4]
```

`CachedIndel`, `CachedLCSseq`, `CachedPrefix`, `CachedPostfix` and
`CachedDamerauLevenshtein` work the same way.

### Edit operations

```python
from editmetrics import levenshtein

ops = levenshtein.editops("Lorem ipsum.", "XYZLorem ABC iPsum")
ops.apply("Lorem ipsum.", "XYZLorem ABC iPsum")     # "XYZLorem ABC iPsum"
codes = levenshtein.opcodes("Lorem ipsum.", "XYZLorem ABC iPsum")
codes.apply("Lorem ipsum.", "XYZLorem ABC iPsum")   # "XYZLorem ABC iPsum"
```

`levenshtein.editops` uses uniform costs. `lcs_seq.editops` returns only
insertions and deletions. `Editops` and `Opcodes` also provide `slice`,
`reverse`, `inverse` and conversion between the two forms (`as_opcodes`,
`as_editops`); `Editops` adds `remove_slice` and `remove_subsequence`.

## What is not included

This is a library only: there is no command-line tool. It offers the metrics
above, not higher-level fuzzy-matching scores such as partial, token-sort or
token-set ratios, and no routines for searching a collection for best matches.

## Running the tests

```
pip install -e ".[test]"
pytest
```