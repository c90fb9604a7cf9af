"""Edit distance between vowel skeletons and its percentage similarity."""

from __future__ import annotations

from typing import List, Sequence

from .results import clamp_score


__all__ = ["levenshtein_distance", "similarity_percentage"]


def levenshtein_distance(a: Sequence[str], b: Sequence[str]) -> int:
    """Return the unit-cost insert/delete/substitute distance between ``a`` and ``b``."""

    table: List[List[int]] = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(a) + 1):
        table[0][i] = i
    for j in range(len(b) + 1):
        table[j][0] = j

    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[j][i] = min(
                table[j][i - 1] + 1,
                table[j - 1][i] + 1,
                table[j - 1][i - 1] + cost,
            )

    return table[len(b)][len(a)]


def similarity_percentage(distance: int, len1: int, len2: int) -> int:
    """Convert an edit ``distance`` into a 0-100 similarity.

    Two empty strings are treated as identical.
    """

    max_length = max(len1, len2)
    if max_length == 0:
        return 100
    return clamp_score((1 - distance / max_length) * 100)
