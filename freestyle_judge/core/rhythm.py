"""Rhythm checker measuring how evenly morae are spread across verses."""

from __future__ import annotations

import statistics
from typing import List, Sequence, Tuple

from .kana import count_morae
from .results import ScoreResult, clamp_score
from .verses import split_verses


__all__ = ["verse_mora_counts", "mora_statistics", "score_rhythm"]


_TIER_MESSAGES: Tuple[Tuple[float, str], ...] = (
    (80, "Very stable rhythm!"),
    (50, "Good rhythm."),
)
_FALLBACK_TIER = "Rhythm is somewhat unstable."


def verse_mora_counts(text: str) -> List[int]:
    """Mora count of every non-empty verse, zero counts included."""

    return [count_morae(verse) for verse in split_verses(text)]


def mora_statistics(counts: Sequence[int]) -> Tuple[float, float]:
    """Return the population mean and standard deviation of ``counts``."""

    if not counts:
        return 0.0, 0.0
    return statistics.fmean(counts), statistics.pstdev(counts)


def _resolve_tier(score: float) -> str:
    for threshold, message in _TIER_MESSAGES:
        if score > threshold:
            return message
    return _FALLBACK_TIER


def score_rhythm(text: str) -> ScoreResult:
    verses = split_verses(text)
    if len(verses) < 2:
        return ScoreResult(0, "Not enough verses to compare for rhythm.")

    counts = [count for count in (count_morae(verse) for verse in verses) if count > 0]
    if len(counts) < 2:
        return ScoreResult(10, "Not enough countable verses to judge rhythm.")

    mean, std_dev = mora_statistics(counts)
    raw_score = max(0.0, (1 - std_dev / mean) * 100)
    detail = (
        f"Mora count spread (mean {mean:.1f}, std dev {std_dev:.1f}). "
        f"{_resolve_tier(raw_score)}"
    )
    return ScoreResult(clamp_score(raw_score), detail)
