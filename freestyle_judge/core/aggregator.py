"""Weighted combination of the four checker scores."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .results import ScoreResult, TotalScore, clamp_score


__all__ = ["ScoreWeights", "DEFAULT_WEIGHTS", "resolve_final_message", "aggregate"]


@dataclass(frozen=True)
class ScoreWeights:
    """Relative importance of each checker; must sum to 1.0."""

    keyword: float = 0.35
    rhyme: float = 0.30
    rhythm: float = 0.15
    meaning: float = 0.20

    def __post_init__(self) -> None:
        total = self.keyword + self.rhyme + self.rhythm + self.meaning
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Score weights must sum to 1.0, got {total}")


DEFAULT_WEIGHTS = ScoreWeights()

_FINAL_MESSAGES: Tuple[Tuple[int, str], ...] = (
    (90, "Flawless flow! King of the head!"),
    (75, "Outstanding! You rode the theme all the way!"),
    (50, "Nice vibe! Keep it going!"),
)
_FALLBACK_MESSAGE = "So close! Aim higher next time!"


def resolve_final_message(total_score: int) -> str:
    for threshold, message in _FINAL_MESSAGES:
        if total_score > threshold:
            return message
    return _FALLBACK_MESSAGE


def aggregate(
    keyword: ScoreResult,
    rhyme: ScoreResult,
    rhythm: ScoreResult,
    meaning: ScoreResult,
    *,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> TotalScore:
    """Blend the checker results into a :class:`TotalScore`."""

    total = clamp_score(
        keyword.score * weights.keyword
        + rhyme.score * weights.rhyme
        + rhythm.score * weights.rhythm
        + meaning.score * weights.meaning
    )
    return TotalScore(
        keyword=keyword,
        rhyme=rhyme,
        rhythm=rhythm,
        meaning=meaning,
        total_score=total,
        final_message=resolve_final_message(total),
    )
