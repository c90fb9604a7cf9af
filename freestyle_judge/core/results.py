"""Result containers shared by the checkers and the aggregator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict


__all__ = ["ScoreResult", "TotalScore", "round_half_up", "clamp_score"]


def round_half_up(value: float) -> int:
    """Round ``value`` to the nearest integer with halves rounded upwards."""

    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round ``value`` and clamp it into the 0-100 score range."""

    return max(0, min(100, round_half_up(value)))


@dataclass(frozen=True)
class ScoreResult:
    """Score of a single checker plus a human readable explanation."""

    score: int
    detail: str

    def as_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "detail": self.detail}


@dataclass(frozen=True)
class TotalScore:
    """Combined verdict for one transcript."""

    keyword: ScoreResult
    rhyme: ScoreResult
    rhythm: ScoreResult
    meaning: ScoreResult
    total_score: int
    final_message: str

    def components(self) -> Dict[str, ScoreResult]:
        return {
            "keyword": self.keyword,
            "rhyme": self.rhyme,
            "rhythm": self.rhythm,
            "meaning": self.meaning,
        }

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            name: result.as_dict() for name, result in self.components().items()
        }
        payload["total_score"] = self.total_score
        payload["final_message"] = self.final_message
        return payload
