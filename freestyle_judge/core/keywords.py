"""Theme keyword usage checker."""

from __future__ import annotations

from typing import List, Sequence

from .results import ScoreResult, clamp_score


__all__ = ["KEYWORDS_FOR_FULL_SCORE", "score_keywords"]


KEYWORDS_FOR_FULL_SCORE = 5
_DETAIL_PREVIEW = 3


def score_keywords(text: str, keywords: Sequence[str]) -> ScoreResult:
    """Score how many distinct theme ``keywords`` appear in ``text``.

    Every keyword counts at most once; five distinct hits earn full marks.
    """

    if not text or not keywords:
        return ScoreResult(0, "No text or no keywords to score.")

    lowered = text.lower()
    hits: List[str] = [
        keyword for keyword in keywords if keyword and keyword.lower() in lowered
    ]

    score = clamp_score(len(hits) / KEYWORDS_FOR_FULL_SCORE * 100)
    if not hits:
        return ScoreResult(score, "No keywords found from the theme.")

    preview = ", ".join(hits[:_DETAIL_PREVIEW])
    return ScoreResult(score, f"Found {len(hits)} theme keyword(s), such as 「{preview}」!")
