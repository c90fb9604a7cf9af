"""Context checker rewarding distinct keywords used close together.

This is a proximity heuristic: two different theme keywords within a short
span of characters are taken as deliberate, connected use.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Sequence

from .results import ScoreResult, clamp_score


__all__ = ["CONTEXT_DISTANCE", "KeywordHit", "find_keyword_hits", "score_meaning"]


CONTEXT_DISTANCE = 15
CONTEXT_PAIRS_FOR_FULL_SCORE = 3


class KeywordHit(NamedTuple):
    keyword: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.keyword)


def find_keyword_hits(text: str, keywords: Sequence[str]) -> List[KeywordHit]:
    """Every case-insensitive occurrence of every keyword, ordered by position."""

    hits: List[KeywordHit] = []
    if not text:
        return hits
    for keyword in keywords:
        if not keyword:
            continue
        pattern = re.compile(re.escape(keyword), re.IGNORECASE)
        hits.extend(KeywordHit(keyword, match.start()) for match in pattern.finditer(text))
    hits.sort(key=lambda hit: hit.start)
    return hits


def score_meaning(text: str, keywords: Sequence[str]) -> ScoreResult:
    hits = find_keyword_hits(text, keywords)
    if len(hits) < 2:
        return ScoreResult(10, "Too few keywords to evaluate context.")

    context_count = 0
    for first, second in zip(hits, hits[1:]):
        if first.keyword != second.keyword and second.start - first.end <= CONTEXT_DISTANCE:
            context_count += 1

    score = clamp_score(min(100.0, context_count / CONTEXT_PAIRS_FOR_FULL_SCORE * 100))
    if context_count > 0:
        return ScoreResult(score, f"Keywords used in close context {context_count} time(s)!")
    return ScoreResult(score, "Keywords appear scattered, little context.")
