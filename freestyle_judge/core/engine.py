"""Entry points tying the checkers and aggregator together."""

from __future__ import annotations

from typing import Protocol, Sequence, Union

from .aggregator import DEFAULT_WEIGHTS, ScoreWeights, aggregate
from .context import score_meaning
from .keywords import score_keywords
from .results import ScoreResult, TotalScore
from .rhyme import score_rhyme
from .rhythm import score_rhythm
from .themes import Theme


__all__ = ["Scorer", "LocalRhymeScorer", "score", "score_transcript"]


class Scorer(Protocol):
    """Anything able to turn a transcript into a single :class:`ScoreResult`."""

    def score(self, text: str) -> ScoreResult:  # pragma: no cover - protocol
        ...


class LocalRhymeScorer:
    """In-process rhyme scorer built on vowel skeletons."""

    name = "local"

    def score(self, text: str) -> ScoreResult:
        return score_rhyme(text)


def score_transcript(
    text: str,
    keywords: Sequence[str],
    *,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> TotalScore:
    """Run all four checkers over ``text`` against an explicit keyword list."""

    text = text or ""
    keywords = tuple(keywords)
    return aggregate(
        score_keywords(text, keywords),
        score_rhyme(text),
        score_rhythm(text),
        score_meaning(text, keywords),
        weights=weights,
    )


def score(
    text: str,
    theme: Union[Theme, str],
    *,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> TotalScore:
    """Score ``text`` against the keyword list of ``theme``.

    ``theme`` may be given as its string value; unknown values raise
    ``ValueError``.
    """

    return score_transcript(text, Theme(theme).keywords, weights=weights)
