"""Rhyme checker comparing the vowel endings of consecutive verses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .edit_distance import levenshtein_distance, similarity_percentage
from .kana import extract_vowels
from .results import ScoreResult, clamp_score
from .verses import split_verses


__all__ = [
    "RHYME_CHECK_LENGTH",
    "VowelComparison",
    "compare_vowels",
    "score_rhyme",
]


RHYME_CHECK_LENGTH = 5
_MIN_VERSE_LENGTH = 2

_TIER_MESSAGES: Tuple[Tuple[float, str], ...] = (
    (80, "Excellent rhyme!"),
    (50, "Good rhyme."),
)
_FALLBACK_TIER = "Room to improve, try rhyming harder."


@dataclass(frozen=True)
class VowelComparison:
    """Side-by-side vowel skeletons of two readings."""

    reading_a: str
    reading_b: str
    vowels_a: str
    vowels_b: str
    distance: int
    similarity: int


def compare_vowels(reading_a: str, reading_b: str) -> VowelComparison:
    """Extract and compare the vowel skeletons of two kana readings."""

    vowels_a = extract_vowels(reading_a)
    vowels_b = extract_vowels(reading_b)
    distance = levenshtein_distance(vowels_a, vowels_b)
    return VowelComparison(
        reading_a=reading_a,
        reading_b=reading_b,
        vowels_a=vowels_a,
        vowels_b=vowels_b,
        distance=distance,
        similarity=similarity_percentage(distance, len(vowels_a), len(vowels_b)),
    )


def _resolve_tier(score: float) -> str:
    for threshold, message in _TIER_MESSAGES:
        if score > threshold:
            return message
    return _FALLBACK_TIER


def score_rhyme(text: str) -> ScoreResult:
    """Average the vowel similarity of consecutive verse endings."""

    verses = split_verses(text, min_length=_MIN_VERSE_LENGTH)
    if len(verses) < 2:
        return ScoreResult(0, "Not enough verses to compare for rhyme.")

    total_similarity = 0
    pairs_compared = 0
    for previous, current in zip(verses, verses[1:]):
        vowels_a = extract_vowels(previous[-RHYME_CHECK_LENGTH:])
        vowels_b = extract_vowels(current[-RHYME_CHECK_LENGTH:])
        if not vowels_a or not vowels_b:
            continue
        distance = levenshtein_distance(vowels_a, vowels_b)
        total_similarity += similarity_percentage(distance, len(vowels_a), len(vowels_b))
        pairs_compared += 1

    if pairs_compared == 0:
        return ScoreResult(0, "No comparable vowel pairs between verse endings.")

    average = min(100.0, total_similarity / pairs_compared)
    score = clamp_score(average)
    detail = f"Verse-ending vowel similarity averaged {score}%. {_resolve_tier(average)}"
    return ScoreResult(score, detail)
