"""Core phonetic and lexical scoring engine for Freestyle Judge."""

from .aggregator import DEFAULT_WEIGHTS, ScoreWeights, aggregate, resolve_final_message
from .context import KeywordHit, find_keyword_hits, score_meaning
from .edit_distance import levenshtein_distance, similarity_percentage
from .engine import LocalRhymeScorer, Scorer, score, score_transcript
from .kana import count_morae, extract_vowels, to_katakana
from .keywords import score_keywords
from .results import ScoreResult, TotalScore
from .rhyme import VowelComparison, compare_vowels, score_rhyme
from .rhythm import mora_statistics, score_rhythm, verse_mora_counts
from .themes import THEME_KEYWORDS, Theme
from .verses import split_verses

__all__ = [
    "DEFAULT_WEIGHTS",
    "ScoreWeights",
    "aggregate",
    "resolve_final_message",
    "KeywordHit",
    "find_keyword_hits",
    "score_meaning",
    "levenshtein_distance",
    "similarity_percentage",
    "Scorer",
    "LocalRhymeScorer",
    "score",
    "score_transcript",
    "count_morae",
    "extract_vowels",
    "to_katakana",
    "score_keywords",
    "ScoreResult",
    "TotalScore",
    "VowelComparison",
    "compare_vowels",
    "score_rhyme",
    "mora_statistics",
    "score_rhythm",
    "verse_mora_counts",
    "THEME_KEYWORDS",
    "Theme",
    "split_verses",
]
