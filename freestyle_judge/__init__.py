"""Freestyle Judge: score freestyle verses on keywords, rhyme, rhythm and context."""

from .core import ScoreResult, Theme, TotalScore, score

__all__ = ["ScoreResult", "Theme", "TotalScore", "score"]
