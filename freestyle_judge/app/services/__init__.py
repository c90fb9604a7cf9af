"""Service layer sitting between the scoring engine and the user interfaces."""

from .remote_scorer import RemoteRhymeScorer, RemoteScoringError
from .result_formatter import ScoreReportFormatter
from .scoring_service import ScoringService

__all__ = [
    "RemoteRhymeScorer",
    "RemoteScoringError",
    "ScoreReportFormatter",
    "ScoringService",
]
