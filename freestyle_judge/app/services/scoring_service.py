"""Scoring service wrapping the core engine with logging and telemetry."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from freestyle_judge.core import (
    LocalRhymeScorer,
    Scorer,
    ScoreResult,
    Theme,
    TotalScore,
    VowelComparison,
    compare_vowels,
    score,
)

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from ...utils.telemetry import StructuredTelemetry
from .result_formatter import ScoreReportFormatter


_SCORE_BUCKETS = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)


class ScoringService:
    """Front door used by the UI and CLI to score transcripts.

    ``rhyme_scorer`` backs :meth:`check_rhyme` only; the full four-way
    :meth:`score` always runs the local engine.
    """

    def __init__(
        self,
        *,
        rhyme_scorer: Optional[Scorer] = None,
        telemetry: Optional[StructuredTelemetry] = None,
        formatter: Optional[ScoreReportFormatter] = None,
    ) -> None:
        self.rhyme_scorer: Scorer = rhyme_scorer or LocalRhymeScorer()
        self.telemetry = telemetry or StructuredTelemetry()
        self.formatter = formatter or ScoreReportFormatter()

        self._logger = get_logger(__name__).bind(
            component="scoring_service",
            rhyme_scorer=self.rhyme_scorer_name,
        )

        self._metric_requests = create_counter(
            "freestyle_score_requests_total",
            "Total scoring requests handled, by operation.",
            label_names=("operation",),
        )
        self._metric_duration = create_histogram(
            "freestyle_score_request_seconds",
            "Latency of full transcript scoring.",
        )
        self._metric_total_score = create_histogram(
            "freestyle_total_score",
            "Distribution of total scores by theme.",
            label_names=("theme",),
            buckets=_SCORE_BUCKETS,
        )
        self._metric_rhyme_failures = create_counter(
            "freestyle_remote_rhyme_failures_total",
            "Rhyme checks whose scorer raised an exception.",
            label_names=("scorer",),
        )

    @property
    def rhyme_scorer_name(self) -> str:
        return str(getattr(self.rhyme_scorer, "name", type(self.rhyme_scorer).__name__))

    def set_rhyme_scorer(self, scorer: Scorer) -> None:
        self.rhyme_scorer = scorer
        self._logger = self._logger.bind(rhyme_scorer=self.rhyme_scorer_name)

    # Public API ------------------------------------------------------------
    def score(self, text: str, theme: Union[Theme, str]) -> TotalScore:
        """Score ``text`` against ``theme`` with the local engine."""

        theme = Theme(theme)
        text = text or ""
        telemetry = self.telemetry
        request_context = {"theme": theme.value, "text_length": len(text)}

        telemetry.start_trace("score")
        telemetry.increment("score.invoked")
        telemetry.annotate("input.theme", theme.value)
        telemetry.annotate("input.text_length", len(text))
        self._metric_requests.labels(operation="score").inc()
        self._logger.info("Scoring request received", context=request_context)

        with start_span("freestyle.score", request_context) as span:
            with self._metric_duration.time(), telemetry.timer("score.engine"):
                total = score(text, theme)

            components = {name: result.score for name, result in total.components().items()}
            telemetry.annotate("result.components", components)
            telemetry.annotate("result.total_score", total.total_score)
            telemetry.increment("score.completed")

            self._metric_total_score.labels(theme=theme.value).observe(total.total_score)
            span_attributes = {f"score.{name}": value for name, value in components.items()}
            span_attributes["score.total"] = total.total_score
            add_span_attributes(span, span_attributes)

        self._logger.info(
            "Scoring request completed",
            context={"theme": theme.value, "total_score": total.total_score, **components},
        )
        return total

    def check_rhyme(self, text: str) -> ScoreResult:
        """Score only the rhyme of ``text`` with the configured rhyme scorer."""

        scorer_name = self.rhyme_scorer_name
        telemetry = self.telemetry
        telemetry.start_trace("check_rhyme")
        telemetry.annotate("input.scorer", scorer_name)
        self._metric_requests.labels(operation="check_rhyme").inc()

        with start_span("freestyle.check_rhyme", {"scorer": scorer_name}) as span:
            try:
                with telemetry.timer("rhyme.scorer", {"scorer": scorer_name}):
                    result = self.rhyme_scorer.score(text or "")
            except Exception as exc:
                self._metric_rhyme_failures.labels(scorer=scorer_name).inc()
                self._logger.error(
                    "Rhyme check failed",
                    context={"scorer": scorer_name, "error": str(exc)},
                )
                record_exception(span, exc)
                telemetry.increment("rhyme.failed")
                raise

            telemetry.annotate("result.score", result.score)
            telemetry.increment("rhyme.completed")
            add_span_attributes(span, {"score.rhyme": result.score})

        return result

    def compare_vowels(self, reading_a: str, reading_b: str) -> VowelComparison:
        self._metric_requests.labels(operation="compare_vowels").inc()
        comparison = compare_vowels(reading_a or "", reading_b or "")
        self._logger.debug(
            "Vowel comparison",
            context={
                "vowels_a": comparison.vowels_a,
                "vowels_b": comparison.vowels_b,
                "similarity": comparison.similarity,
            },
        )
        return comparison

    def format_total(self, total: TotalScore) -> str:
        return self.formatter.format_total(total)

    def get_latest_telemetry(self) -> Dict[str, Any]:
        """Return the most recent telemetry snapshot, if any."""

        return self.telemetry.latest_snapshot()


__all__ = ["ScoringService"]
