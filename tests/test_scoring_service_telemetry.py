from __future__ import annotations

import logging

import pytest

from freestyle_judge.core import ScoreResult, Theme, score
from freestyle_judge.utils.telemetry import StructuredTelemetry
from freestyle_judge.app.services.scoring_service import ScoringService


SAMPLE = "赤身、トロ、寿司を食べる、海の幸を味わう"


class DummyRhymeScorer:
    name = "dummy"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def score(self, text: str) -> ScoreResult:
        self.calls.append(text)
        return ScoreResult(55, "dummy reason")


class ExplodingRhymeScorer:
    name = "exploding"

    def score(self, text: str) -> ScoreResult:
        raise RuntimeError("model unavailable")


@pytest.fixture
def service(fake_clock) -> ScoringService:
    return ScoringService(telemetry=StructuredTelemetry(time_fn=fake_clock))


def test_score_matches_core_engine(service):
    assert service.score(SAMPLE, Theme.MAGURO) == score(SAMPLE, Theme.MAGURO)


def test_score_records_telemetry(service):
    total = service.score(SAMPLE, "maguro")

    snapshot = service.get_latest_telemetry()
    assert snapshot["name"] == "score"
    assert snapshot["counters"]["score.completed"] == 1
    assert snapshot["metadata"]["input.theme"] == "maguro"
    assert snapshot["metadata"]["result.total_score"] == total.total_score
    assert snapshot["metadata"]["result.components"]["keyword"] == 80
    assert snapshot["timings"]["score.engine"]["count"] == 1


def test_latest_telemetry_is_empty_before_any_request(service):
    assert service.get_latest_telemetry() == {}


def test_each_request_starts_a_new_trace(service):
    service.score(SAMPLE, Theme.MAGURO)
    first_trace = service.get_latest_telemetry()["trace_id"]
    service.score("", Theme.TAI)

    snapshot = service.get_latest_telemetry()
    assert snapshot["trace_id"] == first_trace + 1
    assert snapshot["counters"]["score.completed"] == 1


def test_unknown_theme_raises_before_scoring(service):
    with pytest.raises(ValueError):
        service.score(SAMPLE, "unagi")


def test_score_logs_request_context(service, caplog):
    caplog.set_level(logging.INFO, logger="freestyle_judge.app.services.scoring_service")

    service.score(SAMPLE, Theme.MAGURO)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Scoring request completed" in message and '"total_score": 79' in message for message in messages)


def test_check_rhyme_defaults_to_local_engine(service):
    result = service.check_rhyme(SAMPLE)

    assert result == score(SAMPLE, Theme.MAGURO).rhyme
    assert service.rhyme_scorer_name == "local"


def test_check_rhyme_uses_selected_scorer(fake_clock):
    scorer = DummyRhymeScorer()
    service = ScoringService(
        rhyme_scorer=scorer,
        telemetry=StructuredTelemetry(time_fn=fake_clock),
    )

    result = service.check_rhyme(SAMPLE)

    assert result == ScoreResult(55, "dummy reason")
    assert scorer.calls == [SAMPLE]
    snapshot = service.get_latest_telemetry()
    assert snapshot["counters"]["rhyme.completed"] == 1
    assert snapshot["metadata"]["input.scorer"] == "dummy"


def test_check_rhyme_failure_is_recorded_and_raised(service, caplog):
    service.set_rhyme_scorer(ExplodingRhymeScorer())
    caplog.set_level(logging.ERROR, logger="freestyle_judge.app.services.scoring_service")

    with pytest.raises(RuntimeError, match="model unavailable"):
        service.check_rhyme(SAMPLE)

    snapshot = service.get_latest_telemetry()
    assert snapshot["counters"]["rhyme.failed"] == 1
    assert any("Rhyme check failed" in record.getMessage() for record in caplog.records)


def test_compare_vowels_delegates_to_core(service):
    comparison = service.compare_vowels("キングオブヘッド", "ミンナノメロディ")

    assert comparison.vowels_a == "INUOUEO"
    assert 0 <= comparison.similarity <= 100


def test_services_can_be_constructed_repeatedly(fake_clock):
    first = ScoringService(telemetry=StructuredTelemetry(time_fn=fake_clock))
    second = ScoringService(telemetry=StructuredTelemetry(time_fn=fake_clock))

    assert first.score("", Theme.IWASHI) == second.score("", Theme.IWASHI)
