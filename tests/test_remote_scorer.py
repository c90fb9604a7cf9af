from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest
import requests

from freestyle_judge.core import ScoreResult
from freestyle_judge.app.services.remote_scorer import (
    RemoteRhymeScorer,
    RemoteScoringError,
)


class FakeResponse:
    def __init__(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("no body")
        return self._body


class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self, *outcomes: Any) -> None:
        self._outcomes = list(outcomes)
        self.requests: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append({"url": url, **kwargs})
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _model_body(payload: Any) -> Dict[str, Any]:
    text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _scorer(session: FakeSession, sleeps: List[float], **kwargs: Any) -> RemoteRhymeScorer:
    return RemoteRhymeScorer("test-key", session=session, sleep=sleeps.append, **kwargs)


def test_successful_response_becomes_score_result():
    session = FakeSession(FakeResponse(200, _model_body({"score": 72.4, "reason": "語尾の母音が一致"})))
    sleeps: List[float] = []

    result = _scorer(session, sleeps).score("赤身、トロ")

    assert result == ScoreResult(72, "語尾の母音が一致")
    assert sleeps == []
    request = session.requests[0]
    assert "gemini-2.5-flash:generateContent" in request["url"]
    assert request["params"] == {"key": "test-key"}
    assert request["json"]["contents"][0]["parts"][0]["text"] == "赤身、トロ"
    assert request["json"]["generationConfig"]["responseMimeType"] == "application/json"


def test_retryable_statuses_back_off_exponentially():
    session = FakeSession(
        FakeResponse(503),
        FakeResponse(429),
        FakeResponse(200, _model_body({"score": 40, "reason": "ok"})),
    )
    sleeps: List[float] = []

    result = _scorer(session, sleeps).score("text")

    assert result.score == 40
    assert sleeps == [1.0, 2.0]


def test_connection_errors_are_retried():
    session = FakeSession(
        requests.ConnectionError("reset"),
        FakeResponse(200, _model_body({"score": 10, "reason": "weak"})),
    )
    sleeps: List[float] = []

    assert _scorer(session, sleeps).score("text").score == 10
    assert sleeps == [1.0]


def test_gives_up_after_max_retries():
    session = FakeSession(*[FakeResponse(500) for _ in range(5)])
    sleeps: List[float] = []

    with pytest.raises(RemoteScoringError, match="after 5 attempts"):
        _scorer(session, sleeps).score("text")

    assert sleeps == [1.0, 2.0, 4.0, 8.0]
    assert len(session.requests) == 5


def test_client_errors_surface_api_message():
    session = FakeSession(FakeResponse(400, {"error": {"message": "API key not valid"}}))

    with pytest.raises(RemoteScoringError, match="API key not valid"):
        _scorer(session, []).score("text")


def test_client_error_with_plain_string_error():
    session = FakeSession(FakeResponse(401, {"error": "bad key"}))

    with pytest.raises(RemoteScoringError, match="bad key"):
        _scorer(session, []).score("text")


def test_client_error_with_unexpected_body_reports_status():
    session = FakeSession(FakeResponse(400, ["not", "an", "object"]))

    with pytest.raises(RemoteScoringError, match="status 400"):
        _scorer(session, []).score("text")


def test_client_error_without_body_reports_status():
    session = FakeSession(FakeResponse(403))

    with pytest.raises(RemoteScoringError, match="status 403"):
        _scorer(session, []).score("text")


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        _model_body("not json"),
        _model_body({"score": 50}),
        _model_body({"reason": "missing score"}),
        _model_body({"score": "high", "reason": "x"}),
        _model_body('{"score": 1e999, "reason": "x"}'),
        _model_body('{"score": NaN, "reason": "x"}'),
    ],
)
def test_malformed_model_output_is_rejected(body):
    with pytest.raises(RemoteScoringError):
        RemoteRhymeScorer.parse_response(body)


def test_out_of_range_scores_are_clamped():
    assert RemoteRhymeScorer.parse_response(_model_body({"score": 150, "reason": "x"})).score == 100
    assert RemoteRhymeScorer.parse_response(_model_body({"score": -3, "reason": "x"})).score == 0


def test_api_key_is_required():
    with pytest.raises(ValueError):
        RemoteRhymeScorer("")


def test_custom_model_changes_endpoint():
    scorer = RemoteRhymeScorer("k", model="gemini-test", session=FakeSession())
    assert scorer.url.endswith("/models/gemini-test:generateContent")
