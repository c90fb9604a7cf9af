"""Rhyme scoring delegated to a hosted Gemini model.

The remote scorer is an alternative to :class:`LocalRhymeScorer`; callers pick
one or the other. It returns the same :class:`ScoreResult` shape, with the
model's explanation as the detail text.
"""

from __future__ import annotations

import json
import math
import time
from typing import Any, Callable, Dict, Optional

import requests

from freestyle_judge.core import ScoreResult
from freestyle_judge.core.results import clamp_score

from ...utils.observability import get_logger


DEFAULT_MODEL = "gemini-2.5-flash"
API_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)

SYSTEM_PROMPT = """あなたは韻（ライム）の専門家です。入力された日本語のテキスト（歌詞、詩、文章など）を分析し、韻の踏み具合（母音の一致、リズミカルさ、語感の良さ）を0点から100点で厳格に採点してください。
採点基準:
- 0-30点: ほとんど韻が踏めていない。
- 31-60点: 部分的に簡単な韻（例：語尾の母音が1〜2文字一致）が見られる。
- 61-80点: 複数の箇所で明確な韻（母音が3文字以上一致）が意図的に使われており、リズミカルである。
- 81-100点: 高度な技術（例：長い母音の一致、複数の単語をまたぐ韻、文中の随所）が使われており、非常に完成度が高い。

なぜその点数になったのか、どの部分がどのように韻を踏んでいる（または踏めていない）のかを具体的に、簡潔に説明してください。"""

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "score": {
            "type": "NUMBER",
            "description": "0から100点までの韻の踏み具合の点数。厳密に採点する。",
        },
        "reason": {
            "type": "STRING",
            "description": "採点の具体的な理由。どの単語の母音が一致しているか、リズムがどうかを簡潔に分析する。",
        },
    },
    "required": ["score", "reason"],
}


class RemoteScoringError(RuntimeError):
    """Raised when the remote model cannot produce a usable score."""


def _is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class RemoteRhymeScorer:
    """Score rhymes by asking a Gemini model for ``{score, reason}`` JSON."""

    name = "remote"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        session: Optional[requests.Session] = None,
        max_retries: int = 5,
        initial_delay: float = 1.0,
        timeout: float = 30.0,
        temperature: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not api_key:
            raise ValueError("RemoteRhymeScorer requires an API key")
        self.model = model
        self._api_key = api_key
        self._session = session or requests.Session()
        self._max_retries = max(1, int(max_retries))
        self._initial_delay = float(initial_delay)
        self._timeout = timeout
        self._temperature = temperature
        self._sleep = sleep
        self._logger = get_logger(__name__).bind(component="remote_rhyme_scorer", model=model)

    @property
    def url(self) -> str:
        return API_URL_TEMPLATE.format(model=self.model)

    def build_payload(self, text: str) -> Dict[str, Any]:
        return {
            "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
            "contents": [{"parts": [{"text": text}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
                "temperature": self._temperature,
            },
        }

    def _post_with_backoff(self, payload: Dict[str, Any]) -> requests.Response:
        delay = self._initial_delay
        for attempt in range(1, self._max_retries + 1):
            try:
                response = self._session.post(
                    self.url,
                    params={"key": self._api_key},
                    json=payload,
                    timeout=self._timeout,
                )
            except requests.RequestException as exc:
                failure = f"{type(exc).__name__}: {exc}"
            else:
                if not _is_retryable_status(response.status_code):
                    return response
                failure = f"HTTP {response.status_code}"

            if attempt == self._max_retries:
                raise RemoteScoringError(
                    f"Remote rhyme scoring failed after {attempt} attempts ({failure})"
                )
            self._logger.warning(
                "Retrying remote rhyme request",
                context={"attempt": attempt, "delay": delay, "failure": failure},
            )
            self._sleep(delay)
            delay *= 2

        raise RemoteScoringError("Remote rhyme scoring made no attempts")  # pragma: no cover

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = {}
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            message = error.get("message")
        else:
            message = error if isinstance(error, str) else None
        return message or f"API error (status {response.status_code})"

    @staticmethod
    def parse_response(body: Dict[str, Any]) -> ScoreResult:
        """Extract a :class:`ScoreResult` from a ``generateContent`` response body."""

        try:
            json_text = body["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise RemoteScoringError("No usable candidate in the model response") from exc
        try:
            parsed = json.loads(json_text)
        except (TypeError, ValueError) as exc:
            raise RemoteScoringError("Model response was not valid JSON") from exc

        if not isinstance(parsed, dict) or parsed.get("score") is None or not parsed.get("reason"):
            raise RemoteScoringError("Model response lacks the expected score and reason")
        try:
            raw_score = float(parsed["score"])
        except (TypeError, ValueError) as exc:
            raise RemoteScoringError("Model returned a non-numeric score") from exc
        if not math.isfinite(raw_score):
            raise RemoteScoringError("Model returned a non-finite score")
        score = clamp_score(raw_score)
        return ScoreResult(score, str(parsed["reason"]))

    def score(self, text: str) -> ScoreResult:
        response = self._post_with_backoff(self.build_payload(text or ""))
        if not response.ok:
            message = self._error_message(response)
            self._logger.error(
                "Remote rhyme request rejected",
                context={"status": response.status_code, "error": message},
            )
            raise RemoteScoringError(message)

        try:
            body = response.json()
        except ValueError as exc:
            raise RemoteScoringError("Remote response body was not JSON") from exc
        return self.parse_response(body)


__all__ = [
    "DEFAULT_MODEL",
    "RemoteRhymeScorer",
    "RemoteScoringError",
    "RESPONSE_SCHEMA",
    "SYSTEM_PROMPT",
]
