"""Application wiring for Freestyle Judge."""

from __future__ import annotations

import os
from typing import Optional, Union

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from freestyle_judge.core import LocalRhymeScorer, Scorer, Theme, TotalScore
from freestyle_judge.utils.logging_config import configure_logging
from freestyle_judge.utils.observability import get_logger
from freestyle_judge.utils.telemetry import StructuredTelemetry, TelemetryLogger

from freestyle_judge.app.services.remote_scorer import DEFAULT_MODEL, RemoteRhymeScorer
from freestyle_judge.app.services.scoring_service import ScoringService
from freestyle_judge.app.ui.gradio import create_interface


_TRUTHY = {"1", "true", "yes", "on"}


def build_rhyme_scorer() -> Scorer:
    """Pick the rhyme-checker backend from the environment.

    ``FREESTYLE_JUDGE_RHYME_SCORER=remote`` selects the Gemini scorer when
    ``GEMINI_API_KEY`` is present; anything else uses the local engine.
    """

    logger = get_logger(__name__).bind(component="app_facade")
    choice = os.environ.get("FREESTYLE_JUDGE_RHYME_SCORER", "local").strip().lower()
    if choice != "remote":
        return LocalRhymeScorer()

    api_key = os.environ.get("GEMINI_API_KEY", "").strip()
    if not api_key:
        logger.warning(
            "Remote rhyme scorer requested without GEMINI_API_KEY; using local scorer",
            context={"requested": choice},
        )
        return LocalRhymeScorer()

    model = os.environ.get("FREESTYLE_JUDGE_GEMINI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL
    return RemoteRhymeScorer(api_key, model=model)


class FreestyleJudgeApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        *,
        scoring_service: Optional[ScoringService] = None,
        rhyme_scorer: Optional[Scorer] = None,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="app_facade")

        if scoring_service is None:
            telemetry = StructuredTelemetry(listeners=[TelemetryLogger()])
            scoring_service = ScoringService(
                rhyme_scorer=rhyme_scorer or build_rhyme_scorer(),
                telemetry=telemetry,
            )
        elif rhyme_scorer is not None:
            scoring_service.set_rhyme_scorer(rhyme_scorer)
        self.scoring_service = scoring_service

        self._logger.info(
            "Application dependencies wired",
            context={
                "rhyme_scorer": self.scoring_service.rhyme_scorer_name,
                "themes": [theme.value for theme in Theme],
            },
        )

    # Public API ------------------------------------------------------------
    def score(self, text: str, theme: Union[Theme, str]) -> TotalScore:
        return self.scoring_service.score(text, theme)

    def format_total(self, total: TotalScore) -> str:
        return self.scoring_service.format_total(total)

    def create_gradio_interface(self):
        return create_interface(self.scoring_service)


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    env_value = os.environ.get("FREESTYLE_JUDGE_SHARE", "")
    return str(env_value).strip().lower() in _TRUTHY


def main() -> None:
    configure_logging()
    app = FreestyleJudgeApp()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=_should_share_interface(),
    )


__all__ = ["FreestyleJudgeApp", "build_rhyme_scorer", "main"]


if __name__ == "__main__":
    main()
