"""Markdown rendering for score reports."""

from __future__ import annotations

from typing import List, Tuple

from freestyle_judge.core import ScoreResult, TotalScore, VowelComparison


_COMPONENT_LABELS: Tuple[Tuple[str, str], ...] = (
    ("keyword", "🔑 Keywords"),
    ("rhyme", "🎤 Rhyme"),
    ("rhythm", "🥁 Rhythm"),
    ("meaning", "🧠 Context"),
)


def _score_bar(score: int, width: int = 10) -> str:
    filled = max(0, min(width, round(score / 100 * width)))
    return "█" * filled + "░" * (width - filled)


class ScoreReportFormatter:
    """Render score results for the UI and the command line."""

    def format_total(self, total: TotalScore) -> str:
        lines: List[str] = [
            f"## {total.total_score} / 100",
            f"**{total.final_message}**",
            "",
            "| Check | Score | | Detail |",
            "|---|---:|---|---|",
        ]
        components = total.components()
        for key, label in _COMPONENT_LABELS:
            result = components[key]
            lines.append(
                f"| {label} | {result.score} | `{_score_bar(result.score)}` | {result.detail} |"
            )
        return "\n".join(lines)

    def format_result(self, title: str, result: ScoreResult) -> str:
        return f"### {title}: {result.score} / 100\n\n{result.detail}"

    def format_comparison(self, comparison: VowelComparison) -> str:
        if not comparison.vowels_a and not comparison.vowels_b:
            return "❌ No kana found in either reading. Enter readings in hiragana or katakana."
        return "\n".join(
            [
                f"### Vowel similarity: {comparison.similarity}%",
                "",
                "| | Reading | Vowels |",
                "|---|---|---|",
                f"| 1 | {comparison.reading_a} | `{comparison.vowels_a or '-'}` |",
                f"| 2 | {comparison.reading_b} | `{comparison.vowels_b or '-'}` |",
                "",
                f"Edit distance: {comparison.distance}",
            ]
        )

    def format_plain(self, total: TotalScore) -> str:
        """Plain-text report for terminals."""

        lines = [f"Total: {total.total_score}/100  {total.final_message}"]
        components = total.components()
        for key, _label in _COMPONENT_LABELS:
            result = components[key]
            lines.append(f"  {key:<8} {result.score:>3}  {result.detail}")
        return "\n".join(lines)


__all__ = ["ScoreReportFormatter"]
