"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import gradio as gr

from freestyle_judge.core import Theme

from ..services.scoring_service import ScoringService


_THEME_CHOICES: List[Tuple[str, str]] = [(theme.label, theme.value) for theme in Theme]


def _format_live_events(snapshot: Dict[str, Any]) -> str:
    """Return a markdown representation of the latest telemetry trace."""

    if not snapshot:
        return ""

    events = snapshot.get("events") or []
    counters = snapshot.get("counters") or {}
    if not events and not counters:
        return ""

    output: List[str] = ["#### Scoring activity"]
    if events:
        output.append("")
        for event in events[-8:]:
            name = str(event.get("name", "event"))
            duration = event.get("duration")
            metadata = event.get("metadata") or {}
            meta_chunks = [f"{key}={value}" for key, value in metadata.items()]
            meta_suffix = f" – {', '.join(meta_chunks)}" if meta_chunks else ""
            if isinstance(duration, (float, int)):
                output.append(f"- `{name}` took {float(duration) * 1000:.1f}ms{meta_suffix}")
            else:
                output.append(f"- `{name}`{meta_suffix}")

    if counters:
        output.append("")
        output.append("**Counters**")
        output.append(", ".join(f"`{key}`: {value:g}" for key, value in counters.items()))

    return "\n".join(output)


def _keyword_hint(theme_value: str) -> str:
    theme = Theme(theme_value)
    return f"**{theme.label}** keywords: " + "、".join(theme.keywords)


def create_interface(scoring_service: ScoringService) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    def score_interface(text: str, theme_value: str):
        if not text or not text.strip():
            return (
                "Please enter (or dictate) a verse to score.",
                "",
            )
        total = scoring_service.score(text, theme_value)
        log_markdown = _format_live_events(scoring_service.get_latest_telemetry())
        return scoring_service.format_total(total), log_markdown

    def vowel_interface(reading_a: str, reading_b: str) -> str:
        if not reading_a or not reading_b:
            return "Please fill in both readings."
        comparison = scoring_service.compare_vowels(reading_a, reading_b)
        return scoring_service.formatter.format_comparison(comparison)

    def rhyme_interface(text: str) -> str:
        if not text or not text.strip():
            return "Please enter lyrics to check."
        try:
            result = scoring_service.check_rhyme(text)
        except Exception as exc:  # pragma: no cover - surface UI level failures
            return f"Rhyme check failed: {exc}"
        return scoring_service.formatter.format_result("Rhyme", result)

    interface_css = """
    .fj-container {max-width: 1000px; margin: 0 auto; gap: 24px;}
    .fj-hero {text-align: center; padding-bottom: 16px;}
    .fj-hero h2 {font-size: 2.1rem; margin-bottom: 0.25rem;}
    .fj-panel {border: 1px solid rgba(15, 23, 42, 0.08); border-radius: 16px; padding: 24px;}
    .fj-tip {color: #4b5563; font-size: 0.92rem; margin-top: 8px;}
    .fj-log {border-radius: 12px; padding: 16px 18px; max-height: 220px; overflow-y: auto;}
    """

    default_theme = Theme.MAGURO.value

    with gr.Blocks(
        title="Freestyle Judge",
        theme=gr.themes.Soft(),
        css=interface_css,
    ) as interface:
        with gr.Column(elem_classes=["fj-container"]):
            gr.Markdown(
                "<h2>🎤 Freestyle Judge</h2>\n"
                "<p>Drop a verse on the theme and get judged on keywords, rhyme, rhythm and context.</p>",
                elem_classes=["fj-hero"],
            )

            with gr.Tabs():
                with gr.Tab("Freestyle → Score"):
                    with gr.Group(elem_classes=["fj-panel"]):
                        theme_input = gr.Dropdown(
                            choices=_THEME_CHOICES,
                            value=default_theme,
                            label="Theme",
                        )
                        keyword_md = gr.Markdown(
                            value=_keyword_hint(default_theme),
                            elem_classes=["fj-tip"],
                        )
                        verse_input = gr.Textbox(
                            label="Verse",
                            placeholder="赤身、トロ、寿司を食べる、海の幸を味わう",
                            lines=6,
                        )
                        score_btn = gr.Button("🔥 Judge my verse", variant="primary")
                        gr.Markdown(
                            "💡 Separate verses with 、。！？ or line breaks so rhyme and rhythm can be compared.",
                            elem_classes=["fj-tip"],
                        )
                    with gr.Group(elem_classes=["fj-panel"]):
                        result_md = gr.Markdown(value="Your score will appear here.")
                        log_md = gr.Markdown(value="", elem_classes=["fj-log"])

                with gr.Tab("Vowel checker"):
                    with gr.Group(elem_classes=["fj-panel"]):
                        reading_a = gr.Textbox(label="Reading 1 (kana)", placeholder="キングオブヘッド")
                        reading_b = gr.Textbox(label="Reading 2 (kana)", placeholder="ミンナノメロディ")
                        compare_btn = gr.Button("Compare vowels")
                        comparison_md = gr.Markdown()

                with gr.Tab("Rhyme checker"):
                    with gr.Group(elem_classes=["fj-panel"]):
                        gr.Markdown(
                            f"Scorer: **{scoring_service.rhyme_scorer_name}**",
                            elem_classes=["fj-tip"],
                        )
                        rhyme_input = gr.Textbox(label="Lyrics", lines=6)
                        rhyme_btn = gr.Button("Check rhyme")
                        rhyme_md = gr.Markdown()

        theme_input.change(_keyword_hint, [theme_input], [keyword_md])
        score_btn.click(score_interface, [verse_input, theme_input], [result_md, log_md])
        compare_btn.click(vowel_interface, [reading_a, reading_b], [comparison_md])
        rhyme_btn.click(rhyme_interface, [rhyme_input], [rhyme_md])

    return interface


__all__ = ["create_interface"]
