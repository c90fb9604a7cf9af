"""Command line entry point for scoring a freestyle transcript."""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Sequence

from freestyle_judge.core import Theme, extract_vowels, split_verses
from freestyle_judge.app.services.scoring_service import ScoringService
from freestyle_judge.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score a freestyle verse on keywords, rhyme, rhythm and context."
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Transcript to score. Reads standard input when omitted.",
    )
    parser.add_argument(
        "--theme",
        choices=[theme.value for theme in Theme],
        default=Theme.MAGURO.value,
        help="Theme whose keywords the verse is judged against (default: maguro).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of a text report.",
    )
    parser.add_argument(
        "--pretty-json",
        action="store_true",
        help="Indent JSON output for readability (implies --json).",
    )
    parser.add_argument(
        "--vowels",
        action="store_true",
        help="Also print the vowel skeleton of every verse.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to FREESTYLE_JUDGE_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        args.log_level or os.environ.get("FREESTYLE_JUDGE_LOG_LEVEL") or "WARNING"
    )

    text = args.text if args.text is not None else sys.stdin.read()
    service = ScoringService()
    total = service.score(text, args.theme)

    if args.pretty_json or args.json:
        payload = total.as_dict()
        payload["theme"] = args.theme
        if args.vowels:
            payload["vowels"] = {verse: extract_vowels(verse) for verse in split_verses(text)}
        indent = 2 if args.pretty_json else None
        json.dump(payload, sys.stdout, indent=indent, ensure_ascii=False, sort_keys=True)
        sys.stdout.write("\n")
        return 0

    print(service.formatter.format_plain(total))
    if args.vowels:
        print()
        for verse in split_verses(text):
            print(f"  {verse}  ->  {extract_vowels(verse) or '-'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
