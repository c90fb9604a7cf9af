"""Splitting transcripts into verses."""

from __future__ import annotations

import re
from typing import List


__all__ = ["VERSE_DELIMITER_PATTERN", "split_verses"]


VERSE_DELIMITER_PATTERN = re.compile(r"[、。，！？!?\r\n]")


def split_verses(text: str, min_length: int = 0) -> List[str]:
    """Return trimmed verses of ``text`` longer than ``min_length`` characters."""

    verses: List[str] = []
    for segment in VERSE_DELIMITER_PATTERN.split(text or ""):
        verse = segment.strip()
        if len(verse) > min_length:
            verses.append(verse)
    return verses
