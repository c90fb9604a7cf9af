"""Kana tables and vowel-skeleton extraction for Japanese readings."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping


__all__ = [
    "KANA_VOWELS",
    "GLIDE_VOWELS",
    "PROLONGATION_MARK",
    "STOP_MARK",
    "to_katakana",
    "clean_reading",
    "extract_vowels",
    "count_morae",
]


def _expand_rows(rows: str) -> dict[str, str]:
    table: dict[str, str] = {}
    for row in rows.split():
        kana, vowels = row.split(":")
        for char, vowel in zip(kana, vowels):
            table[char] = vowel
    return table


KANA_VOWELS: Mapping[str, str] = MappingProxyType(
    _expand_rows(
        """
        アイウエオ:AIUEO
        カキクケコ:AIUEO ガギグゲゴ:AIUEO
        サシスセソ:AIUEO ザジズゼゾ:AIUEO
        タチツテト:AIUEO ダヂヅデド:AIUEO
        ナニヌネノ:AIUEO
        ハヒフヘホ:AIUEO バビブベボ:AIUEO パピプペポ:AIUEO
        マミムメモ:AIUEO
        ヤユヨ:AUO
        ラリルレロ:AIUEO
        ワヰヱヲ:AIEO
        ン:N
        """
    )
)

# Small ya/yu/yo fuse with the preceding kana into one mora.
GLIDE_VOWELS: Mapping[str, str] = MappingProxyType({"ャ": "A", "ュ": "U", "ョ": "O"})

PROLONGATION_MARK = "ー"
STOP_MARK = "ッ"

_HIRAGANA_PATTERN = re.compile(r"[ぁ-ん]")
_LATIN_DIGIT_PATTERN = re.compile(r"[A-Za-z0-9]")
_PUNCTUATION_PATTERN = re.compile(r"[、。！？「」]")
_KATAKANA_OFFSET = 0x60


def to_katakana(text: str) -> str:
    """Shift hiragana in ``text`` to the matching katakana code points."""

    return _HIRAGANA_PATTERN.sub(
        lambda match: chr(ord(match.group(0)) + _KATAKANA_OFFSET), text or ""
    )


def clean_reading(reading: str) -> str:
    """Normalise ``reading`` to katakana and drop Latin, digits and punctuation."""

    cleaned = to_katakana(reading)
    cleaned = _LATIN_DIGIT_PATTERN.sub("", cleaned)
    return _PUNCTUATION_PATTERN.sub("", cleaned)


def extract_vowels(reading: str) -> str:
    """Return the vowel skeleton of a kana ``reading``.

    Each mora contributes one of ``A I U E O`` or ``N`` for the moraic nasal.
    Small ya/yu/yo overwrite the vowel of the kana they attach to, the long
    vowel mark repeats the last vowel and the small tsu is silent.

    >>> extract_vowels("キャット")
    'AO'
    """

    skeleton: List[str] = []
    last_vowel = ""

    for char in clean_reading(reading):
        vowel = KANA_VOWELS.get(char)
        if vowel:
            skeleton.append(vowel)
            last_vowel = vowel
        elif char in GLIDE_VOWELS:
            if skeleton:
                last_vowel = GLIDE_VOWELS[char]
                skeleton[-1] = last_vowel
        elif char == PROLONGATION_MARK:
            if last_vowel:
                skeleton.append(last_vowel)
        elif char == STOP_MARK:
            continue

    return "".join(skeleton)


def count_morae(text: str) -> int:
    """Count the kana in ``text`` that carry their own vowel or nasal."""

    return sum(1 for char in to_katakana(text) if char in KANA_VOWELS)
