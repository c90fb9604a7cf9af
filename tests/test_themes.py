import pytest

from freestyle_judge.core.themes import THEME_KEYWORDS, THEME_LABELS, Theme


def test_every_theme_has_fifteen_keywords():
    for theme in Theme:
        assert len(theme.keywords) == 15
        assert len(set(theme.keywords)) == 15
        assert theme.label == THEME_LABELS[theme]


def test_theme_accepts_its_string_value():
    assert Theme("iwashi") is Theme.IWASHI
    with pytest.raises(ValueError):
        Theme("unagi")


def test_keyword_table_is_read_only():
    with pytest.raises(TypeError):
        THEME_KEYWORDS[Theme.MAGURO] = ("大トロ",)  # type: ignore[index]
    with pytest.raises(TypeError):
        del THEME_KEYWORDS[Theme.TAI]  # type: ignore[attr-defined]

    keywords = THEME_KEYWORDS[Theme.SAME]
    assert isinstance(keywords, tuple)
    with pytest.raises(TypeError):
        keywords[0] = "サメ"  # type: ignore[index]
