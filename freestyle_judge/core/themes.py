"""Battle themes and their keyword lists."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


__all__ = ["Theme", "THEME_KEYWORDS", "THEME_LABELS"]


class Theme(str, Enum):
    """Closed set of themes a verse can be judged against."""

    MAGURO = "maguro"
    TAI = "tai"
    IWASHI = "iwashi"
    SAME = "same"

    @property
    def keywords(self) -> Tuple[str, ...]:
        return THEME_KEYWORDS[self]

    @property
    def label(self) -> str:
        return THEME_LABELS[self]


THEME_KEYWORDS: Mapping[Theme, Tuple[str, ...]] = MappingProxyType(
    {
        Theme.MAGURO: (
            "赤身", "トロ", "オーシャン", "スピード", "ツナ缶",
            "寿司", "回遊魚", "一本釣り", "黒いダイヤ", "海の幸",
            "DHA", "エリート", "シーチキン", "大間", "初競り",
        ),
        Theme.TAI: (
            "めでたい", "王様", "白身", "鯛めし", "お祝い",
            "桜鯛", "エビで釣る", "塩焼き", "瀬戸内", "上品",
            "七福神", "横綱", "赤い", "お頭付き", "祝い酒",
        ),
        Theme.IWASHI: (
            "群れ", "DHA", "オイルサーディン", "大群", "弱肉強食",
            "イワシ雲", "目刺し", "雑魚じゃない", "青魚", "缶詰",
            "サーディン", "大漁", "網", "プランクトン", "鰯",
        ),
        Theme.SAME: (
            "ジョーズ", "軟骨", "ハンター", "歯", "フカヒレ",
            "鮫肌", "トップ", "海中", "恐ろしい", "頂点",
            "シャーク", "捕食者", "古代魚", "獰猛", "海底",
        ),
    }
)

THEME_LABELS: Mapping[Theme, str] = MappingProxyType(
    {
        Theme.MAGURO: "マグロ (tuna)",
        Theme.TAI: "タイ (sea bream)",
        Theme.IWASHI: "イワシ (sardine)",
        Theme.SAME: "サメ (shark)",
    }
)
