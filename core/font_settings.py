# core/font_settings.py
# Built-in catalog of the [Font] keys the editor knows how to present.  Labels and
# descriptions are the UI strings shown next to each setting.

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class FontInputType(Enum):
    FAMILY_ONLY = "familyOnly"
    SIZE_ONLY   = "sizeOnly"
    BOTH        = "both"

    @property
    def has_size(self) -> bool:
        return self is not FontInputType.FAMILY_ONLY

    @property
    def has_family(self) -> bool:
        return self is not FontInputType.SIZE_ONLY


@dataclass(frozen=True)
class FontSetting:
    key: str
    label: str
    description: str
    input_type: FontInputType


FONT_SETTINGS: Tuple[FontSetting, ...] = (
    FontSetting("DefaultFamily", "標準フォント",              "標準のフォント名",                          FontInputType.FAMILY_ONLY),
    FontSetting("Control",       "コントロールフォント",      "標準のコントロールのフォントサイズ",        FontInputType.SIZE_ONLY),
    FontSetting("EditControl",   "エディットコントロール",    "エディットコントロールのフォント（等幅推奨）", FontInputType.BOTH),
    FontSetting("PreviewTime",   "プレビュー時間表示",        "プレビュー時間表示のフォントサイズ",        FontInputType.SIZE_ONLY),
    FontSetting("LayerObject",   "レイヤー・オブジェクト編集", "レイヤー・オブジェクト編集部分のフォントサイズ", FontInputType.SIZE_ONLY),
    FontSetting("TimeGauge",     "フレーム時間ゲージ",        "フレーム時間ゲージのフォントサイズ",        FontInputType.SIZE_ONLY),
    FontSetting("Footer",        "フッター",                  "フッターのフォントサイズ",                  FontInputType.SIZE_ONLY),
    FontSetting("TextEdit",      "テキスト編集",              "テキスト編集のフォント（等幅推奨）",        FontInputType.BOTH),
    FontSetting("Log",           "ログ",                      "ログのフォント（等幅推奨）",                FontInputType.BOTH),
)

_BY_KEY = {setting.key: setting for setting in FONT_SETTINGS}


def find_font_setting(key: str) -> Optional[FontSetting]:
    return _BY_KEY.get(key)


def is_known_font_key(key: str) -> bool:
    return key in _BY_KEY
