# ui/style.py

import re
from typing import Optional

from PySide6.QtGui import QColor, QFont, QFontDatabase

HEX_COLOR = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def get_mono_font(size=10) -> QFont:
    font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
    font.setPointSize(size)
    return font


def parse_color(value: str) -> Optional[QColor]:
    """
    Colour for a swatch preview.  Colour entries may hold several comma-separated
    colours; the first one is shown.  Returns None for anything that isn't RRGGBB hex.
    """
    m = HEX_COLOR.match(value.split(",")[0].strip())
    if not m:
        return None
    return QColor(f"#{m.group(1)}")
