# core/font_value.py
# The "<size>[,<family>]" encoding used for values in the [Font] section.
#
# parse_font_value() and format_font_value() are deliberately not inverses: parsing
# always yields both fields, while formatting keeps only the parts the setting's
# input type allows.

from typing import NamedTuple

from core.font_settings import FontInputType, find_font_setting
from core.style_config  import WHITESPACE

SEPARATOR = ","


class FontValue(NamedTuple):
    size: str
    family: str


def parse_font_value(raw: str) -> FontValue:
    parts = raw.split(SEPARATOR)
    size = parts[0] if len(parts) > 0 else ""
    family = parts[1] if len(parts) > 1 else ""
    return FontValue(size, family)


def clean_family(family: str) -> str:
    """Guard against a whole "size,family" string being passed in as the family."""
    return family.split(SEPARATOR)[0].strip(WHITESPACE)


def format_font_value(size: str, family: str, key: str) -> str:
    """
    Combine size and family into the raw value stored under `key`.
    Unknown keys keep only the size.
    """
    setting = find_font_setting(key)
    if setting is None:
        return size

    family = clean_family(family)

    match setting.input_type:
        case FontInputType.FAMILY_ONLY:
            return family
        case FontInputType.SIZE_ONLY:
            return size
        case FontInputType.BOTH:
            return f"{size}{SEPARATOR}{family}" if family else size

    return size
