# core/style_config.py
# In-memory model of style.conf and its text round trip.
#
# Only the four known sections are kept.  Anything else in the file (comments, unknown
# sections, stray lines) is dropped on parse, and serialize_style_config() rewrites the
# file from scratch with a fixed banner.  Values are written verbatim: a value holding
# "=", "[", "]" or a newline will not survive a round trip.

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

COMMENT_PREFIX = ";"

# Unicode White_Space.  The \x1c-\x1f separators are not whitespace here.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

BANNER = (
    "; 外観の設定",
    "; UTF-8で記述する",
    "; ProgramData\\aviutl2\\style.confで設定を上書き出来る",
)


class Section(Enum):
    # Value is the header name as written in the file; order is the output order.
    FONT   = "Font"
    COLOR  = "Color"
    LAYOUT = "Layout"
    FORMAT = "Format"

    @property
    def attr(self) -> str:
        return self.name.lower()

    @classmethod
    def from_header(cls, name: str) -> Optional["Section"]:
        """Case-sensitive lookup; unknown headers give None."""
        for section in cls:
            if section.value == name:
                return section
        return None


@dataclass
class StyleConfig:
    font:   Dict[str, str] = field(default_factory=dict)
    color:  Dict[str, str] = field(default_factory=dict)
    layout: Dict[str, str] = field(default_factory=dict)
    format: Dict[str, str] = field(default_factory=dict)

    def section(self, section: Section) -> Dict[str, str]:
        return getattr(self, section.attr)

    def entries(self) -> Iterator[Tuple[Section, str, str]]:
        """Yield every (section, key, value) triple in output order."""
        for section in Section:
            for key, value in self.section(section).items():
                yield section, key, value

    def is_empty(self) -> bool:
        return not any(self.section(s) for s in Section)


def parse_style_config(text: str) -> StyleConfig:
    """
    Build a StyleConfig from style.conf text.

    Best effort: malformed lines are skipped, never reported.  Lines before the first
    header are ignored, a header must be the whole stripped line, keys and values are
    split on the first "=", and later duplicates overwrite earlier ones.
    """
    config = StyleConfig()
    current: Optional[Dict[str, str]] = None

    for raw_line in text.split("\n"):
        line = raw_line.strip(WHITESPACE)

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        if line.startswith("[") and line.endswith("]"):
            section = Section.from_header(line[1:-1])
            # Unknown sections still end the previous one; their entries go nowhere.
            current = config.section(section) if section else None
            continue

        if current is None:
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        current[key.strip(WHITESPACE)] = value.strip(WHITESPACE)

    return config


def serialize_style_config(config: StyleConfig) -> str:
    lines = list(BANNER)
    lines.append("")

    if config.is_empty():
        return "\n".join(lines) + "\n"

    for section in Section:
        values = config.section(section)
        if not values:
            continue
        lines.append(f"[{section.value}]")
        lines.extend(f"{key}={value}" for key, value in values.items())
        lines.append("")

    return "\n".join(lines) + "\n"
