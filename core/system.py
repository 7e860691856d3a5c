# core/system.py
# Everything that touches the file system or the OS.  The codec in core.style_config
# stays pure; callers go through these helpers to load, save and locate style.conf.

import logging
import subprocess
import sys
from pathlib import Path
from typing import Iterable, List

from PySide6.QtGui import QFontDatabase

from core.errors import RevealError, StyleReadError, StyleWriteError
from core.style_config import StyleConfig, parse_style_config, serialize_style_config

log = logging.getLogger(__name__)

FONT_REGISTRY_PATH = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion\Fonts"


# ─── Files ───────────────────────────────────────────────────────────────────

def read_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StyleReadError(e) from e


def write_text(path: Path, text: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise StyleWriteError(e) from e


def load_style_config(path: Path) -> StyleConfig:
    config = parse_style_config(read_text(path))
    log.info(f"Loaded {path}: {sum(1 for _ in config.entries())} settings")
    return config


def save_style_config(path: Path, config: StyleConfig) -> None:
    write_text(path, serialize_style_config(config))
    log.info(f"Saved {path}")


# ─── File manager ────────────────────────────────────────────────────────────

def reveal_command(path: Path, platform: str = sys.platform) -> List[str]:
    """Command that opens the platform file manager with `path` selected."""
    if platform == "win32":
        return ["explorer", "/select,", str(path)]
    if platform == "darwin":
        return ["open", "-R", str(path)]
    return ["xdg-open", str(path)]


def reveal_in_file_manager(path: Path) -> None:
    try:
        subprocess.Popen(reveal_command(path))
    except OSError as e:
        raise RevealError(e) from e


# ─── Installed fonts ─────────────────────────────────────────────────────────

def clean_font_name(name: str) -> str:
    """
    Reduce a registry font entry to its family name, e.g.
    "MS Gothic & MS UI Gothic (TrueType)" -> "MS Gothic".
    """
    name = name.split("(")[0].strip()
    return name.split("&")[0].strip()


def clean_font_names(names: Iterable[str]) -> List[str]:
    families = {clean_font_name(n) for n in names}
    families.discard("")
    return sorted(families)


def _registry_font_names() -> List[str]:
    import winreg

    names = []
    with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, FONT_REGISTRY_PATH) as key:
        value_count = winreg.QueryInfoKey(key)[1]
        for i in range(value_count):
            try:
                names.append(winreg.EnumValue(key, i)[0])
            except OSError:
                continue
    return names


def list_installed_font_families() -> List[str]:
    """
    Installed font families, sorted and de-duplicated.  Windows reads the font registry
    the way the target application does; elsewhere (or if the registry is unavailable)
    Qt's font database is used.  Needs a running QGuiApplication for the Qt path.
    """
    if sys.platform == "win32":
        try:
            return clean_font_names(_registry_font_names())
        except OSError as e:
            log.warning(f"Font registry unavailable, falling back to Qt: {e}")
    return clean_font_names(QFontDatabase.families())
