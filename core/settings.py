# core/settings.py
# Settings are editor customisation options (last opened file, recent files).  Essential
# app variables like default file locations should be set via configs and the .env file.

from pathlib import Path

import yaml


def load_settings(settings_file: Path) -> dict:
    if not settings_file.exists():
        return {}
    with open(settings_file, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_settings(settings_file: Path, settings: dict) -> None:
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(settings, f, allow_unicode=True)


def remember_file(settings: dict, path: Path, limit: int) -> dict:
    """Move `path` to the front of recent_files and mark it as the last opened file."""
    entry = str(path)
    recent = [p for p in settings.get("recent_files", []) if p != entry]
    recent.insert(0, entry)
    settings["recent_files"] = recent[:limit]
    settings["last_file"] = entry
    return settings
