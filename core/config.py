# core/config.py
# Configures core app behaviours via the .env file.  These rarely need changing.  Editor
# preferences (recent files, etc.) live in settings instead.

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

DEFAULT_STYLE_PATH              =       os.getenv("DEFAULT_STYLE_PATH",  r"C:\Program Files\AviUtl2\style.conf")
PROGRAMDATA_FALLBACK            =       r"C:\ProgramData"
SETTINGS_PATH                   =  Path(os.getenv("SETTINGS_PATH",       "~/.styleconf/settings.yaml")).expanduser()
RECENT_FILES_LIMIT              =   int(os.getenv("RECENT_FILES_LIMIT",                    8))
TOAST_DURATION                  =   int(os.getenv("TOAST_DURATION",                     2000))
LOG_LEVEL                       =       os.getenv("LOG_LEVEL",                     "WARNING")


def default_style_path() -> Path:
    """The style.conf shipped next to the application."""
    return Path(DEFAULT_STYLE_PATH)


def user_style_path() -> Path:
    """The per-machine override under %PROGRAMDATA%, which takes precedence when present."""
    program_data = os.getenv("PROGRAMDATA", PROGRAMDATA_FALLBACK)
    return Path(f"{program_data}\\aviutl2\\style.conf")
