# core/app.py

import logging
from pathlib    import Path
from typing     import Optional

from PySide6.QtWidgets import QApplication

from core.config    import LOG_LEVEL, RECENT_FILES_LIMIT, SETTINGS_PATH, default_style_path, user_style_path
from core.settings  import load_settings, remember_file, save_settings
from core.system    import list_installed_font_families

from ui.windows.editor_window import StyleEditorWindow

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
log = logging.getLogger(__name__)


class App:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if getattr(self, "_initialized", False):
            return
        self._initialized = True

        self.qt_app = QApplication.instance() or QApplication([])
        self.settings = load_settings(SETTINGS_PATH)
        self.main_window: Optional[StyleEditorWindow] = None

    def start(self):
        families = list_installed_font_families()
        log.info(f"Found {len(families)} installed font families")

        self.main_window = StyleEditorWindow(self, families)
        self.main_window.show()

        initial = self.initial_path()
        if initial is not None:
            self.main_window.open_path(initial)

        self.qt_app.exec()

    def initial_path(self) -> Optional[Path]:
        """Last opened file, else the user override, else the shipped default."""
        last = self.settings.get("last_file")
        candidates = [Path(last)] if last else []
        candidates += [user_style_path(), default_style_path()]
        for path in candidates:
            if path.exists():
                return path
        return None

    def remember_file(self, path: Path):
        remember_file(self.settings, path, RECENT_FILES_LIMIT)
        try:
            save_settings(SETTINGS_PATH, self.settings)
        except OSError as e:
            log.warning(f"Could not save settings to {SETTINGS_PATH}: {e}")

    @classmethod
    def instance(cls):
        return cls()


def begin():
    App.instance().start()


if __name__ == "__main__":
    begin()
