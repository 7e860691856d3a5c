# ui/windows/editor_window.py

import logging
from pathlib import Path
from typing  import Dict, List, Optional

from PySide6.QtGui     import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QTabWidget,
    QLabel, QLineEdit, QScrollArea, QFileDialog, QMessageBox, QStatusBar
)

from core.config        import default_style_path, user_style_path
from core.errors        import StyleEditorError
from core.font_settings import FONT_SETTINGS, is_known_font_key
from core.style_config  import Section, StyleConfig
from core.system        import load_style_config, reveal_in_file_manager, save_style_config
from ui.widgets.font_setting_editor import FontSettingEditor
from ui.widgets.section_table       import SectionTable
from ui.widgets.toast               import Toast

log = logging.getLogger(__name__)

FILE_FILTER  = "Style (*.conf);;All files (*)"
WINDOW_TITLE = "Style Editor"


class StyleEditorWindow(QMainWindow):
    def __init__(self, app=None, families: Optional[List[str]] = None):
        super().__init__()
        self.app = app
        self.current_path: Optional[Path] = None
        self._loaded_font: Dict[str, str] = {}
        self.modified = False

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(720, 560)

        self._create_menu()
        self._create_status_bar()

        central = QWidget()
        layout  = QVBoxLayout(central)
        self.setCentralWidget(central)

        # Path of the file being edited
        path_row = QHBoxLayout()
        path_row.addWidget(QLabel("File:"))
        self.path_edit = QLineEdit()
        self.path_edit.setReadOnly(True)
        path_row.addWidget(self.path_edit, 1)
        layout.addLayout(path_row)

        self.tabs = QTabWidget()
        layout.addWidget(self.tabs)

        self._init_font_tab(families or [])
        self.section_tables: Dict[Section, SectionTable] = {}
        for section in (Section.COLOR, Section.LAYOUT, Section.FORMAT):
            table = SectionTable(show_swatches=section is Section.COLOR)
            self.section_tables[section] = table
            self.tabs.addTab(table, section.value)

        for widget in (*self.font_editors.values(), self.extra_font_table, *self.section_tables.values()):
            widget.changed.connect(self._mark_modified)

    # ─── Setup ───────────────────────────────────────────────────────────────

    def _create_menu(self):
        file_menu = self.menuBar().addMenu("&File")

        def add(text, slot, shortcut=None):
            action = QAction(text, self)
            if shortcut:
                action.setShortcut(shortcut)
            action.triggered.connect(slot)
            file_menu.addAction(action)
            return action

        add("&Open…",               self._on_open,         QKeySequence.Open)
        add("Open &Default",        self._on_open_default)
        add("Open &User Override",  self._on_open_user)
        file_menu.addSeparator()
        self.save_action    = add("&Save",     self._on_save,    QKeySequence.Save)
        self.save_as_action = add("Save &As…", self._on_save_as, QKeySequence.SaveAs)
        self.reveal_action  = add("&Reveal in File Manager", self._on_reveal)
        file_menu.addSeparator()
        add("E&xit", self.close)

        self.reveal_action.setEnabled(False)

    def _create_status_bar(self):
        status = QStatusBar()
        self.setStatusBar(status)
        status.showMessage("Ready")

    def _init_font_tab(self, families: List[str]):
        tab    = QWidget()
        layout = QVBoxLayout(tab)

        form = QFormLayout()
        self.font_editors: Dict[str, FontSettingEditor] = {}
        for setting in FONT_SETTINGS:
            editor = FontSettingEditor(setting, families)
            label  = QLabel(setting.label)
            label.setToolTip(setting.description)
            form.addRow(label, editor)
            self.font_editors[setting.key] = editor

        inner = QWidget()
        inner.setLayout(form)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(inner)
        layout.addWidget(scroll, 3)

        # Font keys without a dedicated editor are kept as raw rows
        layout.addWidget(QLabel("Other font settings:"))
        self.extra_font_table = SectionTable()
        layout.addWidget(self.extra_font_table, 1)

        self.tabs.addTab(tab, Section.FONT.value)

    # ─── Document <-> widgets ────────────────────────────────────────────────

    def set_config(self, config: StyleConfig):
        self._loaded_font = dict(config.font)

        for key, editor in self.font_editors.items():
            editor.set_value(config.font.get(key, ""))
        self.extra_font_table.set_entries(
            {k: v for k, v in config.font.items() if not is_known_font_key(k)}
        )

        for section, table in self.section_tables.items():
            table.set_entries(config.section(section))

        self._set_modified(False)

    def config(self) -> StyleConfig:
        """
        Collect the widgets back into a StyleConfig.  Known font keys keep their
        position from the loaded file; a known key that was absent is added only once
        it has a value.
        """
        self._absorb_known_font_rows()
        config = StyleConfig()

        for key in self._loaded_font:
            if is_known_font_key(key):
                config.font[key] = self.font_editors[key].value()
        for key, editor in self.font_editors.items():
            if key not in config.font and editor.value():
                config.font[key] = editor.value()
        config.font.update(self.extra_font_table.entries())

        for section, table in self.section_tables.items():
            config.section(section).update(table.entries())

        return config

    def _absorb_known_font_rows(self):
        """Move catalog keys typed into the raw font table into their dedicated editors."""
        for key, value in self.extra_font_table.entries().items():
            if is_known_font_key(key):
                self.font_editors[key].set_value(value)
                self.extra_font_table.remove_key(key)

    # ─── Modified state ──────────────────────────────────────────────────────

    def _mark_modified(self):
        self._set_modified(True)

    def _set_modified(self, modified: bool):
        self.modified = modified
        self._update_title()

    def _update_title(self):
        title = WINDOW_TITLE
        if self.current_path is not None:
            title = f"{title} - {self.current_path.name}"
        self.setWindowTitle(f"*{title}" if self.modified else title)

    def _confirm_discard(self) -> bool:
        """Ask what to do with unsaved edits.  False means stay open."""
        answer = QMessageBox.question(
            self, "Unsaved Changes",
            "The style has unsaved changes.\nSave them before closing?",
            QMessageBox.Save | QMessageBox.Discard | QMessageBox.Cancel
        )
        if answer == QMessageBox.Save:
            return self._on_save()
        return answer == QMessageBox.Discard

    def closeEvent(self, e):
        if self.modified and not self._confirm_discard():
            e.ignore()
            return
        super().closeEvent(e)

    # ─── File handling ───────────────────────────────────────────────────────

    def open_path(self, path: Path) -> bool:
        try:
            config = load_style_config(path)
        except StyleEditorError as e:
            log.error(str(e))
            QMessageBox.critical(self, "Error", str(e))
            return False

        self.set_config(config)
        self._set_current_path(path)
        self.statusBar().showMessage(f"Loaded {path}")
        return True

    def save_to(self, path: Path) -> bool:
        try:
            save_style_config(path, self.config())
        except StyleEditorError as e:
            log.error(str(e))
            QMessageBox.critical(self, "Error", str(e))
            return False

        self._set_current_path(path)
        self._set_modified(False)
        self.statusBar().showMessage(f"Saved {path}")
        Toast("保存しました", parent=self).show()
        return True

    def _set_current_path(self, path: Path):
        self.current_path = Path(path)
        self.path_edit.setText(str(path))
        self._update_title()
        self.reveal_action.setEnabled(True)
        if self.app is not None:
            self.app.remember_file(self.current_path)

    def _start_dir(self) -> str:
        if self.current_path is not None:
            return str(self.current_path.parent)
        return ""

    # ─── Actions ─────────────────────────────────────────────────────────────

    def _on_open(self):
        filename, _ = QFileDialog.getOpenFileName(self, "Open style.conf", self._start_dir(), FILE_FILTER)
        if filename:
            self.open_path(Path(filename))

    def _on_open_default(self):
        self.open_path(default_style_path())

    def _on_open_user(self):
        self.open_path(user_style_path())

    def _on_save(self) -> bool:
        if self.current_path is None:
            return self._on_save_as()
        return self.save_to(self.current_path)

    def _on_save_as(self) -> bool:
        filename, _ = QFileDialog.getSaveFileName(self, "Save style.conf", self._start_dir(), FILE_FILTER)
        if not filename:
            return False
        return self.save_to(Path(filename))

    def _on_reveal(self):
        if self.current_path is None:
            return
        try:
            reveal_in_file_manager(self.current_path)
        except StyleEditorError as e:
            log.error(str(e))
            QMessageBox.warning(self, "Error", str(e))
