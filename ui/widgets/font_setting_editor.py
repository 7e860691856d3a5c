# ui/widgets/font_setting_editor.py

from typing import Iterable

from PySide6.QtCore    import Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLineEdit, QComboBox, QLabel

from core.font_settings import FontInputType, FontSetting
from core.font_value    import format_font_value, parse_font_value


class FontSettingEditor(QWidget):
    """
    Editor for one [Font] entry.  Shows a size field, a family picker or both,
    depending on the setting's input type.
    """
    changed = Signal()

    def __init__(self, setting: FontSetting, families: Iterable[str] = (), parent=None):
        super().__init__(parent)
        self.setting = setting
        self.setToolTip(setting.description)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.size_edit = QLineEdit(self)
        self.size_edit.setPlaceholderText("size")
        self.size_edit.setMaximumWidth(60)
        self.size_edit.textChanged.connect(lambda _: self.changed.emit())

        self.family_combo = QComboBox(self)
        self.family_combo.setEditable(True)
        self.family_combo.setMinimumWidth(220)
        self.family_combo.addItems(list(families))
        self.family_combo.setCurrentText("")
        self.family_combo.currentTextChanged.connect(lambda _: self.changed.emit())

        input_type = setting.input_type
        if input_type.has_size:
            layout.addWidget(QLabel("Size:"))
            layout.addWidget(self.size_edit)
        if input_type.has_family:
            layout.addWidget(QLabel("Family:"))
            layout.addWidget(self.family_combo, 1)
        layout.addStretch()

        self.size_edit.setVisible(input_type.has_size)
        self.family_combo.setVisible(input_type.has_family)

    # ─── Public API ──────────────────────────────────────────────────────────

    def set_value(self, raw: str):
        if self.setting.input_type is FontInputType.FAMILY_ONLY:
            # Family-only entries store the bare family name
            size, family = "", raw
        else:
            size, family = parse_font_value(raw)
        self.size_edit.setText(size.strip())
        self.family_combo.setCurrentText(family.strip())

    def value(self) -> str:
        return format_font_value(
            self.size_edit.text().strip(),
            self.family_combo.currentText(),
            self.setting.key
        )
