# ui/widgets/section_table.py

from typing import Dict

from PySide6.QtCore    import Qt, Signal
from PySide6.QtGui     import QBrush
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QTableWidget,
    QTableWidgetItem, QHeaderView, QAbstractItemView
)

from ui.style import get_mono_font, parse_color


class SectionTable(QWidget):
    """
    Key/value editor for one style.conf section.  Values are edited as raw strings;
    with show_swatches=True a third column previews colour values.
    """

    KEY_COL, VALUE_COL, SWATCH_COL = 0, 1, 2
    changed = Signal()

    def __init__(self, parent=None, show_swatches: bool = False):
        super().__init__(parent)
        self.show_swatches = show_swatches

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        headers = ["Key", "Value"] + ([""] if show_swatches else [])
        self.table = QTableWidget(0, len(headers), self)
        self.table.setHorizontalHeaderLabels(headers)
        self.table.horizontalHeader().setSectionResizeMode(
            self.VALUE_COL, QHeaderView.Stretch
        )
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setFont(get_mono_font())
        self.table.verticalHeader().setVisible(False)
        if show_swatches:
            self.table.setColumnWidth(self.SWATCH_COL, 32)
        self.table.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self.table)

        # Add / Remove buttons
        mod_layout = QHBoxLayout()
        self.add_btn = QPushButton("Add Row")
        self.del_btn = QPushButton("Remove Row")
        self.add_btn.clicked.connect(lambda: self.add_row())
        self.del_btn.clicked.connect(self.remove_selected_rows)
        mod_layout.addWidget(self.add_btn)
        mod_layout.addWidget(self.del_btn)
        mod_layout.addStretch()
        layout.addLayout(mod_layout)

    # ─── Public API ──────────────────────────────────────────────────────────

    def set_entries(self, entries: Dict[str, str]):
        self.table.setRowCount(0)
        for key, value in entries.items():
            self.add_row(key, value)

    def entries(self) -> Dict[str, str]:
        """Rows as a mapping.  Blank keys are skipped; a repeated key keeps the later row."""
        result: Dict[str, str] = {}
        for row in range(self.table.rowCount()):
            key = self._text(row, self.KEY_COL).strip()
            if not key:
                continue
            result[key] = self._text(row, self.VALUE_COL).strip()
        return result

    def add_row(self, key: str = "", value: str = ""):
        # Block itemChanged while the row is half-built
        self.table.blockSignals(True)
        row = self.table.rowCount()
        self.table.insertRow(row)
        self.table.setItem(row, self.KEY_COL, QTableWidgetItem(key))
        self.table.setItem(row, self.VALUE_COL, QTableWidgetItem(value))
        if self.show_swatches:
            swatch = QTableWidgetItem()
            swatch.setFlags(Qt.ItemIsEnabled)
            self.table.setItem(row, self.SWATCH_COL, swatch)
            self._update_swatch(row)
        self.table.blockSignals(False)
        self.changed.emit()

    def remove_key(self, key: str):
        for row in reversed(range(self.table.rowCount())):
            if self._text(row, self.KEY_COL).strip() == key:
                self.table.removeRow(row)

    def remove_selected_rows(self):
        rows = sorted(
            {idx.row() for idx in self.table.selectedIndexes()},
            reverse=True
        )
        for r in rows:
            self.table.removeRow(r)
        if rows:
            self.changed.emit()

    # ─── Internal Helpers ──────────────────────────────────────────────────

    def _text(self, row: int, col: int) -> str:
        item = self.table.item(row, col)
        return item.text() if item else ""

    def _on_item_changed(self, item: QTableWidgetItem):
        if self.show_swatches and item.column() == self.VALUE_COL:
            self._update_swatch(item.row())
        self.changed.emit()

    def _update_swatch(self, row: int):
        swatch = self.table.item(row, self.SWATCH_COL)
        if swatch is None:
            return
        color = parse_color(self._text(row, self.VALUE_COL))
        swatch.setBackground(QBrush(color) if color else QBrush())
