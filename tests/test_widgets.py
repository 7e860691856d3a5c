import pytest
from PySide6.QtGui import QCloseEvent

from core.font_settings import find_font_setting
from core.style_config import Section, StyleConfig, parse_style_config
from ui.style import parse_color
from ui.widgets.font_setting_editor import FontSettingEditor
from ui.widgets.section_table import SectionTable
from ui.windows import editor_window
from ui.windows.editor_window import StyleEditorWindow


def test_font_editor_both(qapp):
    editor = FontSettingEditor(find_font_setting("TextEdit"), ["MS Gothic", "Meiryo"])
    editor.set_value("16,MS Gothic")
    assert editor.size_edit.text() == "16"
    assert editor.family_combo.currentText() == "MS Gothic"

    editor.family_combo.setCurrentText("")
    assert editor.value() == "16"


def test_font_editor_family_only_keeps_bare_family(qapp):
    editor = FontSettingEditor(find_font_setting("DefaultFamily"))
    editor.set_value("Yu Gothic UI")
    assert editor.value() == "Yu Gothic UI"


def test_font_editor_size_only(qapp):
    editor = FontSettingEditor(find_font_setting("Control"))
    editor.set_value("13")
    editor.family_combo.setCurrentText("Arial")
    assert editor.value() == "13"


def test_section_table_entries(qapp):
    table = SectionTable()
    table.set_entries({"A": "1", "B": "2"})
    table.add_row("  ", "ignored")
    table.add_row("A", "3")
    assert table.entries() == {"A": "3", "B": "2"}


def test_color_swatch(qapp):
    table = SectionTable(show_swatches=True)
    table.set_entries({"Background": "202020,303030", "Other": "n/a"})
    swatch = table.table.item(0, SectionTable.SWATCH_COL)
    assert swatch.background().color().name() == "#202020"
    assert parse_color("n/a") is None
    assert parse_color("#A0B0C0").name() == "#a0b0c0"


def test_window_round_trip(qapp, sample_text):
    window = StyleEditorWindow()
    config = parse_style_config(sample_text + "[Font]\nCustom=9\n")
    window.set_config(config)
    assert window.config() == config


def test_window_adds_known_key_once_it_has_value(qapp):
    window = StyleEditorWindow()
    window.set_config(StyleConfig(font={"Control": "13"}))
    window.font_editors["Log"].size_edit.setText("12")
    window.font_editors["Log"].family_combo.setCurrentText("Consolas")
    assert window.config().font == {"Control": "13", "Log": "12,Consolas"}


def test_window_moves_catalog_key_from_raw_table_into_editor(qapp):
    window = StyleEditorWindow()
    window.set_config(parse_style_config("[Font]\nCustom=9\n"))
    window.extra_font_table.add_row("Control", "20")

    font = window.config().font
    assert font == {"Custom": "9", "Control": "20"}
    assert window.font_editors["Control"].value() == "20"
    assert window.extra_font_table.entries() == {"Custom": "9"}


def test_window_tracks_unsaved_changes(qapp, tmp_path, sample_text):
    window = StyleEditorWindow()
    window.set_config(parse_style_config(sample_text))
    assert not window.modified

    window.font_editors["Control"].size_edit.setText("14")
    assert window.modified
    assert window.windowTitle().startswith("*")

    assert window.save_to(tmp_path / "style.conf")
    assert not window.modified
    assert window.windowTitle() == "Style Editor - style.conf"
    assert "Control=14" in (tmp_path / "style.conf").read_text(encoding="utf-8")

    window.section_tables[Section.LAYOUT].add_row("Gap", "2")
    assert window.modified


class FakeMessageBox:
    Save, Discard, Cancel = 1, 2, 4
    answer = Cancel

    @classmethod
    def question(cls, *args):
        return cls.answer


@pytest.mark.parametrize("answer, accepted", [
    (FakeMessageBox.Cancel, False),
    (FakeMessageBox.Discard, True),
])
def test_close_with_unsaved_changes_asks_first(qapp, monkeypatch, answer, accepted):
    monkeypatch.setattr(editor_window, "QMessageBox", FakeMessageBox)
    monkeypatch.setattr(FakeMessageBox, "answer", answer)

    window = StyleEditorWindow()
    window.font_editors["Log"].size_edit.setText("12")

    event = QCloseEvent()
    window.closeEvent(event)
    assert event.isAccepted() is accepted


def test_close_without_changes_does_not_ask(qapp, monkeypatch):
    monkeypatch.setattr(editor_window, "QMessageBox", None)
    window = StyleEditorWindow()

    event = QCloseEvent()
    window.closeEvent(event)
    assert event.isAccepted()
