from pathlib import Path

from core import config
from core.settings import load_settings, remember_file, save_settings


def test_missing_settings_file_is_empty(tmp_path):
    assert load_settings(tmp_path / "settings.yaml") == {}


def test_save_creates_parent_and_round_trips(tmp_path):
    path = tmp_path / "nested" / "settings.yaml"
    save_settings(path, {"last_file": "C:\\ProgramData\\aviutl2\\style.conf", "recent_files": ["a"]})
    assert load_settings(path) == {
        "last_file": "C:\\ProgramData\\aviutl2\\style.conf",
        "recent_files": ["a"],
    }


def test_remember_file_moves_to_front_and_truncates():
    settings = {"recent_files": ["a", "b", "c"]}
    remember_file(settings, Path("b"), limit=2)
    assert settings["recent_files"] == [str(Path("b")), "a"]
    assert settings["last_file"] == str(Path("b"))


def test_user_style_path_uses_programdata(monkeypatch):
    monkeypatch.setenv("PROGRAMDATA", "D:\\Data")
    assert str(config.user_style_path()) == "D:\\Data\\aviutl2\\style.conf"


def test_user_style_path_fallback(monkeypatch):
    monkeypatch.delenv("PROGRAMDATA", raising=False)
    assert str(config.user_style_path()) == "C:\\ProgramData\\aviutl2\\style.conf"


def test_default_style_path():
    assert config.default_style_path() == Path(config.DEFAULT_STYLE_PATH)
