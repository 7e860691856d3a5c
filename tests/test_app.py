import pytest

from core import app as app_module
from core.settings import load_settings


@pytest.fixture
def app(qapp, tmp_path, monkeypatch):
    monkeypatch.setattr(app_module, "SETTINGS_PATH", tmp_path / "settings.yaml")
    monkeypatch.setattr(app_module.App, "_instance", None)
    return app_module.App.instance()


def test_initial_path_prefers_last_file(app, tmp_path, monkeypatch):
    last = tmp_path / "last.conf"
    last.write_text("", encoding="utf-8")
    user = tmp_path / "user.conf"
    user.write_text("", encoding="utf-8")
    monkeypatch.setattr(app_module, "user_style_path", lambda: user)

    app.settings = {"last_file": str(last)}
    assert app.initial_path() == last

    last.unlink()
    assert app.initial_path() == user


def test_initial_path_none_when_nothing_exists(app, tmp_path, monkeypatch):
    monkeypatch.setattr(app_module, "user_style_path", lambda: tmp_path / "a.conf")
    monkeypatch.setattr(app_module, "default_style_path", lambda: tmp_path / "b.conf")
    app.settings = {}
    assert app.initial_path() is None


def test_remember_file_persists(app, tmp_path):
    app.remember_file(tmp_path / "style.conf")
    saved = load_settings(tmp_path / "settings.yaml")
    assert saved["last_file"] == str(tmp_path / "style.conf")
    assert saved["recent_files"] == [str(tmp_path / "style.conf")]
