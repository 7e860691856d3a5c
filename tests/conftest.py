import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def sample_text():
    return (
        "; 外観の設定\n"
        "[Font]\n"
        "DefaultFamily=Yu Gothic UI\n"
        "Control=13\n"
        "TextEdit=16,MS Gothic\n"
        "\n"
        "[Color]\n"
        "Background=202020\n"
        "Text=ffffff\n"
        "\n"
        "[Layout]\n"
        "WindowMargin=4\n"
        "\n"
        "[Format]\n"
        "FrameTime=%d:%02d:%02d.%02d\n"
    )
