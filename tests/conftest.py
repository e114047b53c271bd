import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from statsvisualizer.model.stats import Stats  # noqa: E402

EXAMPLE_TEXT = (
    "The class average is 77.31% with a standard deviation of 15.17%. "
    "Scores ranged from 24% to 100%."
)


@pytest.fixture(scope="session")
def qt_app():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_TEXT


@pytest.fixture
def example_stats() -> Stats:
    return Stats(mean=77.31, std_dev=15.17, min=24.0, max=100.0)
