"""
Run with: python -m statsvisualizer
"""
from __future__ import annotations

import sys

import pyqtgraph as pg

from statsvisualizer.config import LOG_LEVEL
from statsvisualizer.logging_config import setup_logging
from statsvisualizer.app.application import create_app
from statsvisualizer.app.ui.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=LOG_LEVEL)
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
