from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

ORG_ID = "statsvisualizer"
APP_ID = "stats-text-visualizer"

VISIBLE_APP_NAME = "Statistical Text Visualizer"

logger = logging.getLogger(__name__)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)
    else:
        logger.debug("Reusing existing QApplication instance.")

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
