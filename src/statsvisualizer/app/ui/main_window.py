"""
Main Application Window
=======================
Single screen: input panel on the left, density chart on the right.
"""
from __future__ import annotations

import logging

from PySide6.QtWidgets import QMainWindow, QFileDialog, QMessageBox

from statsvisualizer.app.application import VISIBLE_APP_NAME
from statsvisualizer.app.state import Store
from statsvisualizer.app.ui.workarea import WorkArea

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(self.tr(VISIBLE_APP_NAME))
        self.resize(1200, 700)

        # Global store
        self.store = store if store is not None else Store()

        self.work_area = WorkArea(self.store, self)
        self.setCentralWidget(self.work_area)

        self.work_area.input_panel.export_requested.connect(self.on_export)

    def on_export(self) -> None:
        """Ask for a file name and export the current chart as an image."""
        if not self.work_area.chart.has_data():
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Save chart as image"),
            "distribution.png",
            self.tr("PNG image (*.png);;JPEG image (*.jpg)"),
        )
        if not file_path:
            return

        try:
            self.work_area.chart.export(file_path)
        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, self.tr("Export error"), self.tr("Could not export the chart:\n{error}").format(error=e))
