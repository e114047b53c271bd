from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QVBoxLayout

from statsvisualizer.app.state import Store
from statsvisualizer.app.ui.chart import DistributionChart
from statsvisualizer.app.ui.panels.input_panel import InputPanel


class WorkArea(QWidget):
    """The main work area with a splitter between the input panel and the chart."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.input_panel = InputPanel(store, split)
        self.chart = DistributionChart(split)
        store.state_changed.connect(self.chart.set_state)

        split.addWidget(self.input_panel)
        split.addWidget(self.chart)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        split.setSizes([360, 840])
