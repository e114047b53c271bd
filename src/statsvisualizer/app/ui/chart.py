"""Area chart of the sampled density curve."""
from __future__ import annotations

import logging

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QWidget, QVBoxLayout

from statsvisualizer.config import CURVE_COLOR, FILL_OPACITY
from statsvisualizer.model.state import Ready

logger = logging.getLogger(__name__)

# Show every n-th score label so the axis stays readable
TICK_EVERY = 7


class DistributionChart(QWidget):
    """
    pyqtgraph plot of a Ready dataset:
      - categorical x axis labelled with the score strings,
      - filled area under the frequency curve,
      - hover tooltip with the nearest point's score and frequency.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget(self)
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=False, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Score (%)', color='black')
        self.plot_widget.setLabel('left', 'Frequency', color='black')
        self.plot_widget.setMouseEnabled(x=False, y=False)
        self.plot_widget.hideButtons()
        for axis in ('bottom', 'left'):
            self.plot_widget.getAxis(axis).setPen('k')
            self.plot_widget.getAxis(axis).setTextPen('k')
        layout.addWidget(self.plot_widget)

        fill = QColor(CURVE_COLOR)
        fill.setAlphaF(FILL_OPACITY)
        self._curve = pg.PlotDataItem(
            pen=pg.mkPen(color=CURVE_COLOR, width=2),
            fillLevel=0.0,
            brush=pg.mkBrush(fill),
        )
        self.plot_widget.addItem(self._curve)

        # Hover tooltip: a guide line plus a text label
        self._hover_line = pg.InfiniteLine(angle=90, pen=pg.mkPen(color='#999999', width=1))
        self._hover_label = pg.TextItem(color='k', fill=pg.mkBrush(255, 255, 255, 220), anchor=(0, 1))
        self._hover_line.setZValue(10)
        self._hover_label.setZValue(11)
        self.plot_widget.addItem(self._hover_line, ignoreBounds=True)
        self.plot_widget.addItem(self._hover_label, ignoreBounds=True)
        self._hide_hover()

        self._ready: Ready | None = None
        self.plot_widget.scene().sigMouseMoved.connect(self._on_mouse_moved)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_state(self, state: object) -> None:
        """Draw the dataset of a Ready state; any other state clears the chart."""
        if isinstance(state, Ready):
            self._show(state)
        else:
            self.clear()

    def clear(self) -> None:
        self._ready = None
        self._curve.setData([], [])
        self.plot_widget.getAxis('bottom').setTicks(None)
        self._hide_hover()

    def has_data(self) -> bool:
        return self._ready is not None

    def export(self, file_path: str) -> None:
        """
        Export the chart to a raster image file (format follows the suffix, e.g. .png, .jpg).
        """
        self._hide_hover()
        exporter = ImageExporter(self.plot_widget.getPlotItem())
        exporter.parameters()['width'] = 1920  # High resolution
        exporter.export(file_path)
        logger.info(f"Chart exported to {file_path}")

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _show(self, ready: Ready) -> None:
        self._ready = ready
        xs = np.arange(len(ready.points), dtype=float)
        ys = np.array(ready.frequencies, dtype=float)
        self._curve.setData(xs, ys)

        scores = ready.scores
        major = [(i, scores[i]) for i in range(0, len(scores), TICK_EVERY)]
        if major[-1][0] != len(scores) - 1:
            major.append((len(scores) - 1, scores[-1]))
        minor = [(i, scores[i]) for i in range(len(scores))]
        self.plot_widget.getAxis('bottom').setTicks([major, [(i, "") for i, _ in minor]])

        self._hide_hover()
        self.plot_widget.autoRange()

    def _hide_hover(self) -> None:
        self._hover_line.setVisible(False)
        self._hover_label.setVisible(False)

    def _on_mouse_moved(self, scene_pos: QPointF) -> None:
        if self._ready is None:
            return
        view_box = self.plot_widget.getPlotItem().getViewBox()
        if not view_box.sceneBoundingRect().contains(scene_pos):
            self._hide_hover()
            return

        view_pos = view_box.mapSceneToView(scene_pos)
        idx = int(round(view_pos.x()))
        idx = min(max(idx, 0), len(self._ready.points) - 1)
        point = self._ready.points[idx]

        self._hover_line.setPos(idx)
        self._hover_label.setText(f"{point.score}\nfrequency : {point.frequency:g}")
        self._hover_label.setPos(idx, point.frequency)
        self._hover_line.setVisible(True)
        self._hover_label.setVisible(True)
