from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPlainTextEdit, QLineEdit, QPushButton, QLabel
)

from statsvisualizer.app.ui.panels.base import BasePanel
from statsvisualizer.config import DEFAULT_TEXT, DEFAULT_SAMPLE_SIZE
from statsvisualizer.model.state import Idle, Failed, Ready

if TYPE_CHECKING:
    from statsvisualizer.app.state import Store


class InputPanel(BasePanel):
    """
    Panel with the statistics text, the sample size field and the Visualize button.
    Shows the error message of a failed action below the inputs.
    """
    export_requested = Signal()

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setPlaceholderText(self.tr("Enter statistical text..."))
        self.text_edit.setPlainText(DEFAULT_TEXT)
        self.text_edit.setMinimumHeight(100)
        root.addWidget(self.text_edit)

        row = QHBoxLayout()
        self.sample_size_edit = QLineEdit(self)
        self.sample_size_edit.setPlaceholderText(self.tr("Sample size"))
        self.sample_size_edit.setText(DEFAULT_SAMPLE_SIZE)
        self.sample_size_edit.setMaximumWidth(130)
        # Enter in the sample size field behaves like the button
        self.sample_size_edit.returnPressed.connect(self._on_visualize_clicked)
        row.addWidget(self.sample_size_edit)

        self.btn_visualize = QPushButton(self.tr("Visualize"), self)
        self.btn_visualize.setMinimumHeight(32)
        self.btn_visualize.clicked.connect(self._on_visualize_clicked)
        row.addWidget(self.btn_visualize)

        self.btn_clear = QPushButton(self.tr("Clear"), self)
        self.btn_clear.setMinimumHeight(32)
        self.btn_clear.setEnabled(False)
        self.btn_clear.clicked.connect(self._on_clear_clicked)
        row.addWidget(self.btn_clear)
        row.addStretch(1)
        root.addLayout(row)

        self.lbl_error = QLabel("", self)
        self.lbl_error.setWordWrap(True)
        self.lbl_error.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.lbl_error.setStyleSheet(
            "color: #b91c1c; background: #fef2f2; border: 1px solid #fca5a5;"
            "border-radius: 4px; padding: 6px;"
        )
        self.lbl_error.setVisible(False)
        root.addWidget(self.lbl_error)

        self.btn_export = QPushButton(self.tr("Export image..."), self)
        self.btn_export.setEnabled(False)
        self.btn_export.clicked.connect(self._on_export_clicked)
        root.addWidget(self.btn_export)

        root.addStretch(1)

    # --- SLOTS ---

    def _on_visualize_clicked(self) -> None:
        self.store.visualize(self.text_edit.toPlainText(), self.sample_size_edit.text())

    def _on_clear_clicked(self) -> None:
        self.store.reset()

    def _on_export_clicked(self) -> None:
        self.export_requested.emit()

    def on_state_changed(self, state: object) -> None:
        if isinstance(state, Failed):
            self.lbl_error.setText(state.message)
            self.lbl_error.setVisible(True)
        else:
            self.lbl_error.clear()
            self.lbl_error.setVisible(False)
        self.btn_export.setEnabled(isinstance(state, Ready))
        self.btn_clear.setEnabled(not isinstance(state, Idle))
