from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from statsvisualizer.controller.visualize import visualize
from statsvisualizer.model.state import Idle, VisualizerState

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store; the chart and the error label listen to state_changed."""
    state_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._state: VisualizerState = Idle()

    @property
    def state(self) -> VisualizerState:
        return self._state

    def _set_state(self, state: VisualizerState) -> None:
        # Single assignment: listeners never see an error next to an old dataset
        self._state = state
        self.state_changed.emit(self._state)

    def visualize(self, text: str, sample_size_text: Optional[str]) -> VisualizerState:
        """Run the visualize action and publish the resulting state."""
        self._set_state(visualize(text, sample_size_text))
        return self._state

    def reset(self) -> None:
        if isinstance(self._state, Idle):
            return
        logger.debug("Store reset to idle.")
        self._set_state(Idle())
