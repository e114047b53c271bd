"""
Visualizer State (Data Model)
=============================
This module defines the single transient value the window renders from.

Why is this file needed?
------------------------
The screen either shows nothing yet, an error, or a curve. Modelling these as
separate variants of one value means an error and a stale dataset can never be
shown together: replacing the value replaces both.

Classes:
    Idle: Nothing computed yet.
    Failed: The last action failed; holds the message for the user.
    Ready: The last action succeeded; holds the plotted dataset.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from statsvisualizer.model.stats import DataPoint


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Ready:
    points: tuple[DataPoint, ...]

    @property
    def scores(self) -> list[str]:
        return [p.score for p in self.points]

    @property
    def frequencies(self) -> list[float]:
        return [p.frequency for p in self.points]


VisualizerState = Union[Idle, Failed, Ready]
