"""
Statistics Data Model
=====================
Plain value types passed between the extractor, the sampler and the UI.

Classes:
    Stats: The four descriptive statistics read from the input text.
    DataPoint: One plotted (score, frequency) pair of the density curve.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from statsvisualizer.errors import ComputationError


@dataclass(frozen=True)
class Stats:
    """
    Descriptive statistics of a score distribution, in percent.

    Values are conceptually within [0, 100]; this is not enforced.
    """
    mean: float
    std_dev: float
    min: float
    max: float

    def validate(self) -> None:
        """
        Check that the statistics describe a drawable density curve.

        Raises:
            ComputationError: If any value is not finite, std_dev <= 0 or max < min.
        """
        values = (self.mean, self.std_dev, self.min, self.max)
        if not all(math.isfinite(v) for v in values):
            raise ComputationError(f"Statistics must be finite numbers, got {self}.")
        if self.std_dev <= 0:
            raise ComputationError(
                f"Standard deviation must be greater than zero, got {self.std_dev:g}%."
            )
        if self.max < self.min:
            raise ComputationError(
                f"Score range is inverted: minimum {self.min:g}% is above maximum {self.max:g}%."
            )


@dataclass(frozen=True)
class DataPoint:
    score: str  # x formatted to one decimal place
    frequency: float
