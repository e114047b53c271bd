"""
Distribution Sampling
=====================
Evaluates the normal probability density over the score range and scales it
by the sample size, giving an approximate expected count per score.

Functions:
    parse_sample_size: Strict text -> positive int conversion.
    sample_distribution: Stats + sample size -> ordered tuple of DataPoints.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, TYPE_CHECKING

import numpy as np
from scipy.stats import norm

from statsvisualizer.config import NUM_POINTS, SCORE_DECIMALS, FREQUENCY_DECIMALS
from statsvisualizer.errors import ValidationError, ComputationError
from statsvisualizer.model.stats import Stats, DataPoint

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

INVALID_SAMPLE_SIZE_MESSAGE = "Please enter a valid sample size"

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_sample_size(text: Optional[str]) -> int:
    """
    Parse the sample size typed by the user.

    The whole (stripped) text must be an integer greater than zero. Inputs like
    "2.5" or "200abc" are rejected instead of being truncated.

    Raises:
        ValidationError: If the text is empty, not an integer or not positive.
    """
    if text is None:
        raise ValidationError(INVALID_SAMPLE_SIZE_MESSAGE)

    stripped = str(text).strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise ValidationError(INVALID_SAMPLE_SIZE_MESSAGE)

    try:
        value = int(stripped)
    except (ValueError, OverflowError):
        # More digits than int() accepts
        raise ValidationError(INVALID_SAMPLE_SIZE_MESSAGE) from None
    if value <= 0:
        raise ValidationError(INVALID_SAMPLE_SIZE_MESSAGE)
    return value


def _check_sample_size(sample_size: int) -> None:
    # bool is an int subclass, but True is not a sample size
    if isinstance(sample_size, bool) or not isinstance(sample_size, (int, np.integer)):
        raise ValidationError(INVALID_SAMPLE_SIZE_MESSAGE)
    if sample_size <= 0:
        raise ValidationError(INVALID_SAMPLE_SIZE_MESSAGE)


def score_positions(stats: Stats, points: int = NUM_POINTS) -> npt.NDArray[np.float64]:
    """Evenly spaced x values from stats.min to stats.max, both inclusive."""
    steps = np.arange(points, dtype=np.float64)
    return stats.min + steps * (stats.max - stats.min) / (points - 1)


def round_half_up(values: npt.NDArray[np.float64], decimals: int) -> npt.NDArray[np.float64]:
    """Round to `decimals` places with halves going up (np.round rounds halves to even)."""
    factor = 10.0 ** decimals
    return np.floor(values * factor + 0.5) / factor


def sample_distribution(stats: Stats, sample_size: int, points: int = NUM_POINTS) -> tuple[DataPoint, ...]:
    """
    Sample the scaled normal density curve over [stats.min, stats.max].

    For each evenly spaced x the density
    ``1 / (std_dev * sqrt(2*pi)) * exp(-0.5 * ((x - mean) / std_dev)**2)``
    is multiplied by the sample size and rounded to two decimals.

    Args:
        stats: Mean, standard deviation and range of the scores.
        sample_size: Positive number of samples used to scale the density.
        points: Number of points along the curve (at least 2).

    Returns:
        Tuple of DataPoints ordered by ascending score.

    Raises:
        ValidationError: If sample_size is not a positive integer.
        ComputationError: If the statistics cannot describe a curve.
    """
    _check_sample_size(sample_size)
    if points < 2:
        raise ComputationError(f"At least 2 points are needed to sample a curve, got {points}.")
    stats.validate()

    xs = score_positions(stats, points)
    try:
        scale = float(sample_size)
    except OverflowError:
        raise ComputationError("Sample size is too large to scale the curve.") from None

    densities = norm.pdf(xs, loc=stats.mean, scale=stats.std_dev)
    with np.errstate(over="ignore"):
        frequencies = round_half_up(densities * scale, FREQUENCY_DECIMALS)
    if not np.isfinite(frequencies).all():
        raise ComputationError(f"Sample size is too large to scale the curve: {scale:.3e}.")

    data = tuple(
        DataPoint(score=f"{x:.{SCORE_DECIMALS}f}", frequency=float(f))
        for x, f in zip(xs, frequencies)
    )
    logger.debug(f"Sampled {len(data)} points for {stats} with sample size {sample_size}")
    return data
