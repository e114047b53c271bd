"""
Visualize Action
================
Runs extraction and sampling for one press of the Visualize button and turns
the outcome into the next VisualizerState.

Domain errors (StatsVisualizerError) become Failed(message); anything else is
a bug and propagates.
"""
from __future__ import annotations

import logging
from typing import Optional

from statsvisualizer.errors import StatsVisualizerError
from statsvisualizer.model.extractor import extract_stats
from statsvisualizer.model.sampler import parse_sample_size, sample_distribution
from statsvisualizer.model.state import Failed, Ready, VisualizerState

logger = logging.getLogger(__name__)


def visualize(text: str, sample_size_text: Optional[str]) -> VisualizerState:
    """
    Compute the state produced by a visualize action.

    Args:
        text: Free-form text containing the statistics.
        sample_size_text: The sample size as typed by the user.

    Returns:
        Ready with the sampled curve, or Failed with a user-facing message.
    """
    try:
        stats = extract_stats(text)
        sample_size = parse_sample_size(sample_size_text)
        points = sample_distribution(stats, sample_size)
    except StatsVisualizerError as e:
        logger.warning(f"Visualization failed ({type(e).__name__}): {e}")
        return Failed(message=str(e))

    logger.info(f"Visualized {stats} with sample size {sample_size} ({len(points)} points)")
    return Ready(points=points)
