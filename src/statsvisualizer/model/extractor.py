"""
Statistics Extraction
=====================
Reads the mean, standard deviation and score range out of a short sentence
such as::

    The class average is 77.31% with a standard deviation of 15.17%.
    Scores ranged from 24% to 100%.

Only the fixed phrasings below are recognised. Anything else fails with a
ParseError naming what is missing.
"""
from __future__ import annotations

import logging
import re

from statsvisualizer.errors import ParseError
from statsvisualizer.model.stats import Stats

logger = logging.getLogger(__name__)

MEAN_PATTERN = re.compile(r"average is (\d+\.?\d*)%", re.ASCII)
STD_DEV_PATTERN = re.compile(r"deviation of (\d+\.?\d*)%", re.ASCII)
RANGE_PATTERN = re.compile(r"from (\d+)% to (\d+)%", re.ASCII)

# Human-readable hints used in the failure message
EXPECTED_PHRASES = {
    "mean": '"average is 77.31%"',
    "standard deviation": '"deviation of 15.17%"',
    "range": '"from 24% to 100%"',
}

PARSE_FAILURE_MESSAGE = (
    "Error parsing statistics: Could not parse all required statistics "
    "from the text. Please check the format."
)


def extract_stats(text: str) -> Stats:
    """
    Extract a Stats record from free-form text.

    Extraction is all-or-nothing: either all three phrases match, or a
    ParseError is raised and nothing is returned.

    Args:
        text: The input text.

    Returns:
        Stats with mean and std_dev as given and min/max from the integer range.

    Raises:
        ParseError: If any of the mean, deviation or range phrases is missing.
    """
    if not isinstance(text, str):
        raise ParseError(f"{PARSE_FAILURE_MESSAGE} Expected text, got {type(text).__name__}.")

    mean_match = MEAN_PATTERN.search(text)
    std_dev_match = STD_DEV_PATTERN.search(text)
    range_match = RANGE_PATTERN.search(text)

    missing = [
        name for name, match in (
            ("mean", mean_match),
            ("standard deviation", std_dev_match),
            ("range", range_match),
        )
        if match is None
    ]
    if missing:
        logger.debug(f"Statistics extraction failed, missing: {missing}")
        hints = ", ".join(f"{name} as {EXPECTED_PHRASES[name]}" for name in missing)
        raise ParseError(f"{PARSE_FAILURE_MESSAGE} Missing {hints}.")

    stats = Stats(
        mean=float(mean_match.group(1)),
        std_dev=float(std_dev_match.group(1)),
        min=float(range_match.group(1)),
        max=float(range_match.group(2)),
    )
    logger.debug(f"Extracted {stats}")
    return stats
