"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (point count, rounding precision,
   colours) scattered throughout the code.
2. Environment: It resolves the logging level from the environment so the
   application can be run verbosely without code changes.

Exports:
    NUM_POINTS (int): Number of samples along the density curve.
    DEFAULT_TEXT (str): Text shown in the input box on start-up.
    LOG_LEVEL (int): Logging level used by the GUI entry point.
"""
import logging
import os

# Sampling
NUM_POINTS: int = 50
SCORE_DECIMALS: int = 1
FREQUENCY_DECIMALS: int = 2

# Initial input values
DEFAULT_TEXT: str = (
    "The class average is 77.31% with a standard deviation of 15.17%. "
    "Scores ranged from 24% to 100%."
)
DEFAULT_SAMPLE_SIZE: str = "200"

# Chart styling
CURVE_COLOR: str = "#8884d8"
FILL_OPACITY: float = 0.3

LOG_LEVEL_ENV: str = "STATSVISUALIZER_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the logging level from the STATSVISUALIZER_LOG_LEVEL environment variable.

    Accepts level names (e.g. "DEBUG") in any case. Unknown names fall back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


LOG_LEVEL: int = get_log_level()
