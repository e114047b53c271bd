"""
Error Taxonomy
==============
Exceptions raised by the extraction and sampling steps.

All of them derive from StatsVisualizerError so the orchestration layer can
turn any domain failure into a single user-visible message while letting
unexpected errors propagate.
"""


class StatsVisualizerError(Exception):
    """Base class for all domain errors of the visualizer."""


class ParseError(StatsVisualizerError):
    """The expected statistics phrases were not found in the input text."""


class ValidationError(StatsVisualizerError):
    """The sample size is missing, non-numeric or not a positive integer."""


class ComputationError(StatsVisualizerError):
    """The statistics cannot describe a density curve (std_dev <= 0, max < min)."""
