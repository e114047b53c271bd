"""
Logging Configuration
Sets up the package logger for the visualizer.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "statsvisualizer"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'statsvisualizer' logger with a stdout handler and an optional file handler.

    Args:
        level: Logging level, either numeric (logging.DEBUG) or a name ("debug").
        log_file: Optional path to save logs to a file (overwritten on each run).

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized (level %s).", logging.getLevelName(level))
    return logger
