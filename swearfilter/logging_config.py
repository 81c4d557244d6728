"""
Logging configuration for the swear filter.

Provides the same structured format for every module in the package.
"""

import logging
import sys
from typing import Optional


class _SuppressNoisyLogs(logging.Filter):
    """Filter out per-message chatter when a host application logs at DEBUG."""

    _NOISY_SUBSTRINGS = (
        "Checked message against 0 words",
    )

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(token in message for token in self._NOISY_SUBSTRINGS)


def setup_logging(name: str = "swearfilter", level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up structured logging.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file to write logs to

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        return logger

    noise_filter = _SuppressNoisyLogs()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(noise_filter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(noise_filter)
        logger.addHandler(file_handler)

    return logger


# Package-wide logger
logger = setup_logging("swearfilter")
