"""Minimal logging utilities for Hilo.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from hilo.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Opened heading block")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "hilo." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("driver")
        >>> logger.name
        'hilo.driver'
    """
    if not (name == "hilo" or name.startswith("hilo.")):
        name = f"hilo.{name}"
    return logging.getLogger(name)
