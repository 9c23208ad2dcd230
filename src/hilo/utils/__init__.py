"""Utility modules for Hilo.

Provides:
- logger: get_logger for logging
"""

from hilo.utils.logger import get_logger

__all__ = [
    "get_logger",
]
