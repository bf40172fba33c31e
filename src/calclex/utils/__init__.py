"""Utility modules for calclex.

Provides:
- logger: get_logger for logging
"""

from calclex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
