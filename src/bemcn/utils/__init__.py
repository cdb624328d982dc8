"""Utility modules for bemcn.

Provides:
- logger: get_logger for logging
"""

from bemcn.utils.logger import get_logger

__all__ = [
    "get_logger",
]
