"""Logging helper for bemcn.

Every module logs through a stdlib logger under the ``bemcn.`` namespace.
The library only emits records; attaching handlers is left to the host.

Example:
    >>> from bemcn.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Ignoring argument %r", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``bemcn``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("builder").name
        'bemcn.builder'
    """
    if not (name == "bemcn" or name.startswith("bemcn.")):
        name = f"bemcn.{name}"
    return logging.getLogger(name)
