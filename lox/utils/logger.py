"""Minimal logging utilities for Lox.

Example:
    >>> from lox.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "lox".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "lox" or name.startswith("lox.")):
        name = f"lox.{name}"
    return logging.getLogger(name)
