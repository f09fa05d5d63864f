"""
Prefixed loggers for the bandwagon client.

Usage:
    from bandwagon.utils.logging import get_logger

    logger = get_logger(__name__, prefix="Race")
    logger.warning("deadline reached")  # Output: [Race] deadline reached
"""

import logging
from typing import Optional, Union


class PrefixedLogger(logging.LoggerAdapter):
    """Logger adapter that adds a prefix to all log messages."""

    def __init__(self, logger: logging.Logger, prefix: str):
        super().__init__(logger, {})
        self.prefix = f"[{prefix}]"

    def process(self, msg, kwargs):
        return f"{self.prefix} {msg}", kwargs


def get_logger(name: str, prefix: Optional[str] = None) -> Union[logging.Logger, PrefixedLogger]:
    """
    Get a logger with an optional prefix.

    Args:
        name: Logger name (typically __name__)
        prefix: Optional prefix for every message (e.g., "Race", "Bandwagon")

    Returns:
        Plain logger, or a PrefixedLogger when a prefix is given
    """
    base_logger = logging.getLogger(name)

    if prefix:
        return PrefixedLogger(base_logger, prefix)

    return base_logger

