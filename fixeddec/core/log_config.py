"""
Logging configuration for applications using the library.

The package disables its own loguru logger on import; call
``setup_logging`` to route its messages to stderr.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug: bool = False) -> int:
    """Configure logging with loguru.

    Args:
        debug: Emit DEBUG messages when True, INFO and above otherwise

    Returns:
        Identifier of the added sink, usable with ``logger.remove``
    """
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    sink_id = logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    logger.enable("fixeddec")
    return sink_id
