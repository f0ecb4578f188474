"""Logging setup.

Library modules log through loguru's ``logger``. The package disables
its own messages at import so embedding applications stay quiet;
:func:`configure_logging` turns them back on with a single stderr sink.
"""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(level: str = "WARNING") -> int:
    """Enable mu_logo logging to stderr at ``level``.

    Returns:
        The loguru handler id of the new sink
    """
    logger.remove()
    handler_id = logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    logger.enable("mu_logo")
    return handler_id
