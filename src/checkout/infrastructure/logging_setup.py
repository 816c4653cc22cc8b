"""Logging configuration for the ``checkout`` package.

Modules log through ``logging.getLogger(__name__)``; this installs the one
handler that prints those records to stderr.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "checkout-stderr"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again replaces the handler, so it always writes to the
    current ``sys.stderr`` and never duplicates output.
    """
    logger = logging.getLogger("checkout")
    logger.setLevel(level)

    for existing in logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
