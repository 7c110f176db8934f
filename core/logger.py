# =============================================================================
# core/logger.py  —  Logger Setup
# =============================================================================
#
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything written to stdout would corrupt the MCP JSON stream.
#
# The logger is built once in main.py from Settings.debug and handed to the
# dispatcher and router, so tests can pass their own logger instead of
# flipping environment variables.
# =============================================================================

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "aifais"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def build_logger(debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure and return the process logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
