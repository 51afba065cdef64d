"""
Logging Configuration

Configures logging for the giftlist package and its CLI scripts.
Output goes to stderr to keep stdout clean for user-facing reports.

With verbose output the urllib3 logger (used by requests) is routed to the
same handler, so connection, redirect and retry messages show up next to
the fetcher's own log lines.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "giftlist"
HTTP_LOGGER = "urllib3"

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def _replace_handler(logger: logging.Logger, handler: Optional[logging.Handler]) -> None:
    """Swap out any handler a previous setup_logging call attached."""
    for existing in list(logger.handlers):
        if getattr(existing, "_giftlist", False):
            logger.removeHandler(existing)
    if handler is not None:
        logger.addHandler(handler)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: DEBUG level, HTTP connection logging included
        quiet: WARNING level (ignored when verbose is set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._giftlist = True

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _replace_handler(logger, handler)

    http_logger = logging.getLogger(HTTP_LOGGER)
    if verbose:
        http_logger.setLevel(logging.DEBUG)
        _replace_handler(http_logger, handler)
    else:
        http_logger.setLevel(logging.NOTSET)
        _replace_handler(http_logger, None)
