"""Logging setup for the path_pattern package."""

import logging
import sys

FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

logger = logging.getLogger("path_pattern")


def _already_configured(log: logging.Logger) -> bool:
    if not log.handlers:
        return False

    for handler in log.handlers:
        if isinstance(handler, logging.StreamHandler):
            if handler.stream == sys.stdout:
                return True

    return False


def configure_logging(debug: bool = False) -> logging.Logger:
    """Send package logs to stdout.

    Does nothing if a stdout handler is already attached.
    """
    if _already_configured(logger):
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT_STRING))
    logger.propagate = False
    logger.setLevel(logging.DEBUG if debug else logging.ERROR)
    logger.addHandler(handler)
    return logger
