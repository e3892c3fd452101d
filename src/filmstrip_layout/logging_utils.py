"""
Centralized logging utilities for the filmstrip layout package.

The sizers log each computed size at DEBUG and the CLI logs its inputs at
INFO through one shared logger. ``set_verbosity`` lets the CLI's
``--verbose`` flag switch that logger to DEBUG without touching the
root logger.
"""

import logging

LOGGER_NAME = "filmstrip_layout"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return a logger with a single handler attached.

    The first call for a name attaches ``handler`` (stderr by default)
    with ``formatter``; later calls only update the level, so importing
    modules never stack duplicate handlers.

    Args:
        name: Logger name, defaults to the package logger.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler.

    Returns:
        The configured logger.

    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if log.handlers:
        return log

    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter or logging.Formatter(DEFAULT_FORMAT))
    log.addHandler(handler)
    log.propagate = False
    return log


def set_verbosity(*, verbose: bool, log: logging.Logger | None = None) -> int:
    """Switch the package logger between INFO and DEBUG; return the level."""
    level = logging.DEBUG if verbose else logging.INFO
    (log or logger).setLevel(level)
    return level


# Shared logger used across modules
logger = setup_logger()
