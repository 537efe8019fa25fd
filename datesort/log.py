"""Logging setup for the command-line entry point."""
import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send ``datesort`` log records to stderr; stdout is kept for results.

    Only the package logger is touched, so calling this twice replaces
    the previous handler instead of adding a second one.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = get_logger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "datesort")
