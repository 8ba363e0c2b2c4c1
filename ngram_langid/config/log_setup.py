"""
Console logging for command-line runs.
"""
import logging

from rich.logging import RichHandler

LOG_FORMAT = "%(name)s | %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route the package loggers through a RichHandler."""
    logger = logging.getLogger("ngram_langid")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()
    handler = RichHandler(show_path=False, markup=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["configure_logging"]
