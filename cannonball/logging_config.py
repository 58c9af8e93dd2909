"""Console and file logging for the cannonball tools."""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    name: str = "cannonball",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach handlers to the ``name`` logger and return it.

    Args:
        level: Threshold for the logger and every handler.
        log_file: Also write records here, truncating any previous run.
        name: Logger namespace; module loggers below it inherit the handlers.
        stream: Console stream, stdout unless given.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # repeated calls replace handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s) at %s", len(handlers), logging.getLevelName(level))
    return logger
