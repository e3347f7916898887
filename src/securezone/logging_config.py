"""
Logging setup for the zone designer.

Library modules only create ``logging.getLogger(__name__)`` loggers under the
``securezone`` namespace; handlers are attached here, by the CLI or by an
embedding application, so sensor placement and export messages become
visible.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route ``securezone`` log records to stdout and, optionally, a file.

    Calling it again replaces the handlers from the previous call instead of
    stacking duplicates.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file, overwritten on each call.

    Returns:
        The ``securezone`` package logger.
    """
    logger = logging.getLogger("securezone")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to stdout{f' and {log_file}' if log_file else ''} at {logging.getLevelName(level)}")
    return logger
