"""
Logging setup for the calculator window.
"""
import logging
import sys
from typing import List, Optional

LOGGER_NAME = "kalkulator"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _reset_handlers(logger: logging.Logger) -> None:
    # a restarted window must not leave an earlier log file open
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Routes the 'kalkulator' loggers to stdout and, optionally, a file.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; the file is truncated on every call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _reset_handlers(logger)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
