#
# PROJECT: term3d
# MODULE: term3d/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import sys
from typing import Optional

LOGGER_NAME = "term3d"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  console: bool = False) -> logging.Logger:
    """
    Configure the 'term3d' logger namespace.

    curses owns the terminal while the loop runs, so console output is off
    unless asked for. With neither a file nor the console the logger gets a
    NullHandler and stays silent.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to write logs to.
        console: Also log to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
    else:
        logger.propagate = True

    logger.debug("Logging initialized.")
    return logger
