# File: trifix/core/logging.py
# Project: trifix-backend

import sys
import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a single stdout handler to the ``trifix`` logger.

    Calling it again only updates the level, so importing the app twice
    (tests, reloaders) does not duplicate output.
    """
    logger = logging.getLogger("trifix")
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    return logger
