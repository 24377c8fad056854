"""
Logging configuration for the records API.

``setup_logging`` attaches console and optional file handlers to the
``organiks_api`` package logger, so every module logging through
``logging.getLogger(__name__)`` shares one format.  Per-request access
lines from uvicorn and connection chatter from urllib3 are only shown
when running at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "organiks_api"
QUIET_LOGGERS = ("uvicorn.access", "urllib3")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    The level is applied on every call; handlers are attached only the
    first time, since ``create_app`` may run repeatedly (tests, reload).

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``), case insensitive.
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to additionally log to.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    quiet_level = numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Package records stop here and are not passed to the root logger.
    logger.propagate = False
    return logger
