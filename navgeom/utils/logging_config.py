# -*- coding: utf-8 -*-
"""
Logging Configuration - Optional console/file logging for navgeom.

The library itself only emits DEBUG records through module loggers under
the ``navgeom`` namespace: negative inner extents, failed scratch
allocations and degenerate ellipses. Applications that want to see them
call ``setup_logging``; the default level is therefore DEBUG.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
import sys
from typing import Optional

#: Name of the package logger all module loggers descend from
LOGGER_NAME = "navgeom"

#: Record layout shared by every handler
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

#: Timestamp layout
DATE_FORMAT = '%H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    """Give ``handler`` the shared format and level and add it to ``logger``."""
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def _detach_all(logger: logging.Logger) -> None:
    """Close and remove handlers left by an earlier configuration."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logging(
    level: int = logging.DEBUG,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``navgeom`` logger.

    Repeated calls replace the previous handlers, closing any open log
    file, so records are never duplicated.

    Parameters
    ----------
    level : int
        Logging level. Defaults to ``logging.DEBUG``, the only level the
        library emits at.
    log_file : str, optional
        Path of a file to also write log records to (truncated on open).

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _detach_all(logger)

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger


__all__ = [
    "LOGGER_NAME",
    "LOG_FORMAT",
    "DATE_FORMAT",
    "setup_logging",
]
