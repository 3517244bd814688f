"""Logging configuration for the fleet cost calculator.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are attached here, by the process entry point.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "fleet_calc"

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(h.get_name() == ROOT_LOGGER for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(ROOT_LOGGER)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)

    return logger
