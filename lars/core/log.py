"""
Logging helpers.

The kernel only logs failure paths at DEBUG level. The package logger carries a
NullHandler; applications that want the output call setup_logging().
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = "lars"

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the package logger (idempotent)."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())
