"""Logging configuration for applications embedding the planner.

Every calculator module logs to its own ``rearing.<module>`` logger and only
at DEBUG: ``rearing.buffer`` and ``rearing.trough`` when a run hits its
simulated-time cap, ``rearing.integrator`` when the daily breakdown is
truncated, ``rearing.hand_feed`` with each threshold found,
``rearing.usecases.breeding_stats`` when input is normalized and
``rearing.catalog`` when a catalog is loaded. Nothing is installed on import,
so these stay silent until an application (a bot, an API server, a
notebook) calls :func:`configure_logging` with ``level="DEBUG"`` or sets
``REARING_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "REARING_LOG_LEVEL"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure root logging and the ``rearing`` logger tree.

    Args:
        level: Level name such as ``"DEBUG"``. Without it the level comes
            from ``REARING_LOG_LEVEL``, then INFO.
        format: Record format, applied to the root handler.
        datefmt: Timestamp format for ``%(asctime)s``.
        extra_loggers: Application logger names to align with the planner's
            level, so a host's own messages interleave with the planner's.

    Returns:
        The package logger (``rearing``), parent of every module logger.
    """
    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV)
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    package_logger = logging.getLogger("rearing")
    package_logger.setLevel(resolved_level)

    if extra_loggers:
        for logger_name in extra_loggers:
            logging.getLogger(logger_name).setLevel(resolved_level)

    package_logger.debug("Logging configured", extra={"level": resolved_level})
    return package_logger
