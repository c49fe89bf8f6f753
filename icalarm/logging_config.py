"""Loguru logging setup for applications embedding icalarm."""

import os
import sys

from loguru import logger

from icalarm.config.schema import LoggingConfig

LOG_FORMAT = "<level>{time:YYYY-MM-DD HH:mm:ss} | {name}:{function}:{line} | {message}</level>"


def setup_logging(level: str | None = None, config: LoggingConfig | None = None) -> None:
    """Route icalarm log records to stderr.

    The library is silent by default; calling this enables it. An explicit
    ``level`` wins over ``config``, which wins over ``LOG_LEVEL``.
    """
    if level is None and config is not None:
        level = config.level
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")

    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level.upper(),
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
    logger.enable("icalarm")
