"""Logging utilities for molattr."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config


def configure_logging(level: int = logging.INFO, logger_name: str | None = None) -> None:
    """Configure the root logger or a named logger for molattr.

    Parameters
    ----------
    level:
        Logging level from :mod:`logging` (defaults to ``logging.INFO``).
    logger_name:
        Optional name of the logger to configure. If omitted, the root logger
        is configured.

    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def level_from_string(name: str) -> int:
    """Map a log level name to its numeric value.

    Unknown names map to :data:`logging.INFO`.
    """
    levels = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
    }
    return levels.get((name or "").upper(), logging.INFO)


def configure_logging_from_config(config: Config, logger_name: str | None = "molattr") -> None:
    """Configure logging using the ``logging.level`` entry of ``config``."""
    configure_logging(level_from_string(config.logging.get("level")), logger_name)
