"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from friggsys_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def resolve_level(level_name: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for friggsys modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = settings or get_settings()
    log_level = resolve_level(settings.log_level)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("friggsys").setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
