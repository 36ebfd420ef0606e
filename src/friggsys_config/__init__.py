"""Configuration for friggsys: settings and logging."""

from friggsys_config.logging_setup import configure_logging
from friggsys_config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
