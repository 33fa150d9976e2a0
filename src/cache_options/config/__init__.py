"""Configuration for cache-options: settings and logging."""

from .logging_config import LoggingConfig, LogFormat, LogLevel, get_logger, setup_logging
from .settings import OptionsSettings, get_settings

__all__ = [
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "get_logger",
    "setup_logging",
    "OptionsSettings",
    "get_settings",
]
