"""Logging configuration for cache-options.

Configures the ``cache_options`` logger tree from environment variables.
The host application's root logger is left untouched.
"""

import logging
import logging.config
import os
from enum import Enum


PACKAGE_LOGGER = "cache_options"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Logging configuration manager for the package logger."""

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables.

        ``LOG_LEVEL`` picks the level (default WARNING) and ``LOG_FORMAT``
        one of simple, detailed or json. Unknown values fall back to the
        defaults.
        """
        log_level = os.getenv("LOG_LEVEL", LogLevel.WARNING.value).upper()
        if log_level not in LogLevel.__members__:
            log_level = LogLevel.WARNING.value

        try:
            log_format = LogFormat(os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value).lower())
        except ValueError:
            log_format = LogFormat.SIMPLE

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[log_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {
                    "level": log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        logger.debug("Logging configured: level=%s, format=%s", log_level, log_format.value)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for the given module name."""
        return logging.getLogger(name)

    @classmethod
    def set_level(cls, level: str) -> None:
        """Set the level of the package logger."""
        logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level.upper()))


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Call once at application startup.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    return LoggingConfig.get_logger(name)
