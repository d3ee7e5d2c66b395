"""Logging configuration for the API process."""

from __future__ import annotations

import logging
import logging.config

from app.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Install a console handler on the root logger at the configured level."""

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "root": {
                "level": log_level,
                "handlers": ["console"],
            },
            "loggers": {
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
    logging.getLogger(__name__).debug("Logging configured at level %s", log_level)


__all__ = ["configure_logging"]
