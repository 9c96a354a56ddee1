"""
Logging configuration for the fleet API.
The level comes from `LOG_LEVEL`; app, service and DDL modules log through the shared "fleet" logger.
"""

from __future__ import annotations

import logging

from fleetsystem.common.settings import get_settings

FLEET_LOGGER_NAME = "fleet"

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging once, from `LOG_LEVEL`."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger(FLEET_LOGGER_NAME).setLevel(level)
    logging.getLogger(FLEET_LOGGER_NAME).info(
        "logging configured project=%s env=%s level=%s",
        settings.PROJECT_NAME,
        settings.ENV,
        logging.getLevelName(level),
    )
    _LOGGING_CONFIGURED = True
