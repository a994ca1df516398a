"""Core i18nmail utilities.

This module exports core utilities for use throughout the application.
"""

from i18nmail.core.config import Settings, get_settings
from i18nmail.core.logging import (
    LoggingContext,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "clear_context",
]
