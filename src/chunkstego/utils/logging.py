"""Logging utilities for chunkstego."""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "CHUNKSTEGO_LOG_LEVEL"


def resolve_log_level(level: Optional[str] = None) -> int:
    """Return the numeric log level from *level*, the environment or the default."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, name, logging.WARNING)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the application."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
    )
