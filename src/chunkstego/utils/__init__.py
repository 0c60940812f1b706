"""Utility helpers for chunkstego."""

from .logging import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, configure_logging, resolve_log_level

__all__ = ["DEFAULT_LOG_LEVEL", "LOG_LEVEL_ENV", "configure_logging", "resolve_log_level"]
