"""Logging configuration shared by the codec packages."""

from .logging import (
    VERBOSE_LEVEL,
    CodecLogger,
    LogLevel,
    UTCFormatter,
    configure_logging,
    get_logger,
)

__all__ = (
    "VERBOSE_LEVEL",
    "CodecLogger",
    "LogLevel",
    "UTCFormatter",
    "configure_logging",
    "get_logger",
)
