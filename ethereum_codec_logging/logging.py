"""
Logger class, log levels and handler setup of the codec packages.

Every codec module logs through `get_logger`. Nothing is configured on
import: applications call `configure_logging`, test sessions go through
the pytest plugin in `plugin.py`.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union, cast

from config import CodecConfig

# Sits between DEBUG and INFO
VERBOSE_LEVEL = 15

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CodecLogger(logging.Logger):
    """Logger with a `verbose` method for the VERBOSE level."""

    def verbose(
        self,
        msg: object,
        *args: Any,
        exc_info: Union[BaseException, bool, None] = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        extra: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Log at VERBOSE level.

        Used for intermediate encodings, such as the type string of a hashed
        typed data struct, that are too noisy for INFO.
        """
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, exc_info, extra, stack_info, stacklevel)


logging.setLoggerClass(CodecLogger)


def get_logger(name: str) -> CodecLogger:
    """Return the named logger, typed as a `CodecLogger`."""
    return cast(CodecLogger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Formatter stamping records in UTC, to the millisecond."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return stamp.isoformat(sep=" ", timespec="milliseconds")


class LogLevel:
    """Parser of log levels given as names or numbers."""

    @classmethod
    def from_cli(cls, value: str) -> int:
        """Return the numeric level of a name such as `verbose`, or of a number."""
        if value.isdigit():
            return int(value)
        level = logging.getLevelName(value.upper())
        if not isinstance(level, int):
            raise ValueError(
                f"Invalid log level '{value}'. Expected one of: "
                "DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL or a number."
            )
        return level


def configure_logging(
    log_level: Union[int, str, None] = None,
    log_file: Optional[Union[str, Path]] = None,
    log_to_stdout: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> Optional[logging.FileHandler]:
    """
    Replace the handlers of the root logger.

    Args:
        log_level: Level name or number, `CodecConfig.DEFAULT_LOG_LEVEL` if unset.
        log_file: File to write the log to, truncated first. No file handler
            is installed when unset.
        log_to_stdout: Also write the log to stdout.
        log_format: Record format shared by all handlers.

    Returns:
        The file handler, when `log_file` is given.

    """
    if log_level is None:
        log_level = CodecConfig().DEFAULT_LOG_LEVEL
    if isinstance(log_level, str):
        log_level = LogLevel.from_cli(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = []
    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="w")
        handlers.append(file_handler)
    if log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))
    for handler in handlers:
        handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(handler)

    logger.verbose("Logging configured")
    return file_handler
