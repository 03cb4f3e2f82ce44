"""
Logging configuration for dfraw-parser.

Console output goes to stderr, which keeps stdout for JSON. The optional log
file is a rotating, semicolon separated CSV that also records the reader
thread of each message.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Libraries that are chatty at DEBUG
QUIET_LOGGERS = ("asyncio", "concurrent.futures")


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",  # cyan
        logging.INFO: "\033[32m",  # green
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[35m",  # magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        formatted = super().format(record)
        if color is None:
            return formatted
        return formatted.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


class CSVFormatter(logging.Formatter):
    """One quoted, semicolon separated row per record."""

    def format(self, record: logging.LogRecord) -> str:
        fields = [
            self.formatTime(record, self.datefmt),
            record.levelname,
            f"{int(record.relativeCreated)} ms",
            record.threadName or "",
            record.name,
            str(record.lineno),
            record.getMessage(),
        ]
        if record.exc_info:
            fields[-1] = f"{fields[-1]}\n{self.formatException(record.exc_info)}"
        return ";".join('"' + value.replace('"', '""') + '"' for value in fields)


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.upper()) if name else default
    return level if isinstance(level, int) else default


def _console_handler(settings: "AppSettings", level: str) -> logging.Handler:
    formatter_class = ColoredFormatter if settings.console_use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(_level(level, logging.INFO))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    return handler


def _file_handler(settings: "AppSettings") -> Optional[logging.Handler]:
    log_path = Path(settings.log_file_path)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not open log file {log_path}: {e}")
        return None
    handler.setLevel(_level(settings.file_log_level, logging.DEBUG))
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(settings: "AppSettings", console_level: str = "") -> None:
    """
    Replace the root handlers with the ones the settings ask for.

    Args:
        settings: AppSettings instance for all logging configuration
        console_level: Overrides the configured console level when given
    """
    console_level = console_level or settings.console_log_level

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger("dfraw_parser").setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    if settings.console_logging:
        root_logger.addHandler(_console_handler(settings, console_level))

    file_handler = _file_handler(settings) if settings.file_logging else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging initialized (console: {settings.console_logging} at {console_level}, "
        f"file: {file_handler is not None} at {settings.log_file_path})"
    )
