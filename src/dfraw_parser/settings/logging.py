"""
Console and log file settings.

The console handler writes to stderr so that JSON sent to stdout stays
clean. The log file is a rotating CSV file that records every level by
default, worker thread included, to follow a parse across the reader pool.
"""

import logging

from .section import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/dfraw_parser.csv"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsSection):
    """Console and file logging options."""

    prefix = "logging"

    def _set_level(self, name: str, value: str, current: str) -> None:
        if value.upper() in VALID_LEVELS:
            self._set(name, value.upper())
        else:
            logger.warning(f"Invalid log level: {value}, keeping current: {current}")

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        return self._get_bool("console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("console_enabled", value)

    @property
    def console_log_level(self) -> str:
        return self._get_str("console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._set_level("console_level", value, self.console_log_level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("console_use_colors", value)

    # === FILE ===

    @property
    def file_logging(self) -> bool:
        return self._get_bool("file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("file_enabled", value)

    @property
    def file_log_level(self) -> str:
        return self._get_str("file_level", "DEBUG")

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        self._set_level("file_level", value, self.file_log_level)

    @property
    def log_file_path(self) -> str:
        """Log file, relative paths taken from the working directory."""
        return self._get_str("file_path", LOG_FILE_PATH) or LOG_FILE_PATH

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._set("file_path", str(value))
