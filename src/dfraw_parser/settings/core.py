"""
Core settings management for dfraw-parser.
"""

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QSettings

from ..metadata import ObjectType, RawModuleLocation
from .logging import LoggingSettings
from .parsing import ParsingSettings
from .paths import PathSettings
from .section import SettingsSection
from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION = "dfraw_parser"
APPLICATION = "dfraw_parser"


class _AppSection(SettingsSection):
    prefix = "app"

    @property
    def version(self) -> str:
        return self._get_str("version")

    @version.setter
    def version(self, value: str) -> None:
        self._set("version", value)


class AppSettings:
    """
    Persisted command line defaults for one profile.

    Each profile is a QSettings group, so several setups (a vanilla install,
    a modded one) can live side by side in the per-user store:

        settings = AppSettings("modded")
        settings.df_path = Path("D:/Games/Dwarf Fortress")
        settings.locations = [RawModuleLocation.MODS]
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Open a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: QSettings to use instead of the per-user store

        Raises:
            ConfigError: If the profile name is empty or contains a slash
        """
        if not profile or "/" in profile:
            raise ConfigError(f"Invalid settings profile name: '{profile}'")

        self.settings = settings if settings is not None else QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile
        self.settings.beginGroup(profile)

        self._app = _AppSection(self.settings)
        self._paths = PathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)
        self._parsing = ParsingSettings(self.settings)
        self._validator = SettingsValidator(self)

        if not self._app.version:
            self._app.version = ConfigVersion.CURRENT.value
            logger.info(f"Created settings profile '{profile}'")

        logger.debug(f"Settings profile '{profile}' stored at: {self.settings.fileName()}")

    # === SECTIONS ===

    @property
    def paths(self) -> PathSettings:
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        return self._logging

    @property
    def parsing(self) -> ParsingSettings:
        return self._parsing

    @property
    def version(self) -> str:
        """Configuration version the profile was written with."""
        return self._app.version or ConfigVersion.CURRENT.value

    # === PATHS ===

    @property
    def df_path(self) -> Optional[Path]:
        return self._paths.df_path

    @df_path.setter
    def df_path(self, value: Optional[Path]) -> None:
        self._paths.df_path = value

    @property
    def output_path(self) -> Optional[Path]:
        return self._paths.output_path

    @output_path.setter
    def output_path(self, value: Optional[Path]) -> None:
        self._paths.output_path = value

    # === LOGGING ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def file_log_level(self) -> str:
        return self._logging.file_log_level

    @file_log_level.setter
    def file_log_level(self, value: str) -> None:
        self._logging.file_log_level = value

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._logging.log_file_path = value

    # === PARSING ===

    @property
    def attach_metadata(self) -> bool:
        return self._parsing.attach_metadata

    @attach_metadata.setter
    def attach_metadata(self, value: bool) -> None:
        self._parsing.attach_metadata = value

    @property
    def pretty_print(self) -> bool:
        return self._parsing.pretty_print

    @pretty_print.setter
    def pretty_print(self, value: bool) -> None:
        self._parsing.pretty_print = value

    @property
    def locations(self) -> List[RawModuleLocation]:
        return self._parsing.locations

    @locations.setter
    def locations(self, value: List[RawModuleLocation]) -> None:
        self._parsing.locations = value

    @property
    def object_types(self) -> List[ObjectType]:
        return self._parsing.object_types

    @object_types.setter
    def object_types(self, value: List[ObjectType]) -> None:
        self._parsing.object_types = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Check the profile can drive a parse; see SettingsValidator."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()
