"""
Persisted command line defaults, one QSettings group per profile.

Usage:
    from dfraw_parser.settings import AppSettings

    settings = AppSettings("modded")
    settings.locations = [RawModuleLocation.MODS]
    if not settings.validate().is_valid:
        ...
"""

from .core import AppSettings
from .logging import LoggingSettings
from .parsing import ParsingSettings
from .paths import PathSettings
from .section import SettingsSection
from .types import ConfigError, ConfigVersion, ValidationResult

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigVersion",
    "LoggingSettings",
    "ParsingSettings",
    "PathSettings",
    "SettingsSection",
    "ValidationResult",
]
