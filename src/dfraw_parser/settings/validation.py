"""
Settings validation for dfraw-parser.
"""

import logging
from typing import TYPE_CHECKING, List

from ..metadata import RawModuleLocation
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Checks that a profile can drive a parse without further flags.

    Errors make the profile unusable; warnings point at defaults that will
    yield nothing or need a command line flag to be useful.
    """

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        self._check_game_directory(errors, warnings)
        self._check_output(errors)
        self._check_parse_defaults(errors, warnings)

        for message in errors:
            logger.debug(f"Settings error in profile '{self.settings.profile}': {message}")

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    def _check_game_directory(self, errors: List[str], warnings: List[str]) -> None:
        paths = self.settings.paths
        df_path = paths.df_path
        if df_path is None:
            warnings.append("Dwarf Fortress path not set")
            return
        if not df_path.exists():
            errors.append(f"Dwarf Fortress path does not exist: {df_path}")
            return
        if paths.vanilla_path is not None and not paths.vanilla_path.exists():
            warnings.append(
                f"Dwarf Fortress path might be invalid (no 'data/vanilla' directory): {df_path}"
            )
        for location in self.settings.parsing.locations:
            location_path = location.path_in(df_path)
            if location is RawModuleLocation.VANILLA or location_path is None:
                continue
            if not location_path.exists():
                warnings.append(f"{location.value} directory not found: {location_path}")

    def _check_output(self, errors: List[str]) -> None:
        output_path = self.settings.paths.output_path
        if output_path is not None and output_path.is_dir():
            errors.append(f"Output path is a directory: {output_path}")

    def _check_parse_defaults(self, errors: List[str], warnings: List[str]) -> None:
        if not self.settings.parsing.locations:
            warnings.append("No default locations to parse")
        if not self.settings.parsing.object_types:
            errors.append("No object types to parse")
