"""
Options controlling what gets parsed and how results are written.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import InvalidOptionsError
from .metadata import DEFAULT_OBJECT_TYPES, ObjectType, RawModuleLocation

logger = logging.getLogger(__name__)

INFO_FILE_NAME = "info.txt"


@dataclass
class ParserOptions:
    """Parameter bag for one parse run.

    Locations are resolved under ``dwarf_fortress_directory``; the explicit
    path lists are parsed in addition to them.
    """
    attach_metadata_to_raws: bool = False
    skip_apply_copy_tags_from: bool = False
    skip_apply_creature_variations: bool = False
    object_types_to_parse: List[ObjectType] = field(
        default_factory=lambda: list(DEFAULT_OBJECT_TYPES)
    )
    locations_to_parse: List[RawModuleLocation] = field(default_factory=list)
    dwarf_fortress_directory: Optional[Path] = None
    legends_exports_to_parse: List[Path] = field(default_factory=list)
    raw_files_to_parse: List[Path] = field(default_factory=list)
    raw_modules_to_parse: List[Path] = field(default_factory=list)
    module_info_files_to_parse: List[Path] = field(default_factory=list)
    log_summary: bool = False
    output_path: Optional[Path] = None
    pretty_print: bool = False
    max_workers: int = 32

    def wants(self, object_type: ObjectType) -> bool:
        """Whether objects of ``object_type`` should be kept."""
        if object_type is ObjectType.SELECT_CREATURE:
            return ObjectType.CREATURE in self.object_types_to_parse
        return object_type in self.object_types_to_parse

    def needs(self, object_type: ObjectType) -> bool:
        """Whether objects of ``object_type`` must be read, even if they are not kept.

        Creature variations are needed to resolve creatures.
        """
        if object_type is ObjectType.CREATURE_VARIATION:
            return self.wants(object_type) or self.wants(ObjectType.CREATURE)
        return self.wants(object_type)

    def has_sources(self) -> bool:
        return bool(
            self.locations_to_parse
            or self.legends_exports_to_parse
            or self.raw_files_to_parse
            or self.raw_modules_to_parse
            or self.module_info_files_to_parse
        )


def validate_options(options: ParserOptions) -> ParserOptions:
    """Check that everything the options point at exists.

    Returns:
        The same options, for chaining

    Raises:
        InvalidOptionsError: With every problem found
    """
    errors: List[str] = []

    if not options.has_sources():
        errors.append("Nothing to parse: no locations, modules, raw files or exports given")

    if options.locations_to_parse:
        df_dir = options.dwarf_fortress_directory
        if df_dir is None:
            errors.append("Locations requested but no Dwarf Fortress directory set")
        elif not Path(df_dir).is_dir():
            errors.append(f"Dwarf Fortress directory does not exist: {df_dir}")

    for path in options.raw_files_to_parse:
        _check_file(path, ".txt", "Raw file", errors)
    for path in options.module_info_files_to_parse:
        _check_file(path, ".txt", "Module info file", errors)
    for path in options.legends_exports_to_parse:
        _check_file(path, ".xml", "Legends export", errors)
    for path in options.raw_modules_to_parse:
        path = Path(path)
        if not path.is_dir():
            errors.append(f"Raw module is not a directory: {path}")
        elif not (path / INFO_FILE_NAME).is_file():
            errors.append(f"Raw module has no {INFO_FILE_NAME}: {path}")

    if options.max_workers < 1:
        errors.append(f"max_workers must be at least 1, got {options.max_workers}")

    if errors:
        for error in errors:
            logger.error(error)
        raise InvalidOptionsError(errors)
    return options


def _check_file(path: Path, suffix: str, label: str, errors: List[str]) -> None:
    path = Path(path)
    if not path.is_file():
        errors.append(f"{label} does not exist: {path}")
    elif path.suffix.lower() != suffix:
        errors.append(f"{label} should be a {suffix} file: {path}")
