"""
Finding raw modules and raw files inside a Dwarf Fortress installation.

A raw module is any directory holding an ``info.txt``. Its raw files live in
the ``objects`` and ``graphics`` sub-directories.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import NothingToParseError, RawIOError
from .metadata import RawModuleLocation
from .raws import InfoFile
from .raws.info_file import INFO_FILE_NAME

logger = logging.getLogger(__name__)

RAW_SUB_DIRECTORIES = ("objects", "graphics")


@dataclass
class RawModule:
    """A module directory and its parsed info file."""
    path: Path
    info: InfoFile
    location: RawModuleLocation = RawModuleLocation.UNKNOWN

    def raw_files(self) -> List[Path]:
        return find_raw_files(self.path)


def find_raw_files(module_path: Path) -> List[Path]:
    """All ``*.txt`` raw files of a module, sorted for a stable parse order."""
    files: List[Path] = []
    for sub_directory in RAW_SUB_DIRECTORIES:
        directory = Path(module_path) / sub_directory
        if directory.is_dir():
            files.extend(
                path
                for path in directory.rglob("*")
                if path.is_file() and path.suffix.lower() == ".txt"
            )
    return sorted(files)


def find_module_directories(location_path: Path) -> List[Path]:
    """Directories directly under ``location_path`` that hold an ``info.txt``."""
    location_path = Path(location_path)
    if not location_path.is_dir():
        return []
    return sorted(
        path
        for path in location_path.iterdir()
        if path.is_dir() and (path / INFO_FILE_NAME).is_file()
    )


def load_module(
    module_path: Path, location: Optional[RawModuleLocation] = None
) -> Optional[RawModule]:
    """Read a module's info file. Returns None (and logs) if it cannot be read."""
    module_path = Path(module_path)
    try:
        info = InfoFile.parse(module_path / INFO_FILE_NAME)
    except (NothingToParseError, RawIOError) as e:
        logger.error(f"Skipping module {module_path}: {e}")
        return None
    if location is not None:
        info.location = location
    return RawModule(path=module_path, info=info, location=info.location)


def discover_location(df_directory: Path, location: RawModuleLocation) -> List[RawModule]:
    """Every readable module in one location of the game directory."""
    location_path = location.path_in(Path(df_directory))
    if location_path is None:
        logger.warning(f"{location.value} is not a directory location")
        return []
    if not location_path.is_dir():
        logger.warning(f"{location.value} directory not found: {location_path}")
        return []

    modules = [
        module
        for module in (
            load_module(path, location) for path in find_module_directories(location_path)
        )
        if module is not None
    ]
    logger.info(f"Found {len(modules)} modules in {location.value} ({location_path})")
    return modules
