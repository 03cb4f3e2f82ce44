"""
Raw module locations inside a Dwarf Fortress installation.
"""

from enum import Enum
from pathlib import Path
from typing import Optional


class RawModuleLocation(Enum):
    """Where a raw module was found."""

    VANILLA = "Vanilla"
    INSTALLED_MODS = "InstalledMods"
    MODS = "Mods"
    LEGENDS_EXPORT = "LegendsExport"
    UNKNOWN = "Unknown"

    @property
    def relative_path(self) -> Optional[Path]:
        """Path of this location relative to the game directory."""
        if self is RawModuleLocation.VANILLA:
            return Path("data") / "vanilla"
        if self is RawModuleLocation.INSTALLED_MODS:
            return Path("data") / "installed_mods"
        if self is RawModuleLocation.MODS:
            return Path("mods")
        return None

    def path_in(self, df_directory: Path) -> Optional[Path]:
        """Absolute path of this location inside ``df_directory``."""
        relative = self.relative_path
        return df_directory / relative if relative else None

    @classmethod
    def from_path(cls, path: Path) -> "RawModuleLocation":
        """Guess the location from any path inside a game directory."""
        parts = [part.lower() for part in Path(path).parts]
        for index, part in enumerate(parts):
            if part == "data" and index + 1 < len(parts):
                if parts[index + 1] == "vanilla":
                    return cls.VANILLA
                if parts[index + 1] == "installed_mods":
                    return cls.INSTALLED_MODS
            if part == "mods":
                return cls.MODS
        return cls.UNKNOWN

    @classmethod
    def from_name(cls, name: str) -> "RawModuleLocation":
        """Parse a location from its name (case and separator insensitive)."""
        wanted = name.replace("_", "").replace("-", "").lower()
        for location in cls:
            if location.value.lower() == wanted:
                return location
        raise ValueError(f"Unknown raw module location: {name}")
