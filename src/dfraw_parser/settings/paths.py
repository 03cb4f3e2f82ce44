"""
Game directory and output locations.
"""

from pathlib import Path
from typing import Optional

from .section import SettingsSection


class PathSettings(SettingsSection):
    """Where the game lives and where parsed JSON goes by default."""

    prefix = "paths"

    @property
    def df_path(self) -> Optional[Path]:
        """Dwarf Fortress game directory."""
        return self._get_path("dwarf_fortress")

    @df_path.setter
    def df_path(self, value: Optional[Path]) -> None:
        self._set_path("dwarf_fortress", value)

    @property
    def vanilla_path(self) -> Optional[Path]:
        """``data/vanilla`` under the game directory, if one is set."""
        df_path = self.df_path
        return df_path / "data" / "vanilla" if df_path else None

    @property
    def output_path(self) -> Optional[Path]:
        """Default JSON output file; stdout when unset."""
        return self._get_path("output")

    @output_path.setter
    def output_path(self, value: Optional[Path]) -> None:
        self._set_path("output", value)
