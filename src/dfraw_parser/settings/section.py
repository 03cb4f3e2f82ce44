"""
Base class for one group of keys inside a settings profile.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsSection:
    """Typed access to the keys under ``<prefix>/`` of the current profile.

    QSettings hands values back as strings from the INI backend and as native
    types from the registry or plist backends; the getters accept both.
    Every write is synced immediately so that separate processes sharing a
    profile see the change.
    """

    prefix = ""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _key(self, name: str) -> str:
        return f"{self.prefix}/{name}" if self.prefix else name

    def _set(self, name: str, value: Any) -> None:
        self.settings.setValue(self._key(name), value)
        self.settings.sync()

    def _get_str(self, name: str, default: str = "") -> str:
        value = self.settings.value(self._key(name), default)
        return str(value) if value is not None else default

    def _get_bool(self, name: str, default: bool = False) -> bool:
        value = self.settings.value(self._key(name), default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_list(self, name: str, default: Optional[List[str]] = None) -> List[str]:
        if default is None:
            default = []
        value = self.settings.value(self._key(name), default)
        # Single-element lists come back as plain strings from the INI backend
        if isinstance(value, str):
            return [value] if value else []
        if isinstance(value, list):
            return [str(item) for item in cast(List[object], value) if item is not None]
        return default

    def _get_path(self, name: str) -> Optional[Path]:
        text = self._get_str(name)
        return Path(text) if text else None

    def _set_path(self, name: str, value: Optional[Path]) -> None:
        self._set(name, str(value) if value else "")
