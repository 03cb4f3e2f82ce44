"""
Raw module ``info.txt`` files.

Every raw module directory holds an ``info.txt`` naming the module and its
version. The values flow into the metadata of every object the module defines.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import NothingToParseError, RawIOError
from ..metadata import ObjectType, RawMetadata, RawModuleLocation, slugify
from ..tokens import iter_tokens
from .values import compact_dict

logger = logging.getLogger(__name__)

DF_ENCODING = "latin-1"
INFO_FILE_NAME = "info.txt"

_NON_DIGIT = re.compile(r"\D")


def _parse_version(value: str, key: str, path: Path) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"'{key}' should be an integer, was '{value}' in {path}")
    digits = _NON_DIGIT.sub("", value)
    if digits:
        return int(digits)
    logger.debug(f"Unable to parse any numbers from '{value}' for {key}")
    return 0


@dataclass
class SteamData:
    """Steam workshop metadata from an info file."""
    title: str = ""
    description: str = ""
    tags: List[str] = field(default_factory=list)
    key_value_tags: List[str] = field(default_factory=list)
    metadata: List[str] = field(default_factory=list)
    changelog: str = ""
    file_id: int = 0

    def is_empty(self) -> bool:
        return self == SteamData()

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "title": self.title,
                "description": self.description,
                "tags": self.tags,
                "key_value_tags": self.key_value_tags,
                "metadata": self.metadata,
                "changelog": self.changelog,
                "file_id": self.file_id or None,
            }
        )


@dataclass
class InfoFile:
    """Parsed ``info.txt`` of one raw module."""
    identifier: str = "unknown"
    location: RawModuleLocation = RawModuleLocation.UNKNOWN
    parent_directory: str = ""
    numeric_version: int = 0
    earliest_compatible_numeric_version: int = 0
    displayed_version: str = ""
    earliest_compatible_displayed_version: str = ""
    author: str = ""
    name: str = ""
    description: str = ""
    requires_ids: List[str] = field(default_factory=list)
    conflicts_with_ids: List[str] = field(default_factory=list)
    requires_ids_before: List[str] = field(default_factory=list)
    requires_ids_after: List[str] = field(default_factory=list)
    steam_data: SteamData = field(default_factory=SteamData)

    @property
    def object_id(self) -> str:
        return f"{self.location.value}-{ObjectType.MODULE.value}-{slugify(self.identifier)}"

    @classmethod
    def parse(cls, info_file_path: Path) -> "InfoFile":
        """Parse an ``info.txt`` file.

        Raises:
            NothingToParseError: If the file does not exist
            RawIOError: If the file cannot be read
        """
        path = Path(info_file_path)
        if not path.is_file():
            raise NothingToParseError(f"No info file at {path}")
        try:
            text = path.read_text(encoding=DF_ENCODING)
        except OSError as e:
            raise RawIOError(path, e) from e

        info = cls(
            identifier="unknown",
            location=RawModuleLocation.from_path(path),
            parent_directory=path.parent.name,
        )
        for line in text.splitlines():
            for key, value in iter_tokens(line):
                info._parse_tag(key, value, path)

        if not info.name:
            info.name = info.identifier
        if info.identifier == "unknown":
            logger.error(f"Failure parsing proper info from {path}")
        return info

    @classmethod
    def from_raw_file_path(cls, raw_file_path: Path) -> "InfoFile":
        """Parse the info file of the module a raw file belongs to.

        ``<module>/objects/creature_x.txt`` -> ``<module>/info.txt``
        """
        return cls.parse(Path(raw_file_path).parent.parent / INFO_FILE_NAME)

    def _parse_tag(self, key: str, value: str, path: Path) -> None:
        if key == "ID":
            self.identifier = value
        elif key == "NUMERIC_VERSION":
            self.numeric_version = _parse_version(value, key, path)
        elif key == "EARLIEST_COMPATIBLE_NUMERIC_VERSION":
            self.earliest_compatible_numeric_version = _parse_version(value, key, path)
        elif key == "DISPLAYED_VERSION":
            self.displayed_version = value
        elif key == "EARLIEST_COMPATIBLE_DISPLAYED_VERSION":
            self.earliest_compatible_displayed_version = value
        elif key == "AUTHOR":
            self.author = value
        elif key == "NAME":
            self.name = value
        elif key == "DESCRIPTION":
            self.description = value
        elif key == "REQUIRES_ID":
            self.requires_ids.append(value)
        elif key == "CONFLICTS_WITH_ID":
            self.conflicts_with_ids.append(value)
        elif key == "REQUIRES_ID_BEFORE_ME":
            self.requires_ids_before.append(value)
        elif key == "REQUIRES_ID_AFTER_ME":
            self.requires_ids_after.append(value)
        elif key == "STEAM_TITLE":
            self.steam_data.title = value
        elif key == "STEAM_DESCRIPTION":
            self.steam_data.description = value
        elif key == "STEAM_TAG":
            self.steam_data.tags.append(value)
        elif key == "STEAM_KEY_VALUE_TAG":
            self.steam_data.key_value_tags.append(value)
        elif key == "STEAM_METADATA":
            self.steam_data.metadata.append(value)
        elif key == "STEAM_CHANGELOG":
            self.steam_data.changelog = value
        elif key == "STEAM_FILE_ID":
            self.steam_data.file_id = _parse_version(value, key, path)

    def metadata_for(
        self,
        raw_file_path: Path,
        raw_identifier: str = "",
        object_type: ObjectType = ObjectType.UNKNOWN,
        attach_metadata: bool = False,
        location: Optional[RawModuleLocation] = None,
    ) -> RawMetadata:
        """Metadata for a raw file belonging to this module."""
        return RawMetadata.for_file(
            raw_file_path,
            raw_identifier=raw_identifier,
            object_type=object_type,
            module_id=self.identifier,
            module_name=self.name,
            module_version=str(self.numeric_version),
            module_displayed_version=self.displayed_version,
            location=location or self.location,
            attach_metadata=attach_metadata,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict."""
        data = {
            "identifier": self.identifier,
            "object_id": self.object_id,
            "location": self.location.value,
            "parent_directory": self.parent_directory,
            "numeric_version": self.numeric_version,
            "earliest_compatible_numeric_version": self.earliest_compatible_numeric_version,
            "displayed_version": self.displayed_version,
            "earliest_compatible_displayed_version": self.earliest_compatible_displayed_version,
            "author": self.author,
            "name": self.name,
            "description": self.description,
            "requires_ids": self.requires_ids,
            "conflicts_with_ids": self.conflicts_with_ids,
            "requires_ids_before": self.requires_ids_before,
            "requires_ids_after": self.requires_ids_after,
            "steam_data": None if self.steam_data.is_empty() else self.steam_data.to_dict(),
        }
        return compact_dict(data)
