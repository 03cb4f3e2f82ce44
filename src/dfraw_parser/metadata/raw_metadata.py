"""
Metadata attached to every parsed raw object.
"""

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Tuple

from .location import RawModuleLocation
from .object_id import slugify
from .object_type import ObjectType

_NON_DIGIT = re.compile(r"\D")


@dataclass
class RawMetadata:
    """Where an object came from.

    The metadata is shared by all objects read from the same file; it is only
    written to the output when ``hidden`` is False.
    """
    module_id: str = "unknown"
    module_name: str = ""
    module_version: str = "0"
    module_displayed_version: str = ""
    raw_file_path: str = ""
    raw_identifier: str = ""
    object_type: ObjectType = ObjectType.UNKNOWN
    module_location: RawModuleLocation = RawModuleLocation.UNKNOWN
    hidden: bool = True

    @property
    def module_identifier(self) -> str:
        """Module part of object ids: the slugged module id plus its numeric version."""
        return f"{slugify(self.module_id) or 'unknown'}-{self.module_version}"

    @property
    def numeric_version(self) -> int:
        """Module version as an integer (digits only, 0 when there are none)."""
        digits = _NON_DIGIT.sub("", self.module_version)
        return int(digits) if digits else 0

    def version_sort_key(self) -> Tuple[int, str]:
        """Sort key ordering modules by version, numerically first."""
        return (self.numeric_version, self.module_version)

    def with_object_type(self, object_type: ObjectType) -> "RawMetadata":
        """Copy of this metadata for an object of another type."""
        return replace(self, object_type=object_type)

    @classmethod
    def for_file(
        cls,
        path: Path,
        raw_identifier: str = "",
        object_type: ObjectType = ObjectType.UNKNOWN,
        module_id: str = "unknown",
        module_name: str = "",
        module_version: str = "0",
        module_displayed_version: str = "",
        location: RawModuleLocation = RawModuleLocation.UNKNOWN,
        attach_metadata: bool = False,
    ) -> "RawMetadata":
        """Create metadata for a raw file."""
        return cls(
            module_id=module_id,
            module_name=module_name or module_id,
            module_version=module_version,
            module_displayed_version=module_displayed_version,
            raw_file_path=str(path),
            raw_identifier=raw_identifier,
            object_type=object_type,
            module_location=location,
            hidden=not attach_metadata,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return {
            "module_id": self.module_id,
            "module_name": self.module_name,
            "module_version": self.module_version,
            "module_displayed_version": self.module_displayed_version,
            "raw_file_path": self.raw_file_path,
            "raw_identifier": self.raw_identifier,
            "object_type": self.object_type.value,
            "module_location": self.module_location.value,
        }
