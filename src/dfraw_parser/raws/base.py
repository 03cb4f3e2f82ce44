"""
Common base for every parsed raw object.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Protocol, Type, TypeVar

from ..metadata import ObjectType, RawMetadata, build_object_id
from .values import TagEntry

RawType = TypeVar("RawType", bound="RawObject")


@dataclass
class RawObject:
    """A single object definition from a raw file.

    Subclasses set ``object_type`` and implement ``parse_tag``. The
    ``object_type`` class attribute is the discriminator used everywhere the
    parser needs to know what kind of object it holds.
    """
    object_type: ClassVar[ObjectType] = ObjectType.UNKNOWN

    identifier: str = ""
    metadata: RawMetadata = field(default_factory=RawMetadata)
    object_id: str = ""

    @classmethod
    def new(cls: Type[RawType], identifier: str, metadata: RawMetadata) -> RawType:
        """Create an empty object with its metadata and object id filled in."""
        obj = cls(
            identifier=identifier,
            metadata=metadata.with_object_type(cls.object_type),
        )
        obj.refresh_object_id()
        return obj

    def refresh_object_id(self) -> None:
        """Recompute ``object_id`` from the metadata and identifier."""
        self.object_id = build_object_id(
            self.metadata.module_identifier, self.object_type, self.identifier
        )

    def parse_tag(self, key: str, value: str) -> None:
        """Accept one ``[KEY:value]`` token read inside this object."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        """An object without an identifier carries nothing worth keeping."""
        return not self.identifier

    @property
    def display_name(self) -> str:
        """Human readable name; defaults to the identifier."""
        return self.identifier

    def _logger(self) -> logging.Logger:
        return logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def _base_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.object_type.value,
            "identifier": self.identifier,
            "object_id": self.object_id,
        }
        if not self.metadata.hidden:
            data["metadata"] = self.metadata.to_dict()
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return self._base_dict()


class TagTarget(Protocol):
    """Operations creature variation rules perform on a creature."""

    def select_caste(self, identifier: str) -> Any: ...

    def add_tag(self, key: str) -> None: ...

    def add_tag_and_value(self, key: str, value: str) -> None: ...

    def remove_tag(self, key: str) -> bool: ...

    def remove_tag_and_value(self, key: str, value: str) -> bool: ...

    def add_tag_for_caste(self, key: str, caste: str) -> None: ...

    def add_tag_and_value_for_caste(self, key: str, value: str, caste: str) -> None: ...

    def remove_tag_for_caste(self, key: str, caste: str) -> bool: ...

    def remove_tag_and_value_for_caste(self, key: str, value: str, caste: str) -> bool: ...


def render_tags(tags: List[TagEntry]) -> List[str]:
    """Render tag entries for output."""
    return [tag.render() for tag in tags]


def remove_entries(
    tags: List[TagEntry], key: str, value: Optional[str] = None
) -> bool:
    """Remove entries by key (and exact value when given). Returns True if any were removed."""
    kept = [
        tag
        for tag in tags
        if not (tag.key == key and (value is None or tag.value == value))
    ]
    removed = len(kept) != len(tags)
    tags[:] = kept
    return removed
