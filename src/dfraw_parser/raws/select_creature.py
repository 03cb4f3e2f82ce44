"""
SELECT_CREATURE fragments.

A fragment names an existing creature and carries raw lines that should be
replayed onto it once the whole corpus has been read.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List

from ..metadata import ObjectType
from ..tokens import join_token
from .base import RawObject


@dataclass
class SelectCreature(RawObject):
    """Raw lines to be merged into the creature named by ``identifier``."""
    object_type: ClassVar[ObjectType] = ObjectType.SELECT_CREATURE

    tags: List[str] = field(default_factory=list)

    def parse_tag(self, key: str, value: str) -> None:
        self.tags.append(join_token(key, value))

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["tags"] = list(self.tags)
        return data
