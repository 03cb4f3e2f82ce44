"""
Modification instructions captured while reading an object body.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List


class ModificationKind(Enum):
    COPY_TAGS_FROM = "CopyTagsFrom"
    APPLY_CREATURE_VARIATION = "ApplyCreatureVariation"
    ADD_TO_BEGINNING = "AddToBeginning"
    ADD_TO_ENDING = "AddToEnding"
    ADD_BEFORE_TAG = "AddBeforeTag"
    MAIN_RAW_BODY = "MainRawBody"


LINE_KINDS = frozenset(
    {
        ModificationKind.ADD_TO_BEGINNING,
        ModificationKind.ADD_TO_ENDING,
        ModificationKind.ADD_BEFORE_TAG,
        ModificationKind.MAIN_RAW_BODY,
    }
)
"""Kinds that carry raw lines and merge with an adjacent modification of the same kind."""


@dataclass
class Modification:
    """Base class for modification instructions."""
    kind: ClassVar[ModificationKind]

    def can_merge(self, other: "Modification") -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        data = dict(vars(self))
        data["kind"] = self.kind.value
        return data


@dataclass
class CopyTagsFrom(Modification):
    """``COPY_TAGS_FROM:identifier``."""
    kind: ClassVar[ModificationKind] = ModificationKind.COPY_TAGS_FROM
    identifier: str = ""


@dataclass
class ApplyCreatureVariation(Modification):
    """``APPLY_CREATURE_VARIATION:identifier[:args...]``; ``identifier`` keeps the arguments."""
    kind: ClassVar[ModificationKind] = ModificationKind.APPLY_CREATURE_VARIATION
    identifier: str = ""


@dataclass
class LineModification(Modification):
    """A modification carrying raw lines (``KEY:value`` without brackets)."""
    raws: List[str] = field(default_factory=list)

    def add_raw(self, raw: str) -> None:
        self.raws.append(raw)

    def can_merge(self, other: Modification) -> bool:
        return other.kind is self.kind

    def new_empty(self) -> "LineModification":
        """Empty modification of the same kind (and tag), used as an accumulation target."""
        return type(self)()


@dataclass
class AddToBeginning(LineModification):
    """Lines after ``GO_TO_START``."""
    kind: ClassVar[ModificationKind] = ModificationKind.ADD_TO_BEGINNING


@dataclass
class AddToEnding(LineModification):
    """Lines after ``GO_TO_END``."""
    kind: ClassVar[ModificationKind] = ModificationKind.ADD_TO_ENDING


@dataclass
class MainRawBody(LineModification):
    """Ordinary lines of the object body."""
    kind: ClassVar[ModificationKind] = ModificationKind.MAIN_RAW_BODY


@dataclass
class AddBeforeTag(LineModification):
    """Lines after ``GO_TO_TAG:tag``, to be inserted before the first line starting with ``tag``."""
    kind: ClassVar[ModificationKind] = ModificationKind.ADD_BEFORE_TAG
    tag: str = ""

    def can_merge(self, other: Modification) -> bool:
        return other.kind is self.kind and getattr(other, "tag", None) == self.tag

    def new_empty(self) -> "LineModification":
        return AddBeforeTag(tag=self.tag)
