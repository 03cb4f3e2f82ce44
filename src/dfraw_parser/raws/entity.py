"""
Entity (civilization) raw model.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List

from ..metadata import ObjectType
from ..tokens import ENTITY_TOKENS, EntityTag, join_token
from .base import RawObject, render_tags
from .values import TagEntry, compact_dict, parse_int


@dataclass
class EntityPosition:
    """A position (king, mayor, ...) declared with ``POSITION``."""
    identifier: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"identifier": self.identifier, "tags": list(self.tags)}


@dataclass
class Entity(RawObject):
    """A civilization definition."""
    object_type: ClassVar[ObjectType] = ObjectType.ENTITY

    tags: List[TagEntry] = field(default_factory=list)
    creatures: List[str] = field(default_factory=list)
    translation: str = ""
    biome_support: Dict[str, int] = field(default_factory=dict)
    max_pop_number: int = 0
    max_site_pop_number: int = 0
    max_starting_civ_number: int = 0
    positions: List[EntityPosition] = field(default_factory=list)

    def parse_tag(self, key: str, value: str) -> None:
        if key == "POSITION":
            self.positions.append(EntityPosition(identifier=value))
            return

        token = ENTITY_TOKENS.get(key)
        if token is None:
            if self.positions:
                self.positions[-1].tags.append(join_token(key, value))
            else:
                self._logger().debug(
                    f"Entity {self.identifier}: unknown tag {key} with value '{value}'"
                )
            return

        self.tags.append(TagEntry(token, value))
        if token is EntityTag.CREATURE:
            self.creatures.append(value)
        elif token is EntityTag.TRANSLATION:
            self.translation = value
        elif token is EntityTag.BIOME_SUPPORT:
            biome, _, frequency = value.partition(":")
            self.biome_support[biome] = parse_int(frequency)
        elif token is EntityTag.MAX_POP_NUMBER:
            self.max_pop_number = parse_int(value)
        elif token is EntityTag.MAX_SITE_POP_NUMBER:
            self.max_site_pop_number = parse_int(value)
        elif token is EntityTag.MAX_STARTING_CIV_NUMBER:
            self.max_starting_civ_number = parse_int(value)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            compact_dict(
                {
                    "tags": render_tags(self.tags),
                    "creatures": self.creatures,
                    "translation": self.translation,
                    "biome_support": self.biome_support,
                    "max_pop_number": self.max_pop_number or None,
                    "max_site_pop_number": self.max_site_pop_number or None,
                    "max_starting_civ_number": self.max_starting_civ_number or None,
                    "positions": [position.to_dict() for position in self.positions],
                }
            )
        )
        return data
