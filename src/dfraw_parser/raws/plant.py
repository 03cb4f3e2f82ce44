"""
Plant raw model.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from ..metadata import ObjectType
from ..tokens import PLANT_TOKENS, PlantTag
from .base import RawObject, render_tags
from .material import Material
from .values import Name, SingPlurName, TagEntry, compact_dict, parse_int, parse_min_max

_GROWTH_TOKENS = {
    PlantTag.GROWTH_NAME,
    PlantTag.GROWTH_ITEM,
    PlantTag.GROWTH_HOST_TILE,
    PlantTag.GROWTH_TISSUE_LAYER,
    PlantTag.GROWTH_TIMING,
    PlantTag.GROWTH_PRINT,
    PlantTag.GROWTH_DENSITY,
    PlantTag.GROWTH_TRUNK_HEIGHT_PERC,
    PlantTag.GROWTH_DROPS_OFF,
    PlantTag.GROWTH_DROPS_OFF_NO_CLOUD,
    PlantTag.GROWTH_HAS_SEED,
}


@dataclass
class PlantGrowth:
    """A growth (leaves, flowers, fruit) declared with ``GROWTH``."""
    identifier: str = ""
    name: SingPlurName = field(default_factory=SingPlurName)
    item: str = ""
    timing: List[int] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "identifier": self.identifier,
                "name": None if self.name.is_empty() else self.name.to_dict(),
                "item": self.item,
                "timing": self.timing,
                "tags": self.tags,
            }
        )


@dataclass
class Plant(RawObject):
    """A plant, tree, shrub or grass."""
    object_type: ClassVar[ObjectType] = ObjectType.PLANT

    name: Name = field(default_factory=Name)
    tags: List[TagEntry] = field(default_factory=list)
    pref_strings: List[str] = field(default_factory=list)
    biomes: List[str] = field(default_factory=list)
    frequency: int = 50
    cluster_size: int = 0
    underground_depth: List[int] = field(default_factory=list)
    value: Optional[int] = None
    growths: List[PlantGrowth] = field(default_factory=list)
    materials: List[Material] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name.singular or self.identifier

    def parse_tag(self, key: str, value: str) -> None:
        token = PLANT_TOKENS.get(key)
        if token is None:
            if not self.materials or not self.materials[-1].parse_tag(key, value):
                self._logger().debug(
                    f"Plant {self.identifier}: unknown tag {key} with value '{value}'"
                )
            return

        if token in _GROWTH_TOKENS and self.growths:
            self._parse_growth_tag(token, value)
            return
        if token in (PlantTag.STATE_NAME, PlantTag.STATE_ADJ, PlantTag.STATE_NAME_ADJ):
            if self.materials:
                self.materials[-1].parse_tag(key, value)
            return

        self.tags.append(TagEntry(token, value))
        if token is PlantTag.ALL_NAMES:
            self.name = Name(singular=value, plural=value, adjective=value)
        elif token is PlantTag.NAME:
            self.name.singular = value
        elif token is PlantTag.NAME_PLURAL:
            self.name.plural = value
        elif token is PlantTag.ADJ:
            self.name.adjective = value
        elif token is PlantTag.PREFSTRING:
            self.pref_strings.append(value)
        elif token is PlantTag.BIOME:
            self.biomes.append(value)
        elif token is PlantTag.FREQUENCY:
            self.frequency = parse_int(value, 50)
        elif token is PlantTag.CLUSTERSIZE:
            self.cluster_size = parse_int(value)
        elif token is PlantTag.UNDERGROUND_DEPTH:
            self.underground_depth = parse_min_max(value)
        elif token is PlantTag.MATERIAL_VALUE:
            self.value = parse_int(value)
        elif token is PlantTag.GROWTH:
            self.growths.append(PlantGrowth(identifier=value))
        elif token in (PlantTag.USE_MATERIAL_TEMPLATE, PlantTag.BASIC_MAT, PlantTag.USE_MATERIAL):
            identifier, _, template = value.partition(":")
            self.materials.append(Material(identifier=identifier, template=template))

    def _parse_growth_tag(self, token: PlantTag, value: str) -> None:
        growth = self.growths[-1]
        if token is PlantTag.GROWTH_NAME:
            growth.name = SingPlurName.from_value(value)
        elif token is PlantTag.GROWTH_ITEM:
            growth.item = value
        elif token is PlantTag.GROWTH_TIMING:
            growth.timing = parse_min_max(value)
        else:
            growth.tags.append(f"{token.value}:{value}" if value else token.value)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            compact_dict(
                {
                    "name": None if self.name.is_empty() else self.name.to_dict(),
                    "tags": render_tags(self.tags),
                    "pref_strings": self.pref_strings,
                    "biomes": self.biomes,
                    "frequency": self.frequency,
                    "cluster_size": self.cluster_size,
                    "underground_depth": self.underground_depth,
                    "value": self.value,
                    "growths": [growth.to_dict() for growth in self.growths],
                    "materials": [material.to_dict() for material in self.materials],
                }
            )
        )
        return data
