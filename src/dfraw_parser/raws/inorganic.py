"""
Inorganic raw model (stones, metals, gems, soils).
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List

from ..metadata import ObjectType
from ..tokens import (
    ENVIRONMENT_CLASS_TOKENS,
    INCLUSION_TYPE_TOKENS,
    INORGANIC_TOKENS,
    InorganicTag,
)
from .base import RawObject, render_tags
from .material import Material
from .values import TagEntry, compact_dict, parse_int


@dataclass
class Environment:
    """Where an inorganic occurs: ``ENVIRONMENT:class:inclusion:frequency``."""
    environment: str = ""
    inclusion_type: str = ""
    frequency: int = 0

    @classmethod
    def from_value(cls, value: str) -> "Environment":
        parts = value.split(":")
        return cls(
            environment=parts[0] if parts else "",
            inclusion_type=parts[1] if len(parts) > 1 else "",
            frequency=parse_int(parts[2]) if len(parts) > 2 else 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(vars(self).copy())


@dataclass
class Inorganic(RawObject):
    """An inorganic material definition."""
    object_type: ClassVar[ObjectType] = ObjectType.INORGANIC

    tags: List[TagEntry] = field(default_factory=list)
    environments: List[Environment] = field(default_factory=list)
    specific_environments: List[Environment] = field(default_factory=list)
    metal_ores: Dict[str, int] = field(default_factory=dict)
    thread_metals: Dict[str, int] = field(default_factory=dict)
    material: Material = field(default_factory=Material)

    def parse_tag(self, key: str, value: str) -> None:
        token = INORGANIC_TOKENS.get(key)
        if token is None:
            if not self.material.parse_tag(key, value):
                self._logger().debug(
                    f"Inorganic {self.identifier}: unknown tag {key} with value '{value}'"
                )
            return

        self.tags.append(TagEntry(token, value))
        if token is InorganicTag.ENVIRONMENT:
            environment = Environment.from_value(value)
            self._check_environment(environment, value)
            self.environments.append(environment)
        elif token is InorganicTag.ENVIRONMENT_SPEC:
            environment = Environment.from_value(value)
            self._check_environment(environment, value, check_class=False)
            self.specific_environments.append(environment)
        elif token is InorganicTag.METAL_ORE:
            metal, _, chance = value.partition(":")
            self.metal_ores[metal] = parse_int(chance)
        elif token is InorganicTag.THREAD_METAL:
            metal, _, chance = value.partition(":")
            self.thread_metals[metal] = parse_int(chance)
        elif token is InorganicTag.USE_MATERIAL_TEMPLATE:
            self.material.template = value

    def _check_environment(
        self, environment: Environment, value: str, check_class: bool = True
    ) -> None:
        if check_class and environment.environment not in ENVIRONMENT_CLASS_TOKENS:
            self._logger().debug(f"Inorganic {self.identifier}: unknown environment '{value}'")
        if environment.inclusion_type not in INCLUSION_TYPE_TOKENS:
            self._logger().debug(f"Inorganic {self.identifier}: unknown inclusion '{value}'")

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            compact_dict(
                {
                    "tags": render_tags(self.tags),
                    "environments": [env.to_dict() for env in self.environments],
                    "specific_environments": [
                        env.to_dict() for env in self.specific_environments
                    ],
                    "metal_ores": self.metal_ores,
                    "thread_metals": self.thread_metals,
                    "material": self.material.to_dict(),
                }
            )
        )
        return data
