"""
Material template raw model.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict

from ..metadata import ObjectType
from .base import RawObject
from .material import Material


@dataclass
class MaterialTemplate(RawObject):
    """A named material others can start from with ``USE_MATERIAL_TEMPLATE``."""
    object_type: ClassVar[ObjectType] = ObjectType.MATERIAL_TEMPLATE

    material: Material = field(default_factory=Material)

    def parse_tag(self, key: str, value: str) -> None:
        if not self.material.parse_tag(key, value):
            self._logger().debug(
                f"Material template {self.identifier}: unknown tag {key} with value '{value}'"
            )

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        material = self.material.to_dict()
        if material:
            data["material"] = material
        return data
