"""
Graphics raw models: sprite graphics and tile pages.

Sprite lines look like ``[CONDITION:TILE_PAGE:x:y:COLOR:SECONDARY]`` or, for
large images, ``[CONDITION:TILE_PAGE:LARGE_IMAGE:x1:y1:x2:y2:COLOR:SECONDARY]``.
Layered creature graphics group ``LAYER`` lines under a ``LAYER_SET``; any
``CONDITION_*`` token applies to the most recent layer.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from ..metadata import ObjectType, RawMetadata
from ..tokens import (
    LAYER_TOKENS,
    TILE_PAGE_TOKENS,
    GraphicTypeTag,
    LayerTag,
    TilePageTag,
    join_token,
)
from .base import RawObject
from .values import compact_dict, parse_int


@dataclass
class SpriteGraphic:
    """One sprite reference on a tile page."""
    condition: str = ""
    tile_page_id: str = ""
    offset: List[int] = field(default_factory=lambda: [0, 0])
    offset2: Optional[List[int]] = None
    color: str = ""
    secondary_condition: str = ""

    @classmethod
    def from_tokens(cls, condition: str, value: str) -> Optional["SpriteGraphic"]:
        parts = value.split(":")
        if len(parts) < 3:
            return None
        sprite = cls(condition=condition, tile_page_id=parts[0])
        rest = parts[1:]
        if rest[0] == "LARGE_IMAGE":
            if len(rest) < 5:
                return None
            sprite.offset = [parse_int(rest[1]), parse_int(rest[2])]
            sprite.offset2 = [parse_int(rest[3]), parse_int(rest[4])]
            rest = rest[5:]
        else:
            sprite.offset = [parse_int(rest[0]), parse_int(rest[1])]
            rest = rest[2:]
        sprite.color = rest[0] if rest else ""
        sprite.secondary_condition = rest[1] if len(rest) > 1 else ""
        return sprite

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "condition": self.condition,
                "tile_page_id": self.tile_page_id,
                "offset": self.offset,
                "offset2": self.offset2,
                "color": self.color,
                "secondary_condition": self.secondary_condition,
            }
        )


@dataclass
class SpriteLayer:
    """A named layer inside a layer set."""
    layer_set: str = ""
    name: str = ""
    sprite: Optional[SpriteGraphic] = None
    conditions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "layer_set": self.layer_set,
                "name": self.name,
                "sprite": self.sprite.to_dict() if self.sprite else None,
                "conditions": self.conditions,
            }
        )


@dataclass
class Graphic(RawObject):
    """Sprite graphics for a creature, caste, tile or plant."""
    object_type: ClassVar[ObjectType] = ObjectType.GRAPHICS

    graphic_type: GraphicTypeTag = GraphicTypeTag.UNKNOWN
    caste_identifier: str = ""
    sprites: List[SpriteGraphic] = field(default_factory=list)
    layers: List[SpriteLayer] = field(default_factory=list)
    current_layer_set: str = field(default="", repr=False, compare=False)

    @classmethod
    def for_type(
        cls, graphic_type: GraphicTypeTag, value: str, metadata: RawMetadata
    ) -> "Graphic":
        """Create a graphic from its opening token, e.g. ``CREATURE_CASTE_GRAPHICS:DWARF:MALE``."""
        identifier, _, caste = value.partition(":")
        graphic = cls.new(identifier, metadata)
        graphic.graphic_type = graphic_type
        graphic.caste_identifier = caste
        if caste:
            graphic.object_id = f"{graphic.object_id}-{caste.lower()}"
        return graphic

    def parse_tag(self, key: str, value: str) -> None:
        layer_token = LAYER_TOKENS.get(key)
        if layer_token is LayerTag.LAYER_SET:
            self.current_layer_set = value
            return
        if layer_token is LayerTag.LAYER:
            name, _, sprite_value = value.partition(":")
            self.layers.append(
                SpriteLayer(
                    layer_set=self.current_layer_set,
                    name=name,
                    sprite=SpriteGraphic.from_tokens(name, sprite_value),
                )
            )
            return
        if layer_token is not None:
            return
        if key.startswith("CONDITION_") or key.startswith("SHUT_OFF_") or key.startswith("USE_"):
            if self.layers:
                self.layers[-1].conditions.append(join_token(key, value))
            return

        sprite = SpriteGraphic.from_tokens(key, value)
        if sprite is None:
            self._logger().debug(
                f"Graphics {self.identifier}: unknown tag {key} with value '{value}'"
            )
            return
        self.sprites.append(sprite)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            compact_dict(
                {
                    "graphic_type": self.graphic_type.value,
                    "caste_identifier": self.caste_identifier,
                    "sprites": [sprite.to_dict() for sprite in self.sprites],
                    "layers": [layer.to_dict() for layer in self.layers],
                }
            )
        )
        return data


@dataclass
class TilePage(RawObject):
    """An image file sliced into tiles."""
    object_type: ClassVar[ObjectType] = ObjectType.TILE_PAGE

    file: str = ""
    tile_dim: List[int] = field(default_factory=list)
    page_dim: List[int] = field(default_factory=list)

    def parse_tag(self, key: str, value: str) -> None:
        token = TILE_PAGE_TOKENS.get(key)
        if token is TilePageTag.FILE:
            self.file = value
        elif token is TilePageTag.TILE_DIM:
            self.tile_dim = _dimensions(value)
        elif token in (TilePageTag.PAGE_DIM_PIXELS, TilePageTag.PAGE_DIM):
            self.page_dim = _dimensions(value)
        else:
            self._logger().debug(
                f"Tile page {self.identifier}: unknown tag {key} with value '{value}'"
            )

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            compact_dict(
                {"file": self.file, "tile_dim": self.tile_dim, "page_dim": self.page_dim}
            )
        )
        return data


def _dimensions(value: str) -> List[int]:
    x, _, y = value.partition(":")
    return [parse_int(x), parse_int(y)]
