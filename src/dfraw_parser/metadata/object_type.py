"""
Object types declared by `[OBJECT:TYPE]` headers.
"""

from enum import Enum
from typing import Dict

from ..errors import UnexpectedObjectTypeError


class ObjectType(Enum):
    """Kinds of objects found in raw files.

    Values are the raw tokens. A handful of members (``SELECT_CREATURE``,
    ``CREATURE_CASTE``, ``MODULE``, ``UNKNOWN``) never appear after ``OBJECT:``
    and exist for objects the parser creates itself.
    """

    CREATURE = "CREATURE"
    INORGANIC = "INORGANIC"
    PLANT = "PLANT"
    ITEM = "ITEM"
    ITEM_AMMO = "ITEM_AMMO"
    ITEM_ARMOR = "ITEM_ARMOR"
    ITEM_FOOD = "ITEM_FOOD"
    ITEM_GLOVES = "ITEM_GLOVES"
    ITEM_HELM = "ITEM_HELM"
    ITEM_INSTRUMENT = "ITEM_INSTRUMENT"
    ITEM_PANTS = "ITEM_PANTS"
    ITEM_SHIELD = "ITEM_SHIELD"
    ITEM_SHOES = "ITEM_SHOES"
    ITEM_SIEGEAMMO = "ITEM_SIEGEAMMO"
    ITEM_TOOL = "ITEM_TOOL"
    ITEM_TOY = "ITEM_TOY"
    ITEM_TRAPCOMP = "ITEM_TRAPCOMP"
    ITEM_WEAPON = "ITEM_WEAPON"
    BUILDING = "BUILDING"
    BUILDING_WORKSHOP = "BUILDING_WORKSHOP"
    BUILDING_FURNACE = "BUILDING_FURNACE"
    REACTION = "REACTION"
    GRAPHICS = "GRAPHICS"
    MATERIAL_TEMPLATE = "MATERIAL_TEMPLATE"
    BODY_DETAIL_PLAN = "BODY_DETAIL_PLAN"
    BODY = "BODY"
    ENTITY = "ENTITY"
    LANGUAGE = "LANGUAGE"
    TRANSLATION = "TRANSLATION"
    TISSUE_TEMPLATE = "TISSUE_TEMPLATE"
    CREATURE_VARIATION = "CREATURE_VARIATION"
    TEXT_SET = "TEXT_SET"
    TILE_PAGE = "TILE_PAGE"
    DESCRIPTOR_COLOR = "DESCRIPTOR_COLOR"
    DESCRIPTOR_PATTERN = "DESCRIPTOR_PATTERN"
    DESCRIPTOR_SHAPE = "DESCRIPTOR_SHAPE"
    PALETTE = "PALETTE"
    MUSIC = "MUSIC"
    SOUND = "SOUND"
    INTERACTION = "INTERACTION"
    # Parser-internal kinds
    SELECT_CREATURE = "SELECT_CREATURE"
    CREATURE_CASTE = "CREATURE_CASTE"
    MODULE = "MODULE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_token(cls, token: str) -> "ObjectType":
        """Look up the object type for an ``OBJECT:`` value, or UNKNOWN."""
        return OBJECT_TOKEN_MAP.get(token.strip().upper(), cls.UNKNOWN)

    @classmethod
    def parsable_from_token(cls, token: str) -> "ObjectType":
        """Look up an object type the reader can build.

        Raises:
            UnexpectedObjectTypeError: If the type is unknown or not supported
        """
        object_type = cls.from_token(token)
        if not object_type.is_parsable:
            raise UnexpectedObjectTypeError(f"Unsupported object type: {token}")
        return object_type

    @property
    def is_parsable(self) -> bool:
        """Whether the reader builds objects for this type."""
        return self in PARSABLE_OBJECT_TYPES


_INTERNAL_TYPES = {
    ObjectType.SELECT_CREATURE,
    ObjectType.CREATURE_CASTE,
    ObjectType.MODULE,
    ObjectType.UNKNOWN,
}

OBJECT_TOKEN_MAP: Dict[str, ObjectType] = {
    object_type.value: object_type
    for object_type in ObjectType
    if object_type not in _INTERNAL_TYPES
}
"""Maps the value of an ``[OBJECT:...]`` tag to its ObjectType."""

PARSABLE_OBJECT_TYPES = frozenset(
    {
        ObjectType.CREATURE,
        ObjectType.CREATURE_VARIATION,
        ObjectType.ENTITY,
        ObjectType.PLANT,
        ObjectType.INORGANIC,
        ObjectType.MATERIAL_TEMPLATE,
        ObjectType.GRAPHICS,
        ObjectType.TILE_PAGE,
    }
)

DEFAULT_OBJECT_TYPES = [
    ObjectType.CREATURE,
    ObjectType.CREATURE_VARIATION,
    ObjectType.ENTITY,
    ObjectType.PLANT,
    ObjectType.INORGANIC,
    ObjectType.MATERIAL_TEMPLATE,
    ObjectType.GRAPHICS,
    ObjectType.TILE_PAGE,
]
