"""
Raw object models.

Every model derives from ``RawObject`` and is discriminated by its
``object_type`` class attribute.
"""

from .base import RawObject, TagTarget
from .caste import Caste
from .creature import ALL_CASTES, Creature
from .creature_variation import CreatureVariation, split_variation_reference
from .entity import Entity, EntityPosition
from .graphics import Graphic, SpriteGraphic, SpriteLayer, TilePage
from .info_file import InfoFile, SteamData
from .inorganic import Environment, Inorganic
from .material import Material
from .material_template import MaterialTemplate
from .plant import Plant, PlantGrowth
from .select_creature import SelectCreature
from .values import (
    BodySize,
    Gait,
    Milkable,
    Name,
    SingPlurName,
    TagEntry,
    Tile,
)
from .variation_rules import (
    AddTag,
    ConditionalAddTag,
    ConditionalConvertTag,
    ConditionalRemoveTag,
    ConvertTag,
    NewTag,
    RemoveTag,
    Rule,
    UnknownRule,
    substitute_args,
)

__all__ = [
    "ALL_CASTES",
    "AddTag",
    "BodySize",
    "Caste",
    "ConditionalAddTag",
    "ConditionalConvertTag",
    "ConditionalRemoveTag",
    "ConvertTag",
    "Creature",
    "CreatureVariation",
    "Entity",
    "EntityPosition",
    "Environment",
    "Gait",
    "Graphic",
    "InfoFile",
    "Inorganic",
    "Material",
    "MaterialTemplate",
    "Milkable",
    "Name",
    "NewTag",
    "Plant",
    "PlantGrowth",
    "RawObject",
    "RemoveTag",
    "Rule",
    "SelectCreature",
    "SingPlurName",
    "SpriteGraphic",
    "SpriteLayer",
    "SteamData",
    "TagEntry",
    "TagTarget",
    "Tile",
    "TilePage",
    "UnknownRule",
    "split_variation_reference",
    "substitute_args",
]
