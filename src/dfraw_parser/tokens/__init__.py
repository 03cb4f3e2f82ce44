"""
Tokenizer and static token tables.

The tables are immutable module-level data mapping raw keys to enum members.
Unknown keys are never fatal; callers log them and move on.
"""

from .caste import CASTE_TOKEN_ALIASES, CASTE_TOKENS, CasteTag
from .creature import CASTE_SELECTION_TOKENS, CREATURE_TOKENS, CreatureTag
from .creature_variation import CREATURE_VARIATION_TOKENS, CreatureVariationTag
from .entity import ENTITY_TOKENS, EntityTag
from .graphics import (
    GRAPHIC_TYPE_TOKENS,
    LAYER_TOKENS,
    TILE_PAGE_TOKENS,
    GraphicTypeTag,
    LayerTag,
    TilePageTag,
)
from .inorganic import (
    ENVIRONMENT_CLASS_TOKENS,
    INCLUSION_TYPE_TOKENS,
    INORGANIC_TOKENS,
    EnvironmentClass,
    InclusionType,
    InorganicTag,
)
from .material import MATERIAL_TOKENS, MaterialTag
from .plant import PLANT_TOKENS, PlantTag
from .table import build_token_map, lookup
from .tokenizer import (
    RAW_TOKEN_RE,
    VARIATION_ARGUMENT_RE,
    Token,
    iter_tokens,
    join_token,
    split_raw_line,
    tokenize_line,
)

__all__ = [
    "CASTE_SELECTION_TOKENS",
    "CASTE_TOKEN_ALIASES",
    "CASTE_TOKENS",
    "CREATURE_TOKENS",
    "CREATURE_VARIATION_TOKENS",
    "ENTITY_TOKENS",
    "ENVIRONMENT_CLASS_TOKENS",
    "GRAPHIC_TYPE_TOKENS",
    "INCLUSION_TYPE_TOKENS",
    "INORGANIC_TOKENS",
    "LAYER_TOKENS",
    "MATERIAL_TOKENS",
    "PLANT_TOKENS",
    "RAW_TOKEN_RE",
    "TILE_PAGE_TOKENS",
    "VARIATION_ARGUMENT_RE",
    "CasteTag",
    "CreatureTag",
    "CreatureVariationTag",
    "EntityTag",
    "EnvironmentClass",
    "GraphicTypeTag",
    "InclusionType",
    "InorganicTag",
    "LayerTag",
    "MaterialTag",
    "PlantTag",
    "TilePageTag",
    "Token",
    "build_token_map",
    "iter_tokens",
    "join_token",
    "lookup",
    "split_raw_line",
    "tokenize_line",
]
