"""
Graphics and tile page tokens.
"""

from enum import Enum

from .table import build_token_map


class GraphicTypeTag(Enum):
    """Tokens that open a graphics object."""

    CREATURE_GRAPHICS = "CREATURE_GRAPHICS"
    CREATURE_CASTE_GRAPHICS = "CREATURE_CASTE_GRAPHICS"
    TILE_GRAPHICS = "TILE_GRAPHICS"
    PLANT_GRAPHICS = "PLANT_GRAPHICS"
    UNKNOWN = "UNKNOWN"


GRAPHIC_TYPE_TOKENS = build_token_map(GraphicTypeTag)


class TilePageTag(Enum):
    """Tokens read inside a TILE_PAGE object."""

    FILE = "FILE"
    TILE_DIM = "TILE_DIM"
    PAGE_DIM_PIXELS = "PAGE_DIM_PIXELS"
    PAGE_DIM = "PAGE_DIM"
    UNKNOWN = "UNKNOWN"


TILE_PAGE_TOKENS = build_token_map(TilePageTag)


class LayerTag(Enum):
    """Layering tokens inside creature graphics."""

    LAYER_SET = "LAYER_SET"
    LAYER_GROUP = "LAYER_GROUP"
    END_LAYER_GROUP = "END_LAYER_GROUP"
    LAYER = "LAYER"
    LAYER_SET_PALETTE = "LAYER_SET_PALETTE"
    LS_PALETTE = "LS_PALETTE"
    LS_PALETTE_FILE = "LS_PALETTE_FILE"
    LS_PALETTE_DEFAULT = "LS_PALETTE_DEFAULT"
    UNKNOWN = "UNKNOWN"


LAYER_TOKENS = build_token_map(LayerTag)
