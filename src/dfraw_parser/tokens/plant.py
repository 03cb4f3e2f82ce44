"""
Plant tokens.
"""

from enum import Enum

from .table import build_token_map


class PlantTag(Enum):
    """Tokens read inside a PLANT object."""

    ALL_NAMES = "ALL_NAMES"
    ADJ = "ADJ"
    ALT_PERIOD = "ALT_PERIOD"
    BIOME = "BIOME"
    CLUSTERSIZE = "CLUSTERSIZE"
    DRY = "DRY"
    FREQUENCY = "FREQUENCY"
    GOOD = "GOOD"
    EVIL = "EVIL"
    SAVAGE = "SAVAGE"
    NAME = "NAME"
    NAME_PLURAL = "NAME_PLURAL"
    PREFSTRING = "PREFSTRING"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    AUTUMN = "AUTUMN"
    WINTER = "WINTER"
    UNDERGROUND_DEPTH = "UNDERGROUND_DEPTH"
    USE_MATERIAL_TEMPLATE = "USE_MATERIAL_TEMPLATE"
    BASIC_MAT = "BASIC_MAT"
    MATERIAL_VALUE = "MATERIAL_VALUE"
    WET = "WET"
    DRY_GRASS = "DRY_GRASS"
    GRASS = "GRASS"
    SAPLING = "SAPLING"
    TREE = "TREE"
    SHRUB_TILE = "SHRUB_TILE"
    DEAD_SHRUB_TILE = "DEAD_SHRUB_TILE"
    SHRUB_COLOR = "SHRUB_COLOR"
    DEAD_SHRUB_COLOR = "DEAD_SHRUB_COLOR"
    PICKED_TILE = "PICKED_TILE"
    PICKED_COLOR = "PICKED_COLOR"
    DEAD_PICKED_TILE = "DEAD_PICKED_TILE"
    GROWTH = "GROWTH"
    GROWTH_NAME = "GROWTH_NAME"
    GROWTH_ITEM = "GROWTH_ITEM"
    GROWTH_HOST_TILE = "GROWTH_HOST_TILE"
    GROWTH_TISSUE_LAYER = "GROWTH_TISSUE_LAYER"
    GROWTH_TIMING = "GROWTH_TIMING"
    GROWTH_PRINT = "GROWTH_PRINT"
    GROWTH_DENSITY = "GROWTH_DENSITY"
    GROWTH_TRUNK_HEIGHT_PERC = "GROWTH_TRUNK_HEIGHT_PERC"
    GROWTH_DROPS_OFF = "GROWTH_DROPS_OFF"
    GROWTH_DROPS_OFF_NO_CLOUD = "GROWTH_DROPS_OFF_NO_CLOUD"
    GROWTH_HAS_SEED = "GROWTH_HAS_SEED"
    TRUNK_PERIOD = "TRUNK_PERIOD"
    HEAVY_BRANCH_DENSITY = "HEAVY_BRANCH_DENSITY"
    BRANCH_DENSITY = "BRANCH_DENSITY"
    MAX_TRUNK_HEIGHT = "MAX_TRUNK_HEIGHT"
    MAX_TRUNK_DIAMETER = "MAX_TRUNK_DIAMETER"
    TRUNK_BRANCHING = "TRUNK_BRANCHING"
    ROOT_DENSITY = "ROOT_DENSITY"
    ROOT_RADIUS = "ROOT_RADIUS"
    STANDARD_TILE_NAMES = "STANDARD_TILE_NAMES"
    SEED = "SEED"
    MILL = "MILL"
    THREAD = "THREAD"
    DRINK = "DRINK"
    EXTRACT_BARREL = "EXTRACT_BARREL"
    EXTRACT_VIAL = "EXTRACT_VIAL"
    EXTRACT_STILL_VIAL = "EXTRACT_STILL_VIAL"
    USE_MATERIAL = "USE_MATERIAL"
    STATE_NAME = "STATE_NAME"
    STATE_ADJ = "STATE_ADJ"
    STATE_NAME_ADJ = "STATE_NAME_ADJ"
    PREFERRED_TREE = "PREFERRED_TREE"
    TREE_TILE = "TREE_TILE"
    TREE_COLOR = "TREE_COLOR"
    DEAD_TREE_TILE = "DEAD_TREE_TILE"
    DEAD_TREE_COLOR = "DEAD_TREE_COLOR"
    UNKNOWN = "UNKNOWN"


PLANT_TOKENS = build_token_map(PlantTag)
