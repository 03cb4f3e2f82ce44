"""
Material tokens, shared by inorganics, material templates and plant materials.
"""

from enum import Enum

from .table import build_token_map


class MaterialTag(Enum):
    """Tokens read inside a material definition."""

    ABSORPTION = "ABSORPTION"
    BASIC_COLOR = "BASIC_COLOR"
    BENDING_ELASTICITY = "BENDING_ELASTICITY"
    BENDING_FRACTURE = "BENDING_FRACTURE"
    BENDING_YIELD = "BENDING_YIELD"
    BLOOD_MAP_DESCRIPTOR = "BLOOD_MAP_DESCRIPTOR"
    BOILING_POINT = "BOILING_POINT"
    BONE = "BONE"
    BUILD_COLOR = "BUILD_COLOR"
    COMPRESSIVE_ELASTICITY = "COMPRESSIVE_ELASTICITY"
    COMPRESSIVE_FRACTURE = "COMPRESSIVE_FRACTURE"
    COMPRESSIVE_YIELD = "COMPRESSIVE_YIELD"
    CRYSTAL_GLASSABLE = "CRYSTAL_GLASSABLE"
    DISPLAY_COLOR = "DISPLAY_COLOR"
    DISPLAY_UNGLAZED = "DISPLAY_UNGLAZED"
    EDIBLE_COOKED = "EDIBLE_COOKED"
    EDIBLE_RAW = "EDIBLE_RAW"
    EDIBLE_VERMIN = "EDIBLE_VERMIN"
    EXTRACT_STORAGE = "EXTRACT_STORAGE"
    HARDENS_WITH_WATER = "HARDENS_WITH_WATER"
    HEATDAM_POINT = "HEATDAM_POINT"
    IGNITE_POINT = "IGNITE_POINT"
    IMPACT_ELASTICITY = "IMPACT_ELASTICITY"
    IMPACT_FRACTURE = "IMPACT_FRACTURE"
    IMPACT_YIELD = "IMPACT_YIELD"
    IS_GEM = "IS_GEM"
    IS_METAL = "IS_METAL"
    IS_STONE = "IS_STONE"
    ITEM_SYMBOL = "ITEM_SYMBOL"
    ITEMS_AMMO = "ITEMS_AMMO"
    ITEMS_ANVIL = "ITEMS_ANVIL"
    ITEMS_ARMOR = "ITEMS_ARMOR"
    ITEMS_BARRED = "ITEMS_BARRED"
    ITEMS_DELICATE = "ITEMS_DELICATE"
    ITEMS_DIGGER = "ITEMS_DIGGER"
    ITEMS_HARD = "ITEMS_HARD"
    ITEMS_METAL = "ITEMS_METAL"
    ITEMS_QUERN = "ITEMS_QUERN"
    ITEMS_SCALED = "ITEMS_SCALED"
    ITEMS_SIEGE = "ITEMS_SIEGE"
    ITEMS_SOFT = "ITEMS_SOFT"
    ITEMS_WEAPON = "ITEMS_WEAPON"
    ITEMS_WEAPON_RANGED = "ITEMS_WEAPON_RANGED"
    LEATHER = "LEATHER"
    MATERIAL_REACTION_PRODUCT = "MATERIAL_REACTION_PRODUCT"
    MATERIAL_VALUE = "MATERIAL_VALUE"
    MAX_EDGE = "MAX_EDGE"
    MEAT = "MEAT"
    MELTING_POINT = "MELTING_POINT"
    MOLAR_MASS = "MOLAR_MASS"
    NO_STONE_STOCKPILE = "NO_STONE_STOCKPILE"
    POWDER_DYE = "POWDER_DYE"
    REACTION_CLASS = "REACTION_CLASS"
    SHEAR_ELASTICITY = "SHEAR_ELASTICITY"
    SHEAR_FRACTURE = "SHEAR_FRACTURE"
    SHEAR_YIELD = "SHEAR_YIELD"
    SILK = "SILK"
    SOAP = "SOAP"
    SOLID_DENSITY = "SOLID_DENSITY"
    LIQUID_DENSITY = "LIQUID_DENSITY"
    SPEC_HEAT = "SPEC_HEAT"
    STATE_ADJ = "STATE_ADJ"
    STATE_COLOR = "STATE_COLOR"
    STATE_NAME = "STATE_NAME"
    STATE_NAME_ADJ = "STATE_NAME_ADJ"
    STOCKPILE_GLOB = "STOCKPILE_GLOB"
    STOCKPILE_GLOB_PASTE = "STOCKPILE_GLOB_PASTE"
    STOCKPILE_GLOB_PRESSED = "STOCKPILE_GLOB_PRESSED"
    STONE_NAME = "STONE_NAME"
    STRAIN_AT_YIELD = "STRAIN_AT_YIELD"
    SYNDROME = "SYNDROME"
    TEMP_DIET_INFO = "TEMP_DIET_INFO"
    TENSILE_ELASTICITY = "TENSILE_ELASTICITY"
    TENSILE_FRACTURE = "TENSILE_FRACTURE"
    TENSILE_YIELD = "TENSILE_YIELD"
    THREAD_PLANT = "THREAD_PLANT"
    TILE = "TILE"
    TILE_COLOR = "TILE_COLOR"
    TORSION_ELASTICITY = "TORSION_ELASTICITY"
    TORSION_FRACTURE = "TORSION_FRACTURE"
    TORSION_YIELD = "TORSION_YIELD"
    UNDIGGABLE = "UNDIGGABLE"
    WOOD = "WOOD"
    YARN = "YARN"
    UNKNOWN = "UNKNOWN"


MATERIAL_TOKENS = build_token_map(MaterialTag)
