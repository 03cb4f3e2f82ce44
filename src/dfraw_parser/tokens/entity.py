"""
Entity tokens.
"""

from enum import Enum

from .table import build_token_map


class EntityTag(Enum):
    """Tokens read inside an ENTITY object."""

    ACTIVE_SEASON = "ACTIVE_SEASON"
    ADVENTURE_TIER = "ADVENTURE_TIER"
    ALL_MAIN_POPS_CONTROLLABLE = "ALL_MAIN_POPS_CONTROLLABLE"
    AMBUSHER = "AMBUSHER"
    AMMO = "AMMO"
    ARMOR = "ARMOR"
    BABYSNATCHER = "BABYSNATCHER"
    BANDITRY = "BANDITRY"
    BIOME_SUPPORT = "BIOME_SUPPORT"
    BUILDS_OUTDOOR_FORTIFICATIONS = "BUILDS_OUTDOOR_FORTIFICATIONS"
    BUILDS_OUTDOOR_TOMBS = "BUILDS_OUTDOOR_TOMBS"
    CIV_CONTROLLABLE = "CIV_CONTROLLABLE"
    CLOTHING = "CLOTHING"
    COLOR = "COLOR"
    CREATURE = "CREATURE"
    CURRENCY = "CURRENCY"
    DEFAULT_SITE_TYPE = "DEFAULT_SITE_TYPE"
    DIGGER = "DIGGER"
    EXCLUSIVE_START_BIOME = "EXCLUSIVE_START_BIOME"
    GEM_SHAPE = "GEM_SHAPE"
    GENERATE_KEYBOARD_INSTRUMENTS = "GENERATE_KEYBOARD_INSTRUMENTS"
    GIANT_SPIDER_QUEEN = "GIANT_SPIDER_QUEEN"
    GLASS = "GLASS"
    GLOVES = "GLOVES"
    HELM = "HELM"
    INDIV_CONTROLLABLE = "INDIV_CONTROLLABLE"
    ITEM_THIEF = "ITEM_THIEF"
    LAYER_LINKED = "LAYER_LINKED"
    LIKES_SITE = "LIKES_SITE"
    LOCAL_BANDITRY = "LOCAL_BANDITRY"
    MAX_POP_NUMBER = "MAX_POP_NUMBER"
    MAX_SITE_POP_NUMBER = "MAX_SITE_POP_NUMBER"
    MAX_STARTING_CIV_NUMBER = "MAX_STARTING_CIV_NUMBER"
    METAL_PREF = "METAL_PREF"
    OUTSIDER_CONTROLLABLE = "OUTSIDER_CONTROLLABLE"
    PANTS = "PANTS"
    PERMITTED_BUILDING = "PERMITTED_BUILDING"
    PERMITTED_JOB = "PERMITTED_JOB"
    PERMITTED_REACTION = "PERMITTED_REACTION"
    PROGRESS_TRIGGER_POPULATION = "PROGRESS_TRIGGER_POPULATION"
    PROGRESS_TRIGGER_PRODUCTION = "PROGRESS_TRIGGER_PRODUCTION"
    PROGRESS_TRIGGER_TRADE = "PROGRESS_TRIGGER_TRADE"
    PROGRESS_TRIGGER_POP_SIPHON = "PROGRESS_TRIGGER_POP_SIPHON"
    RELIGION = "RELIGION"
    RELIGION_SPHERE = "RELIGION_SPHERE"
    SCHOLAR = "SCHOLAR"
    SELECT_SYMBOL = "SELECT_SYMBOL"
    SHIELD = "SHIELD"
    SHOES = "SHOES"
    SIEGER = "SIEGER"
    SIEGE_SKILLED_MINERS = "SIEGE_SKILLED_MINERS"
    SITE_CONTROLLABLE = "SITE_CONTROLLABLE"
    SKULKING = "SKULKING"
    SPHERE_ALIGNMENT = "SPHERE_ALIGNMENT"
    START_BIOME = "START_BIOME"
    START_GROUP_NUMBER = "START_GROUP_NUMBER"
    STONE_PREF = "STONE_PREF"
    SUBTERRANEAN_CLOTHING = "SUBTERRANEAN_CLOTHING"
    TOOL = "TOOL"
    TOY = "TOY"
    TRANSLATION = "TRANSLATION"
    TRAPCOMP = "TRAPCOMP"
    TREE_CAP_DIAMETER = "TREE_CAP_DIAMETER"
    UNIQUE_DEMON = "UNIQUE_DEMON"
    USE_ANIMAL_PRODUCTS = "USE_ANIMAL_PRODUCTS"
    USE_ANY_PET_RACE = "USE_ANY_PET_RACE"
    USE_CAVE_ANIMALS = "USE_CAVE_ANIMALS"
    USE_EVIL_ANIMALS = "USE_EVIL_ANIMALS"
    USE_EVIL_PLANTS = "USE_EVIL_PLANTS"
    USE_EVIL_WOOD = "USE_EVIL_WOOD"
    USE_GOOD_ANIMALS = "USE_GOOD_ANIMALS"
    USE_GOOD_PLANTS = "USE_GOOD_PLANTS"
    USE_GOOD_WOOD = "USE_GOOD_WOOD"
    USE_MISC_PROCESSED_WOOD_PRODUCTS = "USE_MISC_PROCESSED_WOOD_PRODUCTS"
    USE_NONE_PET_RACE = "USE_NONE_PET_RACE"
    VARIABLE_POSITIONS = "VARIABLE_POSITIONS"
    WEAPON = "WEAPON"
    WOOD_ARMOR = "WOOD_ARMOR"
    WOOD_PREF = "WOOD_PREF"
    UNKNOWN = "UNKNOWN"


ENTITY_TOKENS = build_token_map(EntityTag)
