"""
Creature-level tokens.

Tokens that can also be written per caste live in ``caste.py``; a key is
looked up here first.
"""

from enum import Enum

from .table import build_token_map


class CreatureTag(Enum):
    """Tokens that apply to a creature as a whole."""

    ALTTILE = "ALTTILE"
    APPLY_CREATURE_VARIATION = "APPLY_CREATURE_VARIATION"
    ARTIFICIAL_HIVEABLE = "ARTIFICIAL_HIVEABLE"
    BIOME = "BIOME"
    CHANGE_FREQUENCY_PERC = "CHANGE_FREQUENCY_PERC"
    CLUSTER_NUMBER = "CLUSTER_NUMBER"
    COLOR = "COLOR"
    COPY_TAGS_FROM = "COPY_TAGS_FROM"
    CREATURE_SOLDIER_TILE = "CREATURE_SOLDIER_TILE"
    CREATURE_TILE = "CREATURE_TILE"
    DOES_NOT_EXIST = "DOES_NOT_EXIST"
    EQUIPMENT = "EQUIPMENT"
    EQUIPMENT_WAGON = "EQUIPMENT_WAGON"
    EVIL = "EVIL"
    FANCIFUL = "FANCIFUL"
    FREQUENCY = "FREQUENCY"
    GENERAL_BABY_NAME = "GENERAL_BABY_NAME"
    GENERAL_CHILD_NAME = "GENERAL_CHILD_NAME"
    GENERATED = "GENERATED"
    GLOWCOLOR = "GLOWCOLOR"
    GLOWTILE = "GLOWTILE"
    GOOD = "GOOD"
    HARVEST_PRODUCT = "HARVEST_PRODUCT"
    LARGE_ROAMING = "LARGE_ROAMING"
    LOCAL_POPS_CONTROLLABLE = "LOCAL_POPS_CONTROLLABLE"
    LOCAL_POPS_PRODUCE_HEROES = "LOCAL_POPS_PRODUCE_HEROES"
    LOOSE_CLUSTERS = "LOOSE_CLUSTERS"
    MATES_TO_BREED = "MATES_TO_BREED"
    MUNDANE = "MUNDANE"
    NAME = "NAME"
    POPULATION_NUMBER = "POPULATION_NUMBER"
    PREFSTRING = "PREFSTRING"
    PROFESSION_NAME = "PROFESSION_NAME"
    SAVAGE = "SAVAGE"
    SMELL_TRIGGER = "SMELL_TRIGGER"
    SOLDIER_ALTTILE = "SOLDIER_ALTTILE"
    SPEECH = "SPEECH"
    SPEECH_FEMALE = "SPEECH_FEMALE"
    SPEECH_MALE = "SPEECH_MALE"
    SPHERE = "SPHERE"
    TRIGGERABLE_GROUP = "TRIGGERABLE_GROUP"
    UBIQUITOUS = "UBIQUITOUS"
    UNDERGROUND_DEPTH = "UNDERGROUND_DEPTH"
    USE_CASTE = "USE_CASTE"
    USE_MATERIAL = "USE_MATERIAL"
    USE_MATERIAL_TEMPLATE = "USE_MATERIAL_TEMPLATE"
    USE_TISSUE = "USE_TISSUE"
    USE_TISSUE_TEMPLATE = "USE_TISSUE_TEMPLATE"
    VERMIN_EATER = "VERMIN_EATER"
    VERMIN_FISH = "VERMIN_FISH"
    VERMIN_GROUNDER = "VERMIN_GROUNDER"
    VERMIN_ROTTER = "VERMIN_ROTTER"
    VERMIN_SOIL = "VERMIN_SOIL"
    VERMIN_SOIL_COLONY = "VERMIN_SOIL_COLONY"
    UNKNOWN = "UNKNOWN"


CREATURE_TOKENS = build_token_map(CreatureTag)

CASTE_SELECTION_TOKENS = frozenset({"CASTE", "SELECT_CASTE", "SELECT_ADDITIONAL_CASTE"})
"""Keys that change which castes subsequent caste tokens apply to."""
