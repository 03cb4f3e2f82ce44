"""
Inorganic tokens.
"""

from enum import Enum

from .table import build_token_map


class InorganicTag(Enum):
    """Tokens read inside an INORGANIC object."""

    WAFERS = "WAFERS"
    DEEP_SPECIAL = "DEEP_SPECIAL"
    DEEP_SURFACE = "DEEP_SURFACE"
    METAL_ORE = "METAL_ORE"
    THREAD_METAL = "THREAD_METAL"
    AQUIFER = "AQUIFER"
    METAMORPHIC = "METAMORPHIC"
    SEDIMENTARY = "SEDIMENTARY"
    SEDIMENTARY_OCEAN_SHALLOW = "SEDIMENTARY_OCEAN_SHALLOW"
    SEDIMENTARY_OCEAN_DEEP = "SEDIMENTARY_OCEAN_DEEP"
    IGNEOUS_EXTRUSIVE = "IGNEOUS_EXTRUSIVE"
    IGNEOUS_INTRUSIVE = "IGNEOUS_INTRUSIVE"
    SOIL = "SOIL"
    SOIL_OCEAN = "SOIL_OCEAN"
    SOIL_SAND = "SOIL_SAND"
    ENVIRONMENT = "ENVIRONMENT"
    ENVIRONMENT_SPEC = "ENVIRONMENT_SPEC"
    LAVA = "LAVA"
    SPECIAL = "SPECIAL"
    GENERATED = "GENERATED"
    DIVINE = "DIVINE"
    SPHERE = "SPHERE"
    USE_MATERIAL_TEMPLATE = "USE_MATERIAL_TEMPLATE"
    UNKNOWN = "UNKNOWN"


INORGANIC_TOKENS = build_token_map(InorganicTag)


class EnvironmentClass(Enum):
    """First argument of ENVIRONMENT and ENVIRONMENT_SPEC."""

    ALL_STONE = "ALL_STONE"
    IGNEOUS_ALL = "IGNEOUS_ALL"
    IGNEOUS_EXTRUSIVE = "IGNEOUS_EXTRUSIVE"
    IGNEOUS_INTRUSIVE = "IGNEOUS_INTRUSIVE"
    SOIL = "SOIL"
    SOIL_SAND = "SOIL_SAND"
    SOIL_OCEAN = "SOIL_OCEAN"
    SEDIMENTARY = "SEDIMENTARY"
    METAMORPHIC = "METAMORPHIC"
    ALLUVIAL = "ALLUVIAL"
    UNKNOWN = "UNKNOWN"


ENVIRONMENT_CLASS_TOKENS = build_token_map(EnvironmentClass)


class InclusionType(Enum):
    """Second argument of ENVIRONMENT and ENVIRONMENT_SPEC."""

    CLUSTER = "CLUSTER"
    CLUSTER_SMALL = "CLUSTER_SMALL"
    CLUSTER_ONE = "CLUSTER_ONE"
    VEIN = "VEIN"
    UNKNOWN = "UNKNOWN"


INCLUSION_TYPE_TOKENS = build_token_map(InclusionType)
