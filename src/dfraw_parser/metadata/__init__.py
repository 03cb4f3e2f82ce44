"""
Metadata describing where raw objects come from and how they are identified.
"""

from .location import RawModuleLocation
from .object_id import build_object_id, slugify
from .object_type import (
    DEFAULT_OBJECT_TYPES,
    OBJECT_TOKEN_MAP,
    PARSABLE_OBJECT_TYPES,
    ObjectType,
)
from .raw_metadata import RawMetadata

__all__ = [
    "DEFAULT_OBJECT_TYPES",
    "OBJECT_TOKEN_MAP",
    "PARSABLE_OBJECT_TYPES",
    "ObjectType",
    "RawMetadata",
    "RawModuleLocation",
    "build_object_id",
    "slugify",
]
