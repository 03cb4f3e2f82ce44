"""
Shared helpers for the static token tables.
"""

from enum import Enum
from typing import Dict, Type, TypeVar

TagEnum = TypeVar("TagEnum", bound=Enum)


def build_token_map(tag_enum: Type[TagEnum]) -> Dict[str, TagEnum]:
    """Map raw keys to enum members, skipping the UNKNOWN sentinel."""
    return {tag.value: tag for tag in tag_enum if tag.name != "UNKNOWN"}


def lookup(token_map: Dict[str, TagEnum], key: str, unknown: TagEnum) -> TagEnum:
    """Look up ``key``, falling back to ``unknown``."""
    return token_map.get(key, unknown)
