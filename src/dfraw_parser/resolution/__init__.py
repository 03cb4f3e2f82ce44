"""
Corpus-wide resolution passes and lookups.
"""

from .lookup import (
    collect_variations,
    find_creature,
    find_variation,
    has_creature,
    replace_by_object_id,
)
from .passes import (
    absorb_select_creature,
    apply_copy_tags_from,
    apply_creature_variations,
    resolve_unprocessed_raws,
)

__all__ = [
    "absorb_select_creature",
    "apply_copy_tags_from",
    "apply_creature_variations",
    "collect_variations",
    "find_creature",
    "find_variation",
    "has_creature",
    "replace_by_object_id",
    "resolve_unprocessed_raws",
]
