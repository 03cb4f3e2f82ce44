"""
Corpus lookups shared by the resolver and the corpus passes.
"""

import logging
from typing import Iterable, List, Optional

from ..metadata import ObjectType
from ..raws import Creature, CreatureVariation, RawObject

logger = logging.getLogger(__name__)


def find_creature(all_raws: Iterable[RawObject], identifier: str) -> Optional[Creature]:
    """Find the creature named ``identifier`` (case-insensitive).

    When several modules define it, the one with the highest module version
    wins. The sort is stable, so equal versions keep corpus order and the
    last one read is used.
    """
    wanted = identifier.lower()
    matches: List[Creature] = [
        raw  # type: ignore[misc]
        for raw in all_raws
        if raw.object_type is ObjectType.CREATURE and raw.identifier.lower() == wanted
    ]
    if not matches:
        return None
    if len(matches) > 1:
        versions = ", ".join(
            f"{match.metadata.module_id}@{match.metadata.module_version}" for match in matches
        )
        logger.warning(
            f"Found {len(matches)} creatures named {identifier} ({versions}), "
            f"using the highest module version"
        )
        matches = sorted(matches, key=lambda match: match.metadata.version_sort_key())
    return matches[-1]


def find_variation(
    creature_variations: Iterable[CreatureVariation], identifier: str
) -> Optional[CreatureVariation]:
    """Find a creature variation by identifier (case-insensitive); the last one read wins."""
    wanted = identifier.lower()
    found: Optional[CreatureVariation] = None
    for variation in creature_variations:
        if variation.identifier.lower() == wanted:
            found = variation
    return found


def collect_variations(all_raws: Iterable[RawObject]) -> List[CreatureVariation]:
    """All creature variations in the corpus, in corpus order."""
    return [
        raw  # type: ignore[misc]
        for raw in all_raws
        if raw.object_type is ObjectType.CREATURE_VARIATION
    ]


def replace_by_object_id(all_raws: List[RawObject], replacement: RawObject) -> bool:
    """Swap the object with ``replacement.object_id`` in place. Returns False if absent."""
    for index, raw in enumerate(all_raws):
        if raw.object_id == replacement.object_id:
            all_raws[index] = replacement
            return True
    return False


def has_creature(all_raws: Iterable[RawObject], identifier: str) -> bool:
    """Whether any creature named ``identifier`` (case-insensitive) is present."""
    wanted = identifier.lower()
    return any(
        raw.object_type is ObjectType.CREATURE and raw.identifier.lower() == wanted
        for raw in all_raws
    )
