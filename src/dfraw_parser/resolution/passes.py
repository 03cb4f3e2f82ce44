"""
Corpus-wide passes run once every file has been read.

Each pass takes the corpus list and returns the corpus for the next pass.
The order is fixed: resolve unprocessed raws, absorb SELECT_CREATURE
fragments, copy tags, apply creature variations.
"""

import copy
import logging
from typing import TYPE_CHECKING, Dict, List, Sequence

from ..errors import InvalidTokenError, NotYetImplementedError
from ..metadata import ObjectType
from ..raws import Creature, CreatureVariation, RawObject, SelectCreature, split_variation_reference
from ..tokens import split_raw_line
from .lookup import (
    collect_variations,
    find_creature,
    find_variation,
    has_creature,
    replace_by_object_id,
)

if TYPE_CHECKING:
    from ..reader.unprocessed_raw import UnprocessedRaw

logger = logging.getLogger(__name__)


def resolve_unprocessed_raws(
    unprocessed_raws: Sequence["UnprocessedRaw"],
    all_raws: List[RawObject],
    skip_copy_tags_from: bool = False,
    skip_creature_variations: bool = False,
) -> List[RawObject]:
    """Resolve captured creature bodies and append them to the corpus.

    Simple bodies resolve first. Bodies that copy tags are resolved as soon as
    every creature they copy from is in the corpus, so chains resolve in
    dependency order; whatever is left after that (missing or circular
    sources) is resolved anyway and logs the missing sources.
    """
    corpus = list(all_raws)
    variations = collect_variations(corpus)
    switches = {
        "copy_tags": not skip_copy_tags_from,
        "apply_variations": not skip_creature_variations,
    }

    pending: List["UnprocessedRaw"] = []
    for unprocessed in unprocessed_raws:
        if unprocessed.is_simple() or skip_copy_tags_from:
            _resolve_into(unprocessed, variations, corpus, **switches)
        else:
            pending.append(unprocessed)

    while pending:
        ready = [
            unprocessed
            for unprocessed in pending
            if all(has_creature(corpus, source) for source in unprocessed.copy_sources())
        ]
        if not ready:
            logger.warning(
                f"{len(pending)} creatures copy tags from creatures that could not be found"
            )
            ready = list(pending)
        for unprocessed in ready:
            _resolve_into(unprocessed, variations, corpus, **switches)
        resolved = {id(unprocessed) for unprocessed in ready}
        pending = [unprocessed for unprocessed in pending if id(unprocessed) not in resolved]

    return corpus


def _resolve_into(
    unprocessed: "UnprocessedRaw",
    variations: List[CreatureVariation],
    corpus: List[RawObject],
    copy_tags: bool = True,
    apply_variations: bool = True,
) -> None:
    try:
        corpus.append(
            unprocessed.resolve(
                variations,
                corpus,
                copy_tags=copy_tags,
                apply_variations=apply_variations,
            )
        )
    except NotYetImplementedError as e:
        logger.error(f"Unable to resolve {unprocessed.identifier}: {e}")


def absorb_select_creature(all_raws: List[RawObject]) -> List[RawObject]:
    """Merge ``SELECT_CREATURE`` fragments into the creatures they name.

    Each targeted creature is cloned, every fragment naming it is replayed
    onto the clone in corpus order, and the clone replaces the creature. The
    fragments and any children the creature spawned earlier are purged.
    Single pass: creatures created here are not revisited.
    """
    fragments: Dict[str, List[SelectCreature]] = {}
    for raw in all_raws:
        if raw.object_type is ObjectType.SELECT_CREATURE:
            fragments.setdefault(raw.identifier.lower(), []).append(raw)  # type: ignore[arg-type]
    if not fragments:
        return list(all_raws)

    replacements: List[Creature] = []
    matched = set()
    purged = set()
    for raw in all_raws:
        if raw.object_type is not ObjectType.CREATURE:
            continue
        targeting = fragments.get(raw.identifier.lower())
        if not targeting:
            continue
        creature: Creature = copy.deepcopy(raw)  # type: ignore[assignment]
        creature.select_caste("ALL")
        for fragment in targeting:
            _replay_fragment(creature, fragment)
            creature.child_object_ids.append(fragment.object_id)
        creature.select_caste("ALL")
        if creature.is_empty():
            continue
        matched.add(raw.identifier.lower())
        purged.add(raw.object_id)
        purged.update(raw.get_child_object_ids())  # type: ignore[attr-defined]
        replacements.append(creature)

    absorbed = {fragment.object_id for group in fragments.values() for fragment in group}
    for identifier in sorted(set(fragments) - matched):
        logger.warning(f"SELECT_CREATURE:{identifier} names no known creature")

    purged.update(absorbed)
    corpus = [raw for raw in all_raws if raw.object_id not in purged]
    corpus.extend(replacements)
    logger.info(
        f"Absorbed {len(absorbed)} SELECT_CREATURE fragments into {len(replacements)} creatures"
    )
    return corpus


def _replay_fragment(creature: Creature, fragment: SelectCreature) -> None:
    for raw in fragment.tags:
        try:
            key, value = split_raw_line(raw)
        except InvalidTokenError as e:
            logger.warning(f"SELECT_CREATURE:{fragment.identifier}: skipping '{raw}': {e}")
            continue
        creature.parse_tag(key, value)


def apply_copy_tags_from(all_raws: List[RawObject]) -> List[RawObject]:
    """Honour ``COPY_TAGS_FROM`` references still pending on creatures."""
    corpus = list(all_raws)
    applied = 0
    for raw in list(corpus):
        if raw.object_type is not ObjectType.CREATURE or not raw.copy_tags_from:  # type: ignore[attr-defined]
            continue
        creature: Creature = copy.deepcopy(raw)  # type: ignore[assignment]
        sources, creature.copy_tags_from = creature.copy_tags_from, []
        for identifier in sources:
            source = find_creature(corpus, identifier)
            if source is None:
                logger.warning(f"{creature.identifier}: COPY_TAGS_FROM unknown creature {identifier}")
                continue
            creature.copy_tags_from_creature(source)
            applied += 1
        if not replace_by_object_id(corpus, creature):
            logger.warning(f"{creature.object_id} vanished from the corpus, skipping")
    if applied:
        logger.info(f"Applied {applied} pending COPY_TAGS_FROM references")
    return corpus


def apply_creature_variations(all_raws: List[RawObject]) -> List[RawObject]:
    """Apply ``APPLY_CREATURE_VARIATION`` references still pending on creatures."""
    corpus = list(all_raws)
    variations = collect_variations(corpus)
    applied = 0
    for raw in list(corpus):
        if raw.object_type is not ObjectType.CREATURE or not raw.apply_creature_variation:  # type: ignore[attr-defined]
            continue
        creature: Creature = copy.deepcopy(raw)  # type: ignore[assignment]
        references, creature.apply_creature_variation = creature.apply_creature_variation, []
        for reference in references:
            identifier, args = split_variation_reference(reference)
            variation = find_variation(variations, identifier)
            if variation is None:
                logger.warning(
                    f"{creature.identifier}: APPLY_CREATURE_VARIATION unknown variation {identifier}"
                )
                continue
            variation.apply_to(creature, args)
            applied += 1
        creature.select_caste("ALL")
        if not replace_by_object_id(corpus, creature):
            logger.warning(f"{creature.object_id} vanished from the corpus, skipping")
    if applied:
        logger.info(f"Applied {applied} pending creature variations")
    return corpus
