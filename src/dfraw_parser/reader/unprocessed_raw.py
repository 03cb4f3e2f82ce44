"""
Objects captured as modification instructions and resolved against the corpus.

Creature bodies can refer to other creatures (``COPY_TAGS_FROM``), apply
creature variations and move the insertion point around (``GO_TO_START``,
``GO_TO_END``, ``GO_TO_TAG``). The body is kept as an ordered list of
``Modification`` instructions until every file has been read, then collapsed
into a single body and replayed onto a fresh creature.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..errors import InvalidTokenError, NotYetImplementedError
from ..metadata import ObjectType, RawMetadata
from ..raws import Creature, CreatureVariation, RawObject, split_variation_reference
from ..resolution.lookup import find_creature, find_variation
from ..tokens import join_token, split_raw_line
from .modification import (
    LINE_KINDS,
    AddBeforeTag,
    AddToBeginning,
    AddToEnding,
    ApplyCreatureVariation,
    CopyTagsFrom,
    LineModification,
    MainRawBody,
    Modification,
    ModificationKind,
)

logger = logging.getLogger(__name__)


def insert_before_tag(lines: List[str], tag: str, raws: List[str]) -> List[str]:
    """Insert ``raws`` before the first line for ``tag``, or append them if there is none.

    A line is for ``tag`` when it equals ``tag`` or continues it with ``:``.
    Unlike a plain prefix match, ``GO_TO_TAG:BODY`` therefore lands before
    the first ``BODY:...`` line and never before ``BODY_SIZE:...``.
    """
    for index, line in enumerate(lines):
        if line == tag or line.startswith(f"{tag}:"):
            return lines[:index] + list(raws) + lines[index:]
    logger.warning(f"No line for tag {tag} to insert before, appending {len(raws)} lines")
    return lines + list(raws)


@dataclass
class UnprocessedRaw:
    """An object body recorded as modification instructions."""
    raw_type: ObjectType
    metadata: RawMetadata
    identifier: str = ""
    modifications: List[Modification] = field(default_factory=list)
    section: LineModification = field(default_factory=MainRawBody, repr=False, compare=False)

    @classmethod
    def new(cls, raw_type: ObjectType, metadata: RawMetadata, identifier: str) -> "UnprocessedRaw":
        return cls(
            raw_type=raw_type,
            metadata=metadata.with_object_type(raw_type),
            identifier=identifier,
        )

    def is_empty(self) -> bool:
        return not self.identifier and not self.modifications

    def is_simple(self) -> bool:
        """Whether the object resolves without looking up other creatures."""
        return all(
            modification.kind is not ModificationKind.COPY_TAGS_FROM
            for modification in self.modifications
        )

    def copy_sources(self) -> List[str]:
        """Identifiers named by ``COPY_TAGS_FROM``."""
        return [
            modification.identifier  # type: ignore[attr-defined]
            for modification in self.modifications
            if modification.kind is ModificationKind.COPY_TAGS_FROM
        ]

    # === CAPTURE ===

    def add_modification(self, modification: Modification) -> None:
        """Append a modification, merging it into the previous one when they share a kind."""
        if self.modifications and self.modifications[-1].can_merge(modification):
            previous = self.modifications[-1]
            previous.raws.extend(modification.raws)  # type: ignore[attr-defined]
            return
        self.modifications.append(modification)

    def set_section(self, section: LineModification) -> None:
        """Send subsequent plain lines to ``section``'s kind (body, start, end or before a tag)."""
        self.section = section

    def add_raw(self, raw: str) -> None:
        """Record a plain ``KEY:value`` line in the current section."""
        modification = self.section.new_empty()
        modification.add_raw(raw)
        self.add_modification(modification)

    def parse_tag(self, key: str, value: str) -> None:
        """Record one token read inside the object body."""
        if key == "COPY_TAGS_FROM":
            self.add_modification(CopyTagsFrom(identifier=value))
        elif key == "APPLY_CREATURE_VARIATION":
            self.add_modification(ApplyCreatureVariation(identifier=value))
        elif key == "GO_TO_START":
            self.set_section(AddToBeginning())
        elif key == "GO_TO_END":
            self.set_section(AddToEnding())
        elif key == "GO_TO_TAG":
            self.set_section(AddBeforeTag(tag=value))
        else:
            self.add_raw(join_token(key, value))

    # === RESOLUTION ===

    def collapse(self) -> List[Modification]:
        """Fold every line-carrying modification into one ``MainRawBody``.

        The body is made of the start lines, the main lines and the end lines,
        each in encounter order; ``AddBeforeTag`` lines are then spliced in.
        The consolidated body takes the position of the first line-carrying
        modification, references keep their order around it.
        """
        beginning: List[str] = []
        spine: List[str] = []
        ending: List[str] = []
        before_tags: List[AddBeforeTag] = []
        collapsed: List[Modification] = []
        body_index: Optional[int] = None

        for modification in self.modifications:
            if modification.kind not in LINE_KINDS:
                collapsed.append(modification)
                continue
            if body_index is None:
                body_index = len(collapsed)
            if modification.kind is ModificationKind.ADD_TO_BEGINNING:
                beginning.extend(modification.raws)  # type: ignore[attr-defined]
            elif modification.kind is ModificationKind.ADD_TO_ENDING:
                ending.extend(modification.raws)  # type: ignore[attr-defined]
            elif modification.kind is ModificationKind.ADD_BEFORE_TAG:
                before_tags.append(modification)  # type: ignore[arg-type]
            else:
                spine.extend(modification.raws)  # type: ignore[attr-defined]

        lines = beginning + spine + ending
        for before_tag in before_tags:
            lines = insert_before_tag(lines, before_tag.tag, before_tag.raws)

        if body_index is not None:
            collapsed.insert(body_index, MainRawBody(raws=lines))
        return collapsed

    def resolve(
        self,
        creature_variations: Iterable[CreatureVariation],
        all_raws: Iterable[RawObject],
        copy_tags: bool = True,
        apply_variations: bool = True,
    ) -> RawObject:
        """Build the finished object.

        ``copy_tags`` and ``apply_variations`` set to False leave the matching
        instructions out of the replay.

        Raises:
            NotYetImplementedError: If the object is not a creature
        """
        if self.raw_type is not ObjectType.CREATURE:
            raise NotYetImplementedError(
                f"Resolving {self.raw_type.value} objects ({self.identifier})"
            )
        variations = list(creature_variations)
        corpus = list(all_raws)
        creature = Creature.new(self.identifier, self.metadata)

        for modification in self.collapse():
            if modification.kind is ModificationKind.COPY_TAGS_FROM:
                if copy_tags:
                    self._copy_tags(creature, modification.identifier, corpus)  # type: ignore[attr-defined]
            elif modification.kind is ModificationKind.APPLY_CREATURE_VARIATION:
                if apply_variations:
                    self._apply_variation(creature, modification.identifier, variations)  # type: ignore[attr-defined]
            else:
                self._replay(creature, modification.raws)  # type: ignore[attr-defined]
        return creature

    def _copy_tags(self, creature: Creature, identifier: str, all_raws: Iterable[RawObject]) -> None:
        source = find_creature(all_raws, identifier)
        if source is None:
            logger.warning(f"{self.identifier}: COPY_TAGS_FROM unknown creature {identifier}")
            return
        creature.copy_tags_from_creature(source)

    def _apply_variation(
        self, creature: Creature, reference: str, variations: List[CreatureVariation]
    ) -> None:
        identifier, args = split_variation_reference(reference)
        variation = find_variation(variations, identifier)
        if variation is None:
            logger.warning(
                f"{self.identifier}: APPLY_CREATURE_VARIATION unknown variation {identifier}"
            )
            return
        variation.apply_to(creature, args)

    def _replay(self, creature: Creature, raws: List[str]) -> None:
        for raw in raws:
            try:
                key, value = split_raw_line(raw)
            except InvalidTokenError as e:
                logger.warning(f"{self.identifier}: skipping line '{raw}': {e}")
                continue
            creature.parse_tag(key, value)
