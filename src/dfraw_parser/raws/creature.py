"""
Creature raw model.

Tokens are routed either to the creature itself or to the currently selected
castes. Caste selection starts at ``ALL`` and is changed by ``CASTE``,
``SELECT_CASTE`` and ``SELECT_ADDITIONAL_CASTE``.
"""

import copy
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Optional, Tuple

from ..errors import UnexpectedObjectTypeError
from ..metadata import ObjectType
from ..tokens import CASTE_SELECTION_TOKENS, CREATURE_TOKENS, CreatureTag
from .base import RawObject, remove_entries, render_tags
from .caste import Caste
from .values import (
    Name,
    SingPlurName,
    TagEntry,
    Tile,
    compact_dict,
    parse_int,
    parse_min_max,
)

logger = logging.getLogger(__name__)

ALL_CASTES = "ALL"

_FIELD_PARSERS: Dict[CreatureTag, Tuple[str, Callable[[str], Any], bool]] = {
    CreatureTag.NAME: ("name", Name.from_value, False),
    CreatureTag.GENERAL_BABY_NAME: ("general_baby_name", SingPlurName.from_value, False),
    CreatureTag.GENERAL_CHILD_NAME: ("general_child_name", SingPlurName.from_value, False),
    CreatureTag.BIOME: ("biomes", str, True),
    CreatureTag.PREFSTRING: ("pref_strings", str, True),
    CreatureTag.FREQUENCY: ("frequency", lambda value: parse_int(value, 50), False),
    CreatureTag.POPULATION_NUMBER: (
        "population_number", lambda value: parse_min_max(value, [1, 1]), False
    ),
    CreatureTag.CLUSTER_NUMBER: (
        "cluster_number", lambda value: parse_min_max(value, [1, 1]), False
    ),
    CreatureTag.UNDERGROUND_DEPTH: (
        "underground_depth", lambda value: parse_min_max(value, [0, 0]), False
    ),
}

_FIELD_DEFAULTS: Dict[str, Callable[[], Any]] = {
    "name": Name,
    "general_baby_name": SingPlurName,
    "general_child_name": SingPlurName,
    "biomes": list,
    "pref_strings": list,
    "frequency": lambda: 50,
    "population_number": lambda: [1, 1],
    "cluster_number": lambda: [1, 1],
    "underground_depth": lambda: [0, 0],
}

_TILE_FIELDS: Dict[CreatureTag, str] = {
    CreatureTag.CREATURE_TILE: "character",
    CreatureTag.ALTTILE: "alt_character",
    CreatureTag.COLOR: "color",
    CreatureTag.GLOWTILE: "glow_character",
    CreatureTag.GLOWCOLOR: "glow_color",
}


@dataclass
class Creature(RawObject):
    """A creature definition with its castes."""
    object_type: ClassVar[ObjectType] = ObjectType.CREATURE

    castes: List[Caste] = field(default_factory=lambda: [Caste(ALL_CASTES)])
    tags: List[TagEntry] = field(default_factory=list)
    name: Name = field(default_factory=Name)
    general_baby_name: SingPlurName = field(default_factory=SingPlurName)
    general_child_name: SingPlurName = field(default_factory=SingPlurName)
    biomes: List[str] = field(default_factory=list)
    pref_strings: List[str] = field(default_factory=list)
    tile: Tile = field(default_factory=Tile)
    frequency: int = 50
    cluster_number: List[int] = field(default_factory=lambda: [1, 1])
    population_number: List[int] = field(default_factory=lambda: [1, 1])
    underground_depth: List[int] = field(default_factory=lambda: [0, 0])
    # Pending references honoured by the corpus passes
    copy_tags_from: List[str] = field(default_factory=list)
    apply_creature_variation: List[str] = field(default_factory=list)
    # Object ids of SELECT_CREATURE fragments merged into this creature
    child_object_ids: List[str] = field(default_factory=list)
    selected_castes: List[str] = field(
        default_factory=lambda: [ALL_CASTES], repr=False, compare=False
    )

    @property
    def display_name(self) -> str:
        return self.name.singular or self.identifier

    # === CASTES ===

    def get_caste(self, identifier: str) -> Optional[Caste]:
        for caste in self.castes:
            if caste.identifier == identifier:
                return caste
        return None

    def select_caste(self, identifier: str) -> Caste:
        """Make ``identifier`` the only selected caste, creating it if needed."""
        caste = self._ensure_caste(identifier)
        self.selected_castes = [caste.identifier]
        return caste

    def select_additional_caste(self, identifier: str) -> Caste:
        """Add ``identifier`` to the current caste selection."""
        caste = self._ensure_caste(identifier)
        if caste.identifier not in self.selected_castes:
            self.selected_castes.append(caste.identifier)
        return caste

    def _ensure_caste(self, identifier: str) -> Caste:
        identifier = identifier or ALL_CASTES
        caste = self.get_caste(identifier)
        if caste is None:
            caste = Caste(identifier)
            self.castes.append(caste)
        return caste

    def _selected(self) -> List[Caste]:
        castes = [self.get_caste(identifier) for identifier in self.selected_castes]
        selected = [caste for caste in castes if caste is not None]
        return selected or [self.select_caste(ALL_CASTES)]

    # === TAG PARSING ===

    def parse_tag(self, key: str, value: str) -> None:
        """Route a token to the creature or to the selected castes."""
        if key in CASTE_SELECTION_TOKENS:
            if key == "SELECT_ADDITIONAL_CASTE":
                self.select_additional_caste(value)
            else:
                self.select_caste(value)
            return

        token = CREATURE_TOKENS.get(key)
        if token is CreatureTag.COPY_TAGS_FROM:
            self.copy_tags_from.append(value)
            return
        if token is CreatureTag.APPLY_CREATURE_VARIATION:
            self.apply_creature_variation.append(value)
            return
        if token is not None:
            entry = TagEntry(token, value)
            if entry not in self.tags:
                self.tags.append(entry)
                self._apply_field(token, value)
            return

        if Caste.accepts(key):
            for caste in self._selected():
                caste.parse_tag(key, value)
            return

        logger.debug(f"Creature {self.identifier}: unknown tag {key} with value '{value}'")

    def _apply_field(self, token: CreatureTag, value: str) -> None:
        if token in _TILE_FIELDS:
            setattr(self.tile, _TILE_FIELDS[token], value)
            return
        parser = _FIELD_PARSERS.get(token)
        if parser is None:
            return
        attribute, parse, accumulates = parser
        if accumulates:
            getattr(self, attribute).append(parse(value))
        else:
            setattr(self, attribute, parse(value))

    def _rebuild_fields(self) -> None:
        for attribute, factory in _FIELD_DEFAULTS.items():
            setattr(self, attribute, factory())
        self.tile = Tile()
        for entry in self.tags:
            self._apply_field(entry.token, entry.value)  # type: ignore[arg-type]

    # === TAG OPERATIONS USED BY CREATURE VARIATIONS ===

    def add_tag(self, key: str) -> None:
        self.parse_tag(key, "")

    def add_tag_and_value(self, key: str, value: str) -> None:
        self.parse_tag(key, value)

    def remove_tag(self, key: str) -> bool:
        return self._remove(key, None)

    def remove_tag_and_value(self, key: str, value: str) -> bool:
        return self._remove(key, value)

    # The *_for_caste variants leave the caste selection as they found it

    def add_tag_for_caste(self, key: str, caste: str) -> None:
        with self._caste_selected(caste):
            self.add_tag(key)

    def add_tag_and_value_for_caste(self, key: str, value: str, caste: str) -> None:
        with self._caste_selected(caste):
            self.add_tag_and_value(key, value)

    def remove_tag_for_caste(self, key: str, caste: str) -> bool:
        with self._caste_selected(caste):
            return self.remove_tag(key)

    def remove_tag_and_value_for_caste(self, key: str, value: str, caste: str) -> bool:
        with self._caste_selected(caste):
            return self.remove_tag_and_value(key, value)

    @contextmanager
    def _caste_selected(self, caste: str) -> Iterator[Caste]:
        previous = list(self.selected_castes)
        try:
            yield self.select_caste(caste)
        finally:
            self.selected_castes = previous

    def _remove(self, key: str, value: Optional[str]) -> bool:
        token = CREATURE_TOKENS.get(key)
        if token is CreatureTag.COPY_TAGS_FROM:
            return _remove_pending(self.copy_tags_from, value)
        if token is CreatureTag.APPLY_CREATURE_VARIATION:
            return _remove_pending(self.apply_creature_variation, value)
        if token is not None:
            removed = remove_entries(self.tags, key, value)
            if removed:
                self._rebuild_fields()
            return removed

        removed = False
        for caste in self._selected():
            if value is None:
                removed = caste.remove_tag(key) or removed
            else:
                removed = caste.remove_tag_and_value(key, value) or removed
        return removed

    def has_tag(self, key: str, value: Optional[str] = None) -> bool:
        """Whether the creature or any caste carries ``key`` (with ``value``)."""
        if any(
            tag.key == key and (value is None or tag.value == value)
            for tag in self.tags
        ):
            return True
        return any(caste.has_tag(key, value) for caste in self.castes)

    # === MERGING ===

    def copy_tags_from_creature(self, source: "Creature") -> None:
        """Merge ``source`` underneath this creature.

        Identity (identifier, object id, metadata) stays with this creature.
        Castes present in both are merged with this creature's values winning;
        castes only ``source`` has are copied in.
        """
        if source.object_type is not ObjectType.CREATURE:
            raise UnexpectedObjectTypeError(
                f"Cannot copy tags from {source.object_type.value} {source.identifier}"
            )
        merged_tags: List[TagEntry] = []
        for entry in source.tags + self.tags:
            if entry not in merged_tags:
                merged_tags.append(entry)
        self.tags = merged_tags
        self._rebuild_fields()

        castes: List[Caste] = []
        for source_caste in source.castes:
            own = self.get_caste(source_caste.identifier)
            if own is None:
                castes.append(copy.deepcopy(source_caste))
            else:
                own.absorb(source_caste)
                castes.append(own)
        known = {caste.identifier for caste in castes}
        castes.extend(caste for caste in self.castes if caste.identifier not in known)
        self.castes = castes
        self.selected_castes = [ALL_CASTES]

    def get_child_object_ids(self) -> List[str]:
        return list(self.child_object_ids)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            compact_dict(
                {
                    "name": None if self.name.is_empty() else self.name.to_dict(),
                    "general_baby_name": None
                    if self.general_baby_name.is_empty()
                    else self.general_baby_name.to_dict(),
                    "general_child_name": None
                    if self.general_child_name.is_empty()
                    else self.general_child_name.to_dict(),
                    "tags": render_tags(self.tags),
                    "biomes": self.biomes,
                    "pref_strings": self.pref_strings,
                    "tile": self.tile.to_dict(),
                    "frequency": self.frequency,
                    "cluster_number": self.cluster_number,
                    "population_number": self.population_number,
                    "underground_depth": self.underground_depth,
                    "castes": [caste.to_dict() for caste in self.castes],
                    "copy_tags_from": self.copy_tags_from,
                    "apply_creature_variation": self.apply_creature_variation,
                    "child_object_ids": self.child_object_ids,
                }
            )
        )
        return data


def _remove_pending(pending: List[str], value: Optional[str]) -> bool:
    before = len(pending)
    pending[:] = [item for item in pending if value is not None and item != value]
    return len(pending) != before
