"""
Creature castes.

A caste keeps every recognised token it received, in order, as a list of
``TagEntry``. The typed fields below are derived from that list, so removing
or merging tags only needs to touch the list and rebuild the affected fields.
"""

import logging
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..tokens import CASTE_TOKEN_ALIASES, CASTE_TOKENS, CasteTag
from .base import remove_entries, render_tags
from .values import (
    BodySize,
    Gait,
    Milkable,
    Name,
    SingPlurName,
    TagEntry,
    Tile,
    compact_dict,
    parse_int,
    parse_min_max,
)

logger = logging.getLogger(__name__)

# token -> (attribute, value parser, accumulates)
_FIELD_PARSERS: Dict[CasteTag, Tuple[str, Callable[[str], Any], bool]] = {
    CasteTag.DESCRIPTION: ("description", str, False),
    CasteTag.BABYNAME: ("baby_name", SingPlurName.from_value, False),
    CasteTag.CHILDNAME: ("child_name", SingPlurName.from_value, False),
    CasteTag.CASTE_NAME: ("caste_name", Name.from_value, False),
    CasteTag.CLUTCH_SIZE: ("clutch_size", parse_min_max, False),
    CasteTag.LITTERSIZE: ("litter_size", parse_min_max, False),
    CasteTag.MAXAGE: ("max_age", parse_min_max, False),
    CasteTag.BABY: ("baby", parse_int, False),
    CasteTag.CHILD: ("child", parse_int, False),
    CasteTag.DIFFICULTY: ("difficulty", parse_int, False),
    CasteTag.EGG_SIZE: ("egg_size", parse_int, False),
    CasteTag.GRASSTRAMPLE: ("grass_trample", parse_int, False),
    CasteTag.GRAZER: ("grazer", parse_int, False),
    CasteTag.LOW_LIGHT_VISION: ("low_light_vision", parse_int, False),
    CasteTag.PETVALUE: ("pet_value", parse_int, False),
    CasteTag.POP_RATIO: ("pop_ratio", parse_int, False),
    CasteTag.CHANGE_BODY_SIZE_PERC: ("change_body_size_percentage", parse_int, False),
    CasteTag.CREATURE_CLASS: ("creature_class", str, True),
    CasteTag.BODY_SIZE: ("body_size", BodySize.from_value, True),
    CasteTag.MILKABLE: ("milkable", Milkable.from_value, False),
    CasteTag.GAIT: ("gaits", Gait.from_value, True),
}

_TILE_FIELDS: Dict[CasteTag, str] = {
    CasteTag.CASTE_TILE: "character",
    CasteTag.CASTE_ALTTILE: "alt_character",
    CasteTag.CASTE_COLOR: "color",
    CasteTag.CASTE_GLOWTILE: "glow_character",
    CasteTag.CASTE_GLOWCOLOR: "glow_color",
}


def resolve_caste_token(key: str) -> Optional[CasteTag]:
    """Look up a caste token, honouring alternative spellings."""
    return CASTE_TOKENS.get(CASTE_TOKEN_ALIASES.get(key, key))


@dataclass
class Caste:
    """One caste of a creature. ``ALL`` holds defaults for every caste."""
    identifier: str = "ALL"
    tags: List[TagEntry] = field(default_factory=list)

    description: str = ""
    baby_name: SingPlurName = field(default_factory=SingPlurName)
    child_name: SingPlurName = field(default_factory=SingPlurName)
    caste_name: Name = field(default_factory=Name)
    clutch_size: List[int] = field(default_factory=list)
    litter_size: List[int] = field(default_factory=list)
    max_age: List[int] = field(default_factory=list)
    baby: Optional[int] = None
    child: Optional[int] = None
    difficulty: Optional[int] = None
    egg_size: Optional[int] = None
    grass_trample: Optional[int] = None
    grazer: Optional[int] = None
    low_light_vision: Optional[int] = None
    pet_value: Optional[int] = None
    pop_ratio: Optional[int] = None
    change_body_size_percentage: Optional[int] = None
    creature_class: List[str] = field(default_factory=list)
    body_size: List[BodySize] = field(default_factory=list)
    milkable: Milkable = field(default_factory=Milkable)
    tile: Tile = field(default_factory=Tile)
    gaits: List[Gait] = field(default_factory=list)

    @staticmethod
    def accepts(key: str) -> bool:
        """Whether ``key`` is a caste-level token."""
        return resolve_caste_token(key) is not None

    def has_tag(self, key: str, value: Optional[str] = None) -> bool:
        return any(
            tag.key == key and (value is None or tag.value == value)
            for tag in self.tags
        )

    def get_tag_values(self, key: str) -> List[str]:
        """Values of every entry with ``key``, in order."""
        return [tag.value for tag in self.tags if tag.key == key]

    def parse_tag(self, key: str, value: str) -> None:
        """Record a caste token and update the typed field it maps to."""
        token = resolve_caste_token(key)
        if token is None:
            logger.debug(f"Caste {self.identifier}: unknown tag {key} with value '{value}'")
            return
        entry = TagEntry(token, value)
        if not value and entry in self.tags:
            return
        self.tags.append(entry)
        self._apply_field(token, value)

    def remove_tag(self, key: str) -> bool:
        """Remove every entry for ``key``."""
        token = resolve_caste_token(key)
        if token is None:
            return False
        removed = remove_entries(self.tags, token.value)
        if removed:
            self._rebuild_field(token)
        return removed

    def remove_tag_and_value(self, key: str, value: str) -> bool:
        """Remove entries for ``key`` whose value is exactly ``value``."""
        token = resolve_caste_token(key)
        if token is None:
            return False
        removed = remove_entries(self.tags, token.value, value)
        if removed:
            self._rebuild_field(token)
        return removed

    def absorb(self, source: "Caste") -> None:
        """Merge ``source`` underneath this caste.

        Entries from ``source`` come first so that this caste's own values win
        for single-valued fields; list fields end up holding both.
        """
        merged: List[TagEntry] = []
        for entry in source.tags + self.tags:
            if not entry.value and entry in merged:
                continue
            merged.append(entry)
        self.tags = merged
        self._rebuild_all()

    def _apply_field(self, token: CasteTag, value: str) -> None:
        if token in _TILE_FIELDS:
            setattr(self.tile, _TILE_FIELDS[token], value)
            return
        parser = _FIELD_PARSERS.get(token)
        if parser is None:
            return
        attribute, parse, accumulates = parser
        parsed = parse(value)
        if accumulates:
            getattr(self, attribute).append(parsed)
        else:
            setattr(self, attribute, parsed)

    def _rebuild_field(self, token: CasteTag) -> None:
        if token in _TILE_FIELDS:
            setattr(self.tile, _TILE_FIELDS[token], "")
        elif token in _FIELD_PARSERS:
            attribute = _FIELD_PARSERS[token][0]
            setattr(self, attribute, _default_for(attribute))
        else:
            return
        for entry in self.tags:
            if entry.token is token:
                self._apply_field(token, entry.value)

    def _rebuild_all(self) -> None:
        for attribute, _, _ in _FIELD_PARSERS.values():
            setattr(self, attribute, _default_for(attribute))
        self.tile = Tile()
        for entry in self.tags:
            self._apply_field(entry.token, entry.value)  # type: ignore[arg-type]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict, omitting unset fields."""
        data: Dict[str, Any] = {
            "identifier": self.identifier,
            "tags": render_tags(self.tags),
            "description": self.description,
            "baby_name": None if self.baby_name.is_empty() else self.baby_name.to_dict(),
            "child_name": None if self.child_name.is_empty() else self.child_name.to_dict(),
            "caste_name": None if self.caste_name.is_empty() else self.caste_name.to_dict(),
            "clutch_size": self.clutch_size,
            "litter_size": self.litter_size,
            "max_age": self.max_age,
            "baby": self.baby,
            "child": self.child,
            "difficulty": self.difficulty,
            "egg_size": self.egg_size,
            "grass_trample": self.grass_trample,
            "grazer": self.grazer,
            "low_light_vision": self.low_light_vision,
            "pet_value": self.pet_value,
            "pop_ratio": self.pop_ratio,
            "change_body_size_percentage": self.change_body_size_percentage,
            "creature_class": self.creature_class,
            "body_size": [size.to_dict() for size in self.body_size],
            "milkable": None if self.milkable.is_empty() else self.milkable.to_dict(),
            "tile": self.tile.to_dict(),
            "gaits": [gait.to_dict() for gait in self.gaits],
        }
        return compact_dict(data)


def _default_for(attribute: str) -> Any:
    for caste_field in fields(Caste):
        if caste_field.name == attribute:
            if caste_field.default_factory is not MISSING:
                return caste_field.default_factory()
            return caste_field.default
    raise AttributeError(attribute)
