"""
Small value types shared by the raw models.

Every ``from_value`` parser is lenient: malformed input produces a default
value instead of raising.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class TagEntry(NamedTuple):
    """A recognised token together with its raw value."""
    token: Enum
    value: str = ""

    @property
    def key(self) -> str:
        return str(self.token.value)

    def render(self) -> str:
        """Render as ``KEY`` or ``KEY:value``."""
        return f"{self.key}:{self.value}" if self.value else self.key


def parse_int(value: str, default: int = 0) -> int:
    """Parse an integer, returning ``default`` on failure."""
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        return default


def parse_min_max(value: str, default: Optional[List[int]] = None) -> List[int]:
    """Parse a ``min:max`` range into a two element list."""
    fallback = list(default) if default is not None else [0, 0]
    parts = value.split(":")
    if len(parts) < 2:
        logger.debug(f"Invalid min:max range '{value}'")
        return fallback
    try:
        return [int(parts[0]), int(parts[1])]
    except ValueError:
        logger.debug(f"Invalid min:max range '{value}'")
        return fallback


@dataclass
class SingPlurName:
    """A singular/plural name pair."""
    singular: str = ""
    plural: str = ""

    @classmethod
    def from_value(cls, value: str) -> "SingPlurName":
        parts = value.split(":")
        singular = parts[0] if parts else ""
        plural = parts[1] if len(parts) > 1 else singular
        return cls(singular=singular, plural=plural)

    def is_empty(self) -> bool:
        return not self.singular and not self.plural

    def to_dict(self) -> Dict[str, str]:
        return {"singular": self.singular, "plural": self.plural}


@dataclass
class Name:
    """A singular/plural/adjective name triple."""
    singular: str = ""
    plural: str = ""
    adjective: str = ""

    @classmethod
    def from_value(cls, value: str) -> "Name":
        parts = value.split(":")
        singular = parts[0] if parts else ""
        plural = parts[1] if len(parts) > 1 else singular
        adjective = parts[2] if len(parts) > 2 else singular
        return cls(singular=singular, plural=plural, adjective=adjective)

    def is_empty(self) -> bool:
        return not (self.singular or self.plural or self.adjective)

    def to_dict(self) -> Dict[str, str]:
        return {
            "singular": self.singular,
            "plural": self.plural,
            "adjective": self.adjective,
        }


@dataclass
class Tile:
    """Map glyphs and colour for an object."""
    character: str = ""
    alt_character: str = ""
    color: str = ""
    glow_character: str = ""
    glow_color: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {key: value for key, value in vars(self).items() if value}


@dataclass
class BodySize:
    """One ``BODY_SIZE:years:days:size`` growth point."""
    years: int = 0
    days: int = 0
    size_cm3: int = 0

    @classmethod
    def from_value(cls, value: str) -> "BodySize":
        parts = value.split(":")
        if len(parts) != 3:
            logger.debug(f"Invalid BODY_SIZE value '{value}'")
            return cls()
        return cls(
            years=parse_int(parts[0]),
            days=parse_int(parts[1]),
            size_cm3=parse_int(parts[2]),
        )

    def to_dict(self) -> Dict[str, int]:
        return {"years": self.years, "days": self.days, "size_cm3": self.size_cm3}


@dataclass
class Milkable:
    """``MILKABLE:material:frequency``."""
    material: str = ""
    frequency: int = 0

    @classmethod
    def from_value(cls, value: str) -> "Milkable":
        material, _, frequency = value.rpartition(":")
        if not material:
            return cls(material=frequency)
        return cls(material=material, frequency=parse_int(frequency))

    def is_empty(self) -> bool:
        return not self.material

    def to_dict(self) -> Dict[str, Any]:
        return {"material": self.material, "frequency": self.frequency}


GAIT_TYPES = ("WALK", "CLIMB", "SWIM", "CRAWL", "FLY")


@dataclass
class Gait:
    """A movement gait.

    Written in the raws as
    ``GAIT:type:name:full speed:build up time:turning max:start speed:energy use``
    followed by optional modifiers. ``NO_BUILD_UP`` replaces the three build up
    numbers when the creature reaches full speed immediately.
    """
    gait_type: str = ""
    name: str = ""
    max_speed: int = 0
    build_up_time: Optional[int] = None
    turning_max: int = 0
    start_speed: int = 0
    energy_use: int = 0
    modifiers: List[str] = field(default_factory=list)
    stealth_slows: Optional[int] = None

    @classmethod
    def from_value(cls, value: str) -> "Gait":
        parts = value.split(":")
        gait = cls()
        if not parts or not parts[0]:
            logger.debug(f"Empty GAIT value '{value}'")
            return gait
        gait.gait_type = parts[0]
        if gait.gait_type not in GAIT_TYPES:
            logger.debug(f"Unusual gait type '{gait.gait_type}' in '{value}'")
        rest = parts[1:]
        gait.name = rest.pop(0) if rest else ""
        gait.max_speed = parse_int(rest.pop(0)) if rest else 0

        if rest:
            build_up = rest.pop(0)
            if build_up == "NO_BUILD_UP":
                gait.modifiers.append("NO_BUILD_UP")
            else:
                gait.build_up_time = parse_int(build_up)
                gait.turning_max = parse_int(rest.pop(0)) if rest else 0
                gait.start_speed = parse_int(rest.pop(0)) if rest else 0

        gait.energy_use = parse_int(rest.pop(0)) if rest else 0

        while rest:
            modifier = rest.pop(0)
            if modifier == "STEALTH_SLOWS":
                if rest:
                    gait.stealth_slows = parse_int(rest.pop(0))
                else:
                    logger.warning(f"STEALTH_SLOWS is missing a value in '{value}'")
            elif modifier:
                gait.modifiers.append(modifier)
        return gait

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "gait_type": self.gait_type,
            "name": self.name,
            "max_speed": self.max_speed,
            "energy_use": self.energy_use,
        }
        if self.build_up_time is not None:
            data["build_up_time"] = self.build_up_time
            data["turning_max"] = self.turning_max
            data["start_speed"] = self.start_speed
        if self.modifiers:
            data["modifiers"] = list(self.modifiers)
        if self.stealth_slows is not None:
            data["stealth_slows"] = self.stealth_slows
        return data


def compact_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose values are None or empty collections/strings."""
    return {
        key: value
        for key, value in data.items()
        if value is not None and value != "" and value != [] and value != {}
    }
