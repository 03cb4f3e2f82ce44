"""
Reading creatures from ``legends_plus`` XML exports.

The export lists every creature of a world as::

    <creature>
        <creature_id>TOAD</creature_id>
        <name_singular>toad</name_singular>
        <name_plural>toads</name_plural>
        <has_male/>
        <biome_pool_temperate_freshwater/>
        ...
    </creature>

Empty elements are flags. ``has_male`` and ``has_female`` declare castes,
``biome_*`` elements become biomes, anything else is handed to the creature as
a raw tag and ends up wherever the creature's token tables put it.
"""

import logging
from pathlib import Path
from typing import List

from lxml import etree

from .errors import NothingToParseError, RawIOError
from .metadata import ObjectType, RawMetadata, RawModuleLocation
from .raws import Creature

logger = logging.getLogger(__name__)

LEGENDS_MODULE_ID = "legends_export"

_CASTE_FLAGS = {"has_male": "MALE", "has_female": "FEMALE"}
_BIOME_PREFIX = "biome_"


def _metadata_for(path: Path, attach_metadata: bool) -> RawMetadata:
    return RawMetadata.for_file(
        path,
        raw_identifier=path.stem,
        object_type=ObjectType.CREATURE,
        module_id=LEGENDS_MODULE_ID,
        module_name=path.stem,
        location=RawModuleLocation.LEGENDS_EXPORT,
        attach_metadata=attach_metadata,
    )


def creature_from_element(element: etree._Element, metadata: RawMetadata) -> Creature:
    """Build a creature from one ``<creature>`` element."""
    fields = {child.tag: (child.text or "").strip() for child in element}
    identifier = fields.pop("creature_id", "").upper()
    creature = Creature.new(identifier, metadata)

    singular = fields.pop("name_singular", "")
    plural = fields.pop("name_plural", "")
    if singular or plural:
        creature.parse_tag("NAME", f"{singular}:{plural or singular}:{singular}")

    for tag, text in fields.items():
        if tag in _CASTE_FLAGS:
            creature.select_caste(_CASTE_FLAGS[tag])
            creature.select_caste("ALL")
        elif tag.startswith(_BIOME_PREFIX):
            creature.parse_tag("BIOME", tag[len(_BIOME_PREFIX):].upper())
        else:
            creature.parse_tag(tag.upper(), text)
    return creature


def parse_legends_export(path: Path, attach_metadata: bool = False) -> List[Creature]:
    """Read every creature from a legends export.

    The exports are frequently not well-formed, so the parser recovers from
    errors instead of failing.

    Raises:
        NothingToParseError: If the file does not exist
        RawIOError: If the file cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise NothingToParseError(f"No legends export at {path}")

    metadata = _metadata_for(path, attach_metadata)
    creatures: List[Creature] = []
    try:
        for _, element in etree.iterparse(
            str(path), events=("end",), tag="creature", recover=True, huge_tree=True
        ):
            creature = creature_from_element(element, metadata)
            if not creature.is_empty():
                creatures.append(creature)
            element.clear()
    except OSError as e:
        raise RawIOError(path, e) from e
    except etree.XMLSyntaxError as e:
        logger.error(f"Stopped reading {path.name} at a syntax error: {e}")

    logger.info(f"Read {len(creatures)} creatures from legends export {path.name}")
    return creatures
