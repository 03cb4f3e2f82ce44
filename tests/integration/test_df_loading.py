import os
from pathlib import Path
import pytest
from dfraw_parser import ObjectType, ParserOptions, RawModuleLocation, parse

DF_PATH = os.environ.get("DF_PATH") or "C:/Games/Dwarf Fortress"


def _creatures(result):
    return {
        raw.identifier: raw for raw in result.raws if raw.object_type is ObjectType.CREATURE
    }


@pytest.mark.skipif(not Path(DF_PATH).exists(), reason="Dwarf Fortress install not found")
def test_vanilla_dwarf():
    options = ParserOptions(
        dwarf_fortress_directory=Path(DF_PATH),
        locations_to_parse=[RawModuleLocation.VANILLA],
        object_types_to_parse=[ObjectType.CREATURE],
    )
    result = parse(options)
    dwarf = _creatures(result).get("DWARF")
    assert dwarf is not None, "DWARF not found"
    assert dwarf.name.singular == "dwarf"
    assert dwarf.get_caste("FEMALE") is not None
    assert dwarf.get_caste("MALE") is not None
    print(f"✓ {result.object_count} creatures parsed from {result.parsed_files} files")


@pytest.mark.skipif(not Path(DF_PATH).exists(), reason="Dwarf Fortress install not found")
def test_vanilla_gaits_resolved():
    options = ParserOptions(
        dwarf_fortress_directory=Path(DF_PATH),
        locations_to_parse=[RawModuleLocation.VANILLA],
        object_types_to_parse=[ObjectType.CREATURE],
    )
    creatures = _creatures(parse(options))
    # Vanilla toads get their gaits from STANDARD_WALK_CRAWL_GAITS
    toad = creatures.get("TOAD")
    assert toad is not None, "TOAD not found"
    assert toad.has_tag("GAIT")
    assert not any("!ARG" in value for value in toad.get_caste("ALL").get_tag_values("GAIT"))
