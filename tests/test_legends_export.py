"""Tests for reading legends_plus XML exports."""

from pathlib import Path

import pytest

LEGENDS_XML = """<?xml version="1.0" encoding='UTF-8'?>
<df_world>
<creature_raw>
<creature>
<creature_id>toad</creature_id>
<name_singular>toad</name_singular>
<name_plural>toads</name_plural>
<has_male/>
<has_female/>
<biome_pool_temperate_freshwater/>
<large_roaming/>
</creature>
<creature>
<creature_id>FORGOTTEN_BEAST_1</creature_id>
<name_singular>Urist the Terrible</name_singular>
<name_plural>Urist the Terrible</name_plural>
<does_not_exist/>
</creature>
</creature_raw>
</df_world>
"""


@pytest.fixture
def legends_file(tmp_path: Path) -> Path:
    path = tmp_path / "region1-00250-01-01-legends_plus.xml"
    path.write_text(LEGENDS_XML, encoding="utf-8")
    return path


class TestLegendsExport:
    """Test creature records from legends exports."""

    def test_creatures_are_read(self, legends_file: Path) -> None:
        """Test identifiers, names, castes, biomes and flags."""
        from dfraw_parser.legends_export import parse_legends_export
        from dfraw_parser.metadata import RawModuleLocation

        creatures = parse_legends_export(legends_file)

        assert [creature.identifier for creature in creatures] == ["TOAD", "FORGOTTEN_BEAST_1"]
        toad = creatures[0]
        assert toad.name.singular == "toad"
        assert toad.name.plural == "toads"
        assert [caste.identifier for caste in toad.castes] == ["ALL", "MALE", "FEMALE"]
        assert toad.biomes == ["POOL_TEMPERATE_FRESHWATER"]
        assert toad.has_tag("LARGE_ROAMING")
        assert toad.metadata.module_location is RawModuleLocation.LEGENDS_EXPORT
        assert toad.object_id == "legends-export-0-CREATURE-toad"
        assert creatures[1].has_tag("DOES_NOT_EXIST")

    def test_metadata_attachment(self, legends_file: Path) -> None:
        """Test metadata is hidden unless asked for."""
        from dfraw_parser.legends_export import parse_legends_export

        assert parse_legends_export(legends_file)[0].metadata.hidden
        attached = parse_legends_export(legends_file, attach_metadata=True)[0]
        assert not attached.metadata.hidden
        assert attached.to_dict()["metadata"]["module_location"] == "LegendsExport"

    def test_missing_export(self, tmp_path: Path) -> None:
        """Test a missing file raises NothingToParseError."""
        from dfraw_parser.errors import NothingToParseError
        from dfraw_parser.legends_export import parse_legends_export

        with pytest.raises(NothingToParseError):
            parse_legends_export(tmp_path / "missing.xml")

    def test_export_in_full_parse(self, legends_file: Path) -> None:
        """Test exports are merged into the corpus by the orchestrator."""
        from dfraw_parser import ParserOptions, parse

        result = parse(ParserOptions(legends_exports_to_parse=[legends_file]))

        assert result.object_count == 2
        assert result.count_by_location() == {"LegendsExport": 2}
