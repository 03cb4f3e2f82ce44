"""Tests for module discovery and module info files."""

import logging
from pathlib import Path

import pytest


class TestInfoFile:
    """Test parsing info.txt."""

    def test_parse(self, module_dir: Path) -> None:
        """Test the module fields and derived object id."""
        from dfraw_parser.metadata import RawModuleLocation
        from dfraw_parser.raws import InfoFile

        info = InfoFile.parse(module_dir / "info.txt")

        assert info.identifier == "vanilla_creatures"
        assert info.numeric_version == 5001
        assert info.displayed_version == "50.01"
        assert info.author == "Bay 12 Games"
        assert info.name == "Creatures"
        assert info.location is RawModuleLocation.VANILLA
        assert info.parent_directory == "vanilla_creatures"
        assert info.object_id == "Vanilla-MODULE-vanilla-creatures"

    def test_version_falls_back_to_digits(self, tmp_path: Path, caplog) -> None:
        """Test a non-integer numeric version keeps its digits."""
        from dfraw_parser.raws import InfoFile

        path = tmp_path / "mods" / "more_toads" / "info.txt"
        path.parent.mkdir(parents=True)
        path.write_text(
            "[ID:more_toads]\n[NUMERIC_VERSION:1.2a]\n[REQUIRES_ID:vanilla_creatures]\n"
            "[STEAM_TAG:toads][STEAM_FILE_ID:123]\n",
            encoding="latin-1",
        )
        with caplog.at_level(logging.WARNING):
            info = InfoFile.parse(path)

        assert info.numeric_version == 12
        assert "should be an integer" in caplog.text
        assert info.name == "more_toads"
        assert info.requires_ids == ["vanilla_creatures"]
        assert info.steam_data.tags == ["toads"]
        assert info.to_dict()["steam_data"] == {"tags": ["toads"], "file_id": 123}

    def test_missing_info_file(self, tmp_path: Path) -> None:
        """Test a missing info.txt raises NothingToParseError."""
        from dfraw_parser.errors import NothingToParseError
        from dfraw_parser.raws import InfoFile

        with pytest.raises(NothingToParseError):
            InfoFile.parse(tmp_path / "info.txt")

    def test_metadata_for_raw_file(self, module_dir: Path) -> None:
        """Test module name and version flow into raw metadata."""
        from dfraw_parser.metadata import ObjectType
        from dfraw_parser.raws import InfoFile

        info = InfoFile.parse(module_dir / "info.txt")
        metadata = info.metadata_for(
            module_dir / "objects" / "creature_test.txt",
            raw_identifier="creature_test",
            object_type=ObjectType.CREATURE,
        )

        assert metadata.module_name == "Creatures"
        assert metadata.module_version == "5001"
        assert metadata.module_identifier == "vanilla-creatures-5001"
        assert metadata.hidden


class TestDiscovery:
    """Test finding modules and raw files."""

    def test_find_raw_files(self, module_dir: Path) -> None:
        """Test only text files under objects/ and graphics/ are found, sorted."""
        from dfraw_parser.discovery import find_raw_files

        (module_dir / "graphics").mkdir()
        (module_dir / "graphics" / "graphics_creatures.txt").write_text("x", encoding="latin-1")
        (module_dir / "readme.txt").write_text("x", encoding="latin-1")

        names = [path.name for path in find_raw_files(module_dir)]
        assert names == [
            "graphics_creatures.txt",
            "c_variation_test.txt",
            "creature_select.txt",
            "creature_test.txt",
            "language_words.txt",
        ]

    def test_discover_location(self, df_dir: Path) -> None:
        """Test modules are found under data/vanilla."""
        from dfraw_parser.discovery import discover_location
        from dfraw_parser.metadata import RawModuleLocation

        (df_dir / "data" / "vanilla" / "not_a_module").mkdir()
        modules = discover_location(df_dir, RawModuleLocation.VANILLA)

        assert [module.info.identifier for module in modules] == ["vanilla_creatures"]
        assert modules[0].location is RawModuleLocation.VANILLA
        assert len(modules[0].raw_files()) == 4

    def test_missing_location_is_empty(self, df_dir: Path) -> None:
        """Test a location directory that does not exist yields nothing."""
        from dfraw_parser.discovery import discover_location
        from dfraw_parser.metadata import RawModuleLocation

        assert discover_location(df_dir, RawModuleLocation.MODS) == []
        assert discover_location(df_dir, RawModuleLocation.LEGENDS_EXPORT) == []

    def test_location_names_and_paths(self) -> None:
        """Test location parsing from names and from paths."""
        from dfraw_parser.metadata import RawModuleLocation

        assert RawModuleLocation.from_name("installed-mods") is RawModuleLocation.INSTALLED_MODS
        assert RawModuleLocation.from_name("Vanilla") is RawModuleLocation.VANILLA
        assert (
            RawModuleLocation.from_path(Path("df/data/installed_mods/x/info.txt"))
            is RawModuleLocation.INSTALLED_MODS
        )
        assert RawModuleLocation.from_path(Path("df/mods/x/info.txt")) is RawModuleLocation.MODS
        with pytest.raises(ValueError):
            RawModuleLocation.from_name("steam")


class TestTokenizer:
    """Test the bracket tokenizer."""

    def test_iter_tokens(self) -> None:
        """Test tokens are found among free text, empty values included."""
        from dfraw_parser.tokens import tokenize_line

        line = "a toad [CREATURE:TOAD] with [LARGE_ROAMING] and [NAME:toad:toads:toad]"
        assert tokenize_line(line) == [
            ("CREATURE", "TOAD"),
            ("LARGE_ROAMING", ""),
            ("NAME", "toad:toads:toad"),
        ]

    def test_split_raw_line(self) -> None:
        """Test stored lines split back into key and value."""
        from dfraw_parser.errors import InvalidTokenError
        from dfraw_parser.tokens import join_token, split_raw_line

        assert split_raw_line("GAIT:WALK:Walk:10") == ("GAIT", "WALK:Walk:10")
        assert split_raw_line("[FLIER]") == ("FLIER", "")
        assert join_token("FLIER", "") == "FLIER"
        with pytest.raises(InvalidTokenError):
            split_raw_line(":value")


class TestObjectTypes:
    """Test object type lookup."""

    def test_from_token(self) -> None:
        """Test OBJECT values map to types, unknown values to UNKNOWN."""
        from dfraw_parser.metadata import ObjectType

        assert ObjectType.from_token("creature_variation") is ObjectType.CREATURE_VARIATION
        assert ObjectType.from_token("NOT_A_TYPE") is ObjectType.UNKNOWN
        assert ObjectType.from_token("SELECT_CREATURE") is ObjectType.UNKNOWN

    def test_parsable_from_token(self) -> None:
        """Test only types the reader builds are accepted."""
        from dfraw_parser.errors import UnexpectedObjectTypeError
        from dfraw_parser.metadata import ObjectType

        assert ObjectType.parsable_from_token("GRAPHICS") is ObjectType.GRAPHICS
        with pytest.raises(UnexpectedObjectTypeError, match="LANGUAGE"):
            ObjectType.parsable_from_token("LANGUAGE")
