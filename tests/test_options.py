"""Tests for ParserOptions and option validation."""

from pathlib import Path

import pytest


class TestParserOptions:
    """Test what the options ask for."""

    def test_defaults(self) -> None:
        """Test default object types and workers."""
        from dfraw_parser.metadata import DEFAULT_OBJECT_TYPES
        from dfraw_parser.options import ParserOptions

        options = ParserOptions()
        assert options.object_types_to_parse == DEFAULT_OBJECT_TYPES
        assert options.max_workers == 32
        assert not options.has_sources()

    def test_wants_and_needs(self) -> None:
        """Test variations are needed but not wanted when only creatures are asked for."""
        from dfraw_parser.metadata import ObjectType
        from dfraw_parser.options import ParserOptions

        options = ParserOptions(object_types_to_parse=[ObjectType.CREATURE])

        assert options.wants(ObjectType.CREATURE)
        assert options.wants(ObjectType.SELECT_CREATURE)
        assert not options.wants(ObjectType.CREATURE_VARIATION)
        assert options.needs(ObjectType.CREATURE_VARIATION)
        assert not options.needs(ObjectType.PLANT)

    def test_select_creature_follows_creature(self) -> None:
        """Test fragments are not kept when creatures are not asked for."""
        from dfraw_parser.metadata import ObjectType
        from dfraw_parser.options import ParserOptions

        options = ParserOptions(object_types_to_parse=[ObjectType.PLANT])
        assert not options.wants(ObjectType.SELECT_CREATURE)
        assert not options.needs(ObjectType.CREATURE_VARIATION)


class TestValidateOptions:
    """Test option validation."""

    def test_no_sources(self) -> None:
        """Test options without sources are rejected."""
        from dfraw_parser.errors import InvalidOptionsError
        from dfraw_parser.options import ParserOptions, validate_options

        with pytest.raises(InvalidOptionsError) as exc_info:
            validate_options(ParserOptions())
        assert any("Nothing to parse" in message for message in exc_info.value.messages)

    def test_locations_need_directory(self, tmp_path: Path) -> None:
        """Test locations without a game directory, or with a missing one, fail."""
        from dfraw_parser.errors import InvalidOptionsError
        from dfraw_parser.metadata import RawModuleLocation
        from dfraw_parser.options import ParserOptions, validate_options

        with pytest.raises(InvalidOptionsError) as exc_info:
            validate_options(ParserOptions(locations_to_parse=[RawModuleLocation.VANILLA]))
        assert "no Dwarf Fortress directory" in str(exc_info.value)

        with pytest.raises(InvalidOptionsError) as exc_info:
            validate_options(
                ParserOptions(
                    locations_to_parse=[RawModuleLocation.VANILLA],
                    dwarf_fortress_directory=tmp_path / "missing",
                )
            )
        assert "does not exist" in str(exc_info.value)

    def test_collects_every_problem(self, tmp_path: Path) -> None:
        """Test all problems are reported together."""
        from dfraw_parser.errors import InvalidOptionsError
        from dfraw_parser.options import ParserOptions, validate_options

        wrong_suffix = tmp_path / "export.txt"
        wrong_suffix.write_text("<df_world/>", encoding="utf-8")
        module_without_info = tmp_path / "module"
        module_without_info.mkdir()

        options = ParserOptions(
            raw_files_to_parse=[tmp_path / "missing.txt"],
            legends_exports_to_parse=[wrong_suffix],
            raw_modules_to_parse=[module_without_info],
            max_workers=0,
        )
        with pytest.raises(InvalidOptionsError) as exc_info:
            validate_options(options)

        messages = exc_info.value.messages
        assert len(messages) == 4
        assert any("Raw file does not exist" in message for message in messages)
        assert any("should be a .xml file" in message for message in messages)
        assert any("has no info.txt" in message for message in messages)
        assert any("max_workers" in message for message in messages)

    def test_valid_options_returned(self, df_dir: Path) -> None:
        """Test valid options come back unchanged."""
        from dfraw_parser.metadata import RawModuleLocation
        from dfraw_parser.options import ParserOptions, validate_options

        options = ParserOptions(
            locations_to_parse=[RawModuleLocation.VANILLA], dwarf_fortress_directory=df_dir
        )
        assert validate_options(options) is options
