"""Tests for the command line interface."""

import logging
from pathlib import Path

import orjson
import pytest
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def cli_settings(app_settings, monkeypatch):
    """Settings without log handlers, handed to every command."""
    app_settings.console_logging = False
    app_settings.file_logging = False
    monkeypatch.setattr("dfraw_parser.cli.get_settings", lambda profile: app_settings)

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield app_settings
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestParseCommand:
    """Test `dfraw-parser parse`."""

    def test_parse_to_file(self, tmp_path: Path, df_dir: Path, cli_settings) -> None:
        """Test parsing a game directory into a JSON file."""
        from dfraw_parser.cli import app

        output = tmp_path / "out" / "raws.json"
        result = runner.invoke(
            app, ["parse", "--df-dir", str(df_dir), "--location", "vanilla", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        records = orjson.loads(output.read_bytes())
        assert sorted(record["identifier"] for record in records) == [
            "GIANT_TOAD",
            "STANDARD_WALK_CRAWL_GAITS",
            "TOAD",
        ]
        assert "Parsed 3 objects from 3 files, skipped 1 files, 0 failed" in result.output

    def test_parse_to_stdout(self, df_dir: Path, cli_settings) -> None:
        """Test JSON goes to stdout without an output path."""
        from dfraw_parser.cli import app

        result = runner.invoke(
            app, ["parse", "-d", str(df_dir), "-l", "vanilla", "-t", "CREATURE", "--pretty"]
        )

        assert result.exit_code == 0, result.output
        assert result.stdout.lstrip().startswith("[")
        assert '"identifier": "TOAD"' in result.stdout
        assert "STANDARD_WALK_CRAWL_GAITS" not in result.stdout

    def test_defaults_from_settings(self, tmp_path: Path, df_dir: Path, cli_settings) -> None:
        """Test the game directory, locations and output path come from settings."""
        from dfraw_parser.cli import app

        output = tmp_path / "from_settings.json"
        cli_settings.df_path = df_dir
        cli_settings.output_path = output
        cli_settings.attach_metadata = True

        result = runner.invoke(app, ["parse"])

        assert result.exit_code == 0, result.output
        records = orjson.loads(output.read_bytes())
        assert all(record["metadata"]["module_location"] == "Vanilla" for record in records)

    def test_raw_file_only(self, tmp_path: Path, module_dir: Path, cli_settings) -> None:
        """Test an explicit raw file does not pull in the default locations."""
        from dfraw_parser.cli import app

        output = tmp_path / "raws.json"
        result = runner.invoke(
            app,
            [
                "parse",
                "--raw-file",
                str(module_dir / "objects" / "creature_test.txt"),
                "--skip-variations",
                "-o",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        records = orjson.loads(output.read_bytes())
        assert [record["identifier"] for record in records] == ["TOAD", "GIANT_TOAD"]

    def test_invalid_options_exit_code(self, tmp_path: Path, cli_settings) -> None:
        """Test validation failures are reported with exit code 1."""
        from dfraw_parser.cli import app

        result = runner.invoke(app, ["parse", "--raw-file", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Raw file does not exist" in result.output

    def test_unknown_location(self, df_dir: Path, cli_settings) -> None:
        """Test an unknown location name is a usage error."""
        from dfraw_parser.cli import app

        result = runner.invoke(app, ["parse", "-d", str(df_dir), "-l", "steam"])
        assert result.exit_code == 2

    def test_unsupported_object_type(self, df_dir: Path, cli_settings) -> None:
        """Test object types the parser cannot build are rejected."""
        from dfraw_parser.cli import app

        result = runner.invoke(app, ["parse", "-d", str(df_dir), "-t", "LANGUAGE"])
        assert result.exit_code == 2
        assert "Unsupported object type: LANGUAGE" in result.output


class TestInfoCommand:
    """Test `dfraw-parser info`."""

    def test_info_lists_modules(self, tmp_path: Path, df_dir: Path, cli_settings) -> None:
        """Test module info files are written as JSON."""
        from dfraw_parser.cli import app

        output = tmp_path / "modules.json"
        result = runner.invoke(app, ["info", "-d", str(df_dir), "-o", str(output)])

        assert result.exit_code == 0, result.output
        modules = orjson.loads(output.read_bytes())
        assert len(modules) == 1
        assert modules[0]["identifier"] == "vanilla_creatures"
        assert modules[0]["object_id"] == "Vanilla-MODULE-vanilla-creatures"
        assert modules[0]["displayed_version"] == "50.01"

    def test_info_without_game_directory(self, cli_settings) -> None:
        """Test a missing game directory is an error."""
        from dfraw_parser.cli import app

        result = runner.invoke(app, ["info"])
        assert result.exit_code == 1


class TestConfigCommand:
    """Test `dfraw-parser config`."""

    def test_config_updates_settings(self, df_dir: Path, cli_settings) -> None:
        """Test flags are persisted and shown."""
        from dfraw_parser.cli import app
        from dfraw_parser.metadata import RawModuleLocation

        result = runner.invoke(
            app,
            ["config", "--df-dir", str(df_dir), "-l", "mods", "-l", "vanilla", "--pretty"],
        )

        assert result.exit_code == 0, result.output
        assert cli_settings.df_path == df_dir
        assert cli_settings.locations == [RawModuleLocation.MODS, RawModuleLocation.VANILLA]
        assert cli_settings.pretty_print is True
        assert "Pretty print: True" in result.output
        assert "Locations: Mods, Vanilla" in result.output

    def test_config_reports_invalid_settings(self, tmp_path: Path, cli_settings) -> None:
        """Test an invalid configuration exits with code 1."""
        from dfraw_parser.cli import app

        result = runner.invoke(app, ["config", "--df-dir", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Dwarf Fortress path does not exist" in result.output
