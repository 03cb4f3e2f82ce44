"""Tests for JSON output."""

from pathlib import Path

import orjson
import pytest


def _toad(attach_metadata: bool = False):
    from dfraw_parser.metadata import RawMetadata
    from dfraw_parser.raws import Creature

    metadata = RawMetadata.for_file(
        Path("objects/creature_test.txt"),
        raw_identifier="creature_test",
        module_id="vanilla_creatures",
        module_version="5001",
        attach_metadata=attach_metadata,
    )
    toad = Creature.new("TOAD", metadata)
    toad.parse_tag("NAME", "toad:toads:toad")
    toad.parse_tag("BIOME", "ANY_POOL")
    return toad


class TestRawsToJson:
    """Test serializing raws."""

    def test_records_are_tagged(self) -> None:
        """Test every record carries its type and identity."""
        from dfraw_parser.output import raws_to_json

        records = orjson.loads(raws_to_json([_toad()]))

        assert len(records) == 1
        record = records[0]
        assert record["type"] == "CREATURE"
        assert record["identifier"] == "TOAD"
        assert record["object_id"] == "vanilla-creatures-5001-CREATURE-toad"
        assert record["name"] == {"singular": "toad", "plural": "toads", "adjective": "toad"}
        assert record["biomes"] == ["ANY_POOL"]
        assert "metadata" not in record
        assert "copy_tags_from" not in record

    def test_metadata_only_when_attached(self) -> None:
        """Test attached metadata is written."""
        from dfraw_parser.output import raws_to_json

        record = orjson.loads(raws_to_json([_toad(attach_metadata=True)]))[0]
        assert record["metadata"]["module_id"] == "vanilla_creatures"
        assert record["metadata"]["object_type"] == "CREATURE"

    def test_pretty_print(self) -> None:
        """Test pretty output is indented and compact output is one line."""
        from dfraw_parser.output import raws_to_json

        pretty = raws_to_json([_toad()], pretty_print=True)
        compact = raws_to_json([_toad()])

        assert b'\n  {\n    "type"' in pretty
        assert compact.count(b"\n") == 1
        assert orjson.loads(pretty) == orjson.loads(compact)

    def test_variation_rules_serialize(self) -> None:
        """Test variation rules are written with their kind."""
        from dfraw_parser.metadata import RawMetadata
        from dfraw_parser.output import raws_to_json
        from dfraw_parser.raws import CreatureVariation

        variation = CreatureVariation.new("FLYING", RawMetadata())
        variation.parse_tag("CV_ADD_CTAG", "1:YES:FLIER")
        record = orjson.loads(raws_to_json([variation]))[0]

        assert record["type"] == "CREATURE_VARIATION"
        assert record["argument_count"] == 0
        assert record["rules"] == [
            {
                "kind": "ConditionalAddTag",
                "tag": "FLIER",
                "argument_index": 1,
                "argument_requirement": "YES",
            }
        ]


class TestWriteJson:
    """Test writing output files."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test missing directories are created."""
        from dfraw_parser.output import write_json

        target = tmp_path / "out" / "nested" / "raws.json"
        write_json(b"[]\n", target)
        assert target.read_bytes() == b"[]\n"

    def test_requires_path(self) -> None:
        """Test a missing path is a ValueError."""
        from dfraw_parser.output import write_json

        with pytest.raises(ValueError):
            write_json(b"[]", None)

    def test_unwritable_path(self, tmp_path: Path) -> None:
        """Test OS errors are wrapped in RawIOError."""
        from dfraw_parser.errors import RawIOError
        from dfraw_parser.output import write_json

        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(RawIOError):
            write_json(b"[]", blocker / "raws.json")
