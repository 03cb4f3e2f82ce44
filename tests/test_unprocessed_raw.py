"""Tests for modification capture and creature resolution."""

import logging

import pytest


def _unprocessed(identifier: str = "TOAD", raw_type=None):
    from dfraw_parser.metadata import ObjectType, RawMetadata
    from dfraw_parser.reader import UnprocessedRaw

    return UnprocessedRaw.new(
        raw_type or ObjectType.CREATURE,
        RawMetadata(module_id="test", module_version="1"),
        identifier,
    )


def _feed(unprocessed, *lines: str) -> None:
    from dfraw_parser.tokens import split_raw_line

    for line in lines:
        unprocessed.parse_tag(*split_raw_line(line))


class TestModificationCapture:
    """Test how body lines are recorded as modifications."""

    def test_plain_lines_compact_into_main_body(self) -> None:
        """Test consecutive plain lines share one MainRawBody."""
        from dfraw_parser.reader import MainRawBody

        unprocessed = _unprocessed()
        _feed(unprocessed, "NAME:toad:toads:toad", "BIOME:ANY_POOL")
        assert unprocessed.modifications == [
            MainRawBody(raws=["NAME:toad:toads:toad", "BIOME:ANY_POOL"])
        ]

    def test_adjacent_add_to_ending_merge(self) -> None:
        """Test two AddToEnding modifications in a row become one."""
        from dfraw_parser.reader import AddToEnding

        unprocessed = _unprocessed()
        unprocessed.add_modification(AddToEnding(raws=["PETVALUE:10"]))
        unprocessed.add_modification(AddToEnding(raws=["DIFFICULTY:2"]))
        assert unprocessed.modifications == [
            AddToEnding(raws=["PETVALUE:10", "DIFFICULTY:2"])
        ]

    def test_go_to_end_twice_keeps_one_section(self) -> None:
        """Test repeating GO_TO_END keeps appending to the same section."""
        from dfraw_parser.reader import AddToEnding, MainRawBody

        unprocessed = _unprocessed()
        _feed(
            unprocessed,
            "BODY_SIZE:0:0:50",
            "GO_TO_END",
            "PETVALUE:10",
            "GO_TO_END",
            "DIFFICULTY:2",
        )
        assert unprocessed.modifications == [
            MainRawBody(raws=["BODY_SIZE:0:0:50"]),
            AddToEnding(raws=["PETVALUE:10", "DIFFICULTY:2"]),
        ]

    def test_add_before_tag_merges_only_on_same_tag(self) -> None:
        """Test AddBeforeTag sections for different tags stay apart."""
        from dfraw_parser.reader import AddBeforeTag

        unprocessed = _unprocessed()
        _feed(unprocessed, "GO_TO_TAG:BODY", "A", "GO_TO_TAG:BODY", "B", "GO_TO_TAG:NAME", "C")
        assert unprocessed.modifications == [
            AddBeforeTag(raws=["A", "B"], tag="BODY"),
            AddBeforeTag(raws=["C"], tag="NAME"),
        ]

    def test_references_are_recorded_in_order(self) -> None:
        """Test COPY_TAGS_FROM and APPLY_CREATURE_VARIATION split the body."""
        from dfraw_parser.reader import ApplyCreatureVariation, CopyTagsFrom, MainRawBody

        unprocessed = _unprocessed("GIANT_TOAD")
        _feed(
            unprocessed,
            "COPY_TAGS_FROM:TOAD",
            "APPLY_CREATURE_VARIATION:GIANT:2",
            "NAME:giant toad",
        )
        assert unprocessed.modifications == [
            CopyTagsFrom(identifier="TOAD"),
            ApplyCreatureVariation(identifier="GIANT:2"),
            MainRawBody(raws=["NAME:giant toad"]),
        ]
        assert not unprocessed.is_simple()
        assert unprocessed.copy_sources() == ["TOAD"]


class TestInsertBeforeTag:
    """Test splicing lines before a tag."""

    def test_inserts_before_first_matching_line(self) -> None:
        """Test lines go in front of the first line for the tag."""
        from dfraw_parser.reader import insert_before_tag

        lines = ["NAME:toad", "BODY:BASIC_1PARTBODY", "BODY:TAIL"]
        assert insert_before_tag(lines, "BODY", ["X"]) == [
            "NAME:toad",
            "X",
            "BODY:BASIC_1PARTBODY",
            "BODY:TAIL",
        ]

    def test_tag_prefix_does_not_match_longer_tag(self) -> None:
        """Test BODY does not match BODY_SIZE."""
        from dfraw_parser.reader import insert_before_tag

        lines = ["BODY_SIZE:0:0:50", "BODY:BASIC_1PARTBODY"]
        assert insert_before_tag(lines, "BODY", ["X"]) == [
            "BODY_SIZE:0:0:50",
            "X",
            "BODY:BASIC_1PARTBODY",
        ]

    def test_missing_tag_appends_and_warns(self, caplog) -> None:
        """Test lines are appended when the tag is absent."""
        from dfraw_parser.reader import insert_before_tag

        with caplog.at_level(logging.WARNING):
            lines = insert_before_tag(["NAME:toad"], "BODY", ["X", "Y"])

        assert lines == ["NAME:toad", "X", "Y"]
        assert "BODY" in caplog.text


class TestCollapse:
    """Test folding modifications into one body."""

    def test_collapse_orders_sections(self) -> None:
        """Test start lines, main lines, end lines, then before-tag splices."""
        from dfraw_parser.reader import MainRawBody

        unprocessed = _unprocessed()
        _feed(
            unprocessed,
            "BODY_SIZE:0:0:50",
            "BODY:BASIC_1PARTBODY",
            "GO_TO_END",
            "PETVALUE:10",
            "GO_TO_START",
            "NAME:toad",
            "GO_TO_TAG:BODY",
            "BODY_DETAIL_PLAN:STANDARD_MATERIALS",
        )
        assert unprocessed.collapse() == [
            MainRawBody(
                raws=[
                    "NAME:toad",
                    "BODY_SIZE:0:0:50",
                    "BODY_DETAIL_PLAN:STANDARD_MATERIALS",
                    "BODY:BASIC_1PARTBODY",
                    "PETVALUE:10",
                ]
            )
        ]

    def test_collapse_keeps_references_around_body(self) -> None:
        """Test the body takes the place of the first line-carrying modification."""
        from dfraw_parser.reader import CopyTagsFrom, MainRawBody

        unprocessed = _unprocessed()
        _feed(unprocessed, "COPY_TAGS_FROM:TOAD", "NAME:toad", "GO_TO_END", "PETVALUE:10")
        assert unprocessed.collapse() == [
            CopyTagsFrom(identifier="TOAD"),
            MainRawBody(raws=["NAME:toad", "PETVALUE:10"]),
        ]

    def test_collapse_without_lines(self) -> None:
        """Test a body of references only collapses to the references."""
        from dfraw_parser.reader import CopyTagsFrom

        unprocessed = _unprocessed()
        _feed(unprocessed, "COPY_TAGS_FROM:TOAD")
        assert unprocessed.collapse() == [CopyTagsFrom(identifier="TOAD")]


class TestResolve:
    """Test building finished creatures."""

    def test_resolve_replays_body(self) -> None:
        """Test a simple body becomes a creature with the same identity."""
        from dfraw_parser.metadata import ObjectType

        unprocessed = _unprocessed()
        _feed(unprocessed, "NAME:toad:toads:toad", "CASTE:FEMALE", "PETVALUE:10")
        creature = unprocessed.resolve([], [])

        assert creature.object_type is ObjectType.CREATURE
        assert creature.identifier == "TOAD"
        assert creature.object_id == "test-1-CREATURE-toad"
        assert creature.name.plural == "toads"
        assert creature.get_caste("FEMALE").pet_value == 10

    def test_resolve_copies_tags_and_applies_variation(self) -> None:
        """Test references are resolved against the corpus."""
        from dfraw_parser.metadata import RawMetadata
        from dfraw_parser.raws import Creature, CreatureVariation

        base = Creature.new("TOAD", RawMetadata())
        base.parse_tag("BIOME", "ANY_POOL")
        variation = CreatureVariation.new("FLYING", RawMetadata())
        variation.parse_tag("CV_ADD_TAG", "FLIER")

        unprocessed = _unprocessed("GIANT_TOAD")
        _feed(unprocessed, "COPY_TAGS_FROM:toad", "APPLY_CREATURE_VARIATION:flying")
        creature = unprocessed.resolve([variation], [base])

        assert creature.biomes == ["ANY_POOL"]
        assert creature.has_tag("FLIER")
        assert creature.copy_tags_from == []

    def test_resolve_switches_skip_references(self) -> None:
        """Test copy_tags and apply_variations set to False leave references out."""
        from dfraw_parser.metadata import RawMetadata
        from dfraw_parser.raws import Creature, CreatureVariation

        base = Creature.new("TOAD", RawMetadata())
        base.parse_tag("BIOME", "ANY_POOL")
        variation = CreatureVariation.new("FLYING", RawMetadata())
        variation.parse_tag("CV_ADD_TAG", "FLIER")

        unprocessed = _unprocessed("GIANT_TOAD")
        _feed(unprocessed, "COPY_TAGS_FROM:TOAD", "APPLY_CREATURE_VARIATION:FLYING")
        creature = unprocessed.resolve(
            [variation], [base], copy_tags=False, apply_variations=False
        )

        assert creature.biomes == []
        assert not creature.has_tag("FLIER")

    def test_unknown_references_are_logged(self, caplog) -> None:
        """Test a missing source or variation does not stop resolution."""
        unprocessed = _unprocessed()
        _feed(
            unprocessed,
            "COPY_TAGS_FROM:NOPE",
            "APPLY_CREATURE_VARIATION:MISSING",
            "NAME:toad",
        )
        with caplog.at_level(logging.WARNING):
            creature = unprocessed.resolve([], [])

        assert creature.name.singular == "toad"
        assert "NOPE" in caplog.text
        assert "MISSING" in caplog.text

    def test_resolve_plant_not_implemented(self) -> None:
        """Test only creatures can be resolved."""
        from dfraw_parser.errors import NotYetImplementedError
        from dfraw_parser.metadata import ObjectType

        unprocessed = _unprocessed("OAK", ObjectType.PLANT)
        with pytest.raises(NotYetImplementedError):
            unprocessed.resolve([], [])
