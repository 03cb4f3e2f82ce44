"""Tests for creature variation rules and their application."""

import logging


def _creature(identifier: str = "TOAD"):
    from dfraw_parser.metadata import RawMetadata
    from dfraw_parser.raws import Creature

    return Creature.new(identifier, RawMetadata(module_id="test", module_version="1"))


def _variation(*tokens):
    from dfraw_parser.metadata import RawMetadata
    from dfraw_parser.raws import CreatureVariation

    variation = CreatureVariation.new("TEST_VARIATION", RawMetadata())
    for key, value in tokens:
        variation.parse_tag(key, value)
    return variation


class TestArgumentSubstitution:
    """Test !ARGn placeholder substitution."""

    def test_with_args_substitutes_placeholders(self) -> None:
        """Test placeholders are replaced by the matching argument."""
        from dfraw_parser.raws import AddTag

        rule = AddTag(tag="GAIT", value="WALK:Walk:!ARG1:NO_BUILD_UP:0")
        assert rule.with_args(["900"]).value == "WALK:Walk:900:NO_BUILD_UP:0"

    def test_with_args_substitutes_tag(self) -> None:
        """Test placeholders in the tag itself are replaced too."""
        from dfraw_parser.raws import AddTag

        rule = AddTag(tag="!ARG2", value="!ARG1")
        substituted = rule.with_args(["A", "B"])
        assert substituted.tag == "B"
        assert substituted.value == "A"

    def test_empty_args_is_identity(self) -> None:
        """Test a rule without arguments comes back unchanged."""
        from dfraw_parser.raws import ConditionalAddTag

        rule = ConditionalAddTag(
            tag="FLIER", value="!ARG1", argument_index=1, argument_requirement="YES"
        )
        assert rule.with_args([]) == rule

    def test_out_of_range_placeholder_left_as_written(self, caplog) -> None:
        """Test a placeholder past the argument list stays literal and is logged."""
        from dfraw_parser.raws import AddTag

        with caplog.at_level(logging.WARNING):
            substituted = AddTag(tag="X", value="!ARG3").with_args(["1"])

        assert substituted.value == "!ARG3"
        assert "out of range" in caplog.text

    def test_with_args_does_not_mutate_rule(self) -> None:
        """Test rules stay reusable across creatures."""
        from dfraw_parser.raws import AddTag

        rule = AddTag(tag="GAIT", value="!ARG1")
        rule.with_args(["10"])
        assert rule.value == "!ARG1"

    def test_substitute_args_two_digit_index(self) -> None:
        """Test multi-digit placeholders are read as one index."""
        from dfraw_parser.raws import substitute_args

        args = [str(number) for number in range(1, 13)]
        assert substitute_args("!ARG12", args) == "12"


class TestConditionalRules:
    """Test argument-gated rules."""

    def test_conditional_add_fires_on_match(self) -> None:
        """Test the tag is added when the argument matches."""
        from dfraw_parser.raws import ConditionalAddTag

        creature = _creature()
        rule = ConditionalAddTag(tag="FLIER", argument_index=1, argument_requirement="YES")
        rule.apply(creature, ["YES"])
        assert creature.has_tag("FLIER")

    def test_conditional_add_skipped_on_mismatch(self) -> None:
        """Test nothing happens when the argument differs."""
        from dfraw_parser.raws import ConditionalAddTag

        creature = _creature()
        rule = ConditionalAddTag(tag="FLIER", argument_index=1, argument_requirement="YES")
        rule.apply(creature, ["NO"])
        assert not creature.has_tag("FLIER")

    def test_conditional_missing_argument_is_false(self) -> None:
        """Test a rule pointing past the arguments never fires."""
        from dfraw_parser.raws import ConditionalRemoveTag

        creature = _creature()
        creature.parse_tag("FLIER", "")
        rule = ConditionalRemoveTag(tag="FLIER", argument_index=2, argument_requirement="YES")
        rule.apply(creature, ["YES"])
        assert creature.has_tag("FLIER")

    def test_conditional_convert_fires_only_on_match(self) -> None:
        """Test CV_CONVERT_CTAG rewrites the value only when its argument matches."""
        from dfraw_parser.raws import ConditionalConvertTag

        creature = _creature()
        creature.parse_tag("PETVALUE", "10")
        rule = ConditionalConvertTag(
            tag="PETVALUE",
            target="10",
            replacement="!ARG2",
            argument_index=1,
            argument_requirement="YES",
        )

        rule.apply(creature, ["NO", "99"])
        assert creature.get_caste("ALL").get_tag_values("PETVALUE") == ["10"]

        rule.apply(creature, ["YES", "99"])
        assert creature.get_caste("ALL").get_tag_values("PETVALUE") == ["99"]


class TestVariationParsing:
    """Test building rules from CREATURE_VARIATION tokens."""

    def test_convert_rule_build_up(self) -> None:
        """Test CVCT tokens fill the convert rule opened before them."""
        from dfraw_parser.raws import ConvertTag

        variation = _variation(
            ("CV_CONVERT_TAG", ""),
            ("CVCT_MASTER", "FOO"),
            ("CVCT_TARGET", "BAR"),
            ("CVCT_REPLACEMENT", "BAZ"),
        )
        assert variation.rules == [ConvertTag(tag="FOO", target="BAR", replacement="BAZ")]

    def test_conditional_convert_rule_build_up(self) -> None:
        """Test CVCT tokens fill a rule opened by CV_CONVERT_CTAG."""
        from dfraw_parser.raws import ConditionalConvertTag

        variation = _variation(
            ("CV_CONVERT_CTAG", "1:YES"),
            ("CVCT_MASTER", "PETVALUE"),
            ("CVCT_TARGET", "10"),
            ("CVCT_REPLACEMENT", "!ARG2"),
        )
        assert variation.rules == [
            ConditionalConvertTag(
                tag="PETVALUE",
                target="10",
                replacement="!ARG2",
                argument_index=1,
                argument_requirement="YES",
            )
        ]

    def test_other_token_closes_convert_rule(self, caplog) -> None:
        """Test CVCT tokens after an unrelated rule are ignored."""
        from dfraw_parser.raws import AddTag, ConvertTag

        with caplog.at_level(logging.WARNING):
            variation = _variation(
                ("CV_CONVERT_TAG", ""),
                ("CVCT_MASTER", "FOO"),
                ("CV_ADD_TAG", "FLIER"),
                ("CVCT_REPLACEMENT", "BAZ"),
            )

        assert variation.rules == [ConvertTag(tag="FOO"), AddTag(tag="FLIER")]
        assert "without an open convert rule" in caplog.text

    def test_rule_accessors(self) -> None:
        """Test convert rules are listed separately, file order kept."""
        from dfraw_parser.raws import AddTag, ConvertTag, RemoveTag

        variation = _variation(
            ("CV_ADD_TAG", "FLIER"),
            ("CV_CONVERT_TAG", ""),
            ("CVCT_MASTER", "PETVALUE"),
            ("CV_REMOVE_TAG", "LARGE_ROAMING"),
        )

        assert variation.get_rules() == [
            AddTag(tag="FLIER"),
            ConvertTag(tag="PETVALUE"),
            RemoveTag(tag="LARGE_ROAMING"),
        ]
        assert variation.get_convert_rules() == [ConvertTag(tag="PETVALUE")]

    def test_conditional_rule_parsing(self) -> None:
        """Test CV_ADD_CTAG reads index, requirement, tag and value."""
        from dfraw_parser.raws import ConditionalAddTag

        variation = _variation(("CV_ADD_CTAG", "1:YES:BODY_SIZE:0:0:!ARG2"))
        assert variation.rules == [
            ConditionalAddTag(
                tag="BODY_SIZE",
                value="0:0:!ARG2",
                argument_index=1,
                argument_requirement="YES",
            )
        ]
        assert variation.argument_count == 2

    def test_malformed_conditional_becomes_unknown_rule(self) -> None:
        """Test a conditional with a non-numeric index is kept as UnknownRule."""
        from dfraw_parser.raws import UnknownRule

        variation = _variation(("CV_ADD_CTAG", "X:YES:FLIER"))
        assert variation.rules == [UnknownRule(key="CV_ADD_CTAG", value="X:YES:FLIER")]

    def test_unknown_rule_is_never_applied(self) -> None:
        """Test applying an UnknownRule leaves the creature alone."""
        from dfraw_parser.raws import UnknownRule

        creature = _creature()
        UnknownRule(key="CV_ADD_CTAG", value="X").apply(creature, ["1"])
        assert creature.castes[0].tags == []


class TestVariationApplication:
    """Test applying whole variations to creatures."""

    def test_rules_apply_in_declaration_order(self) -> None:
        """Test non-convert rules run in the order they were declared."""
        creature = _creature()
        variation = _variation(
            ("CV_NEW_TAG", "GAIT:WALK:Walk:!ARG1:NO_BUILD_UP:0"),
            ("CV_NEW_TAG", "GAIT:CRAWL:Crawl:!ARG2:NO_BUILD_UP:0"),
        )
        variation.apply_to(creature, ["10", "20"])

        assert creature.get_caste("ALL").get_tag_values("GAIT") == [
            "WALK:Walk:10:NO_BUILD_UP:0",
            "CRAWL:Crawl:20:NO_BUILD_UP:0",
        ]

    def test_convert_rules_apply_in_reverse(self) -> None:
        """Test the last declared convert rule runs first."""
        creature = _creature()
        creature.parse_tag("PETVALUE", "10")
        variation = _variation(
            ("CV_CONVERT_TAG", ""),
            ("CVCT_MASTER", "PETVALUE"),
            ("CVCT_TARGET", "10"),
            ("CVCT_REPLACEMENT", "20"),
            ("CV_CONVERT_TAG", ""),
            ("CVCT_MASTER", "PETVALUE"),
            ("CVCT_TARGET", "20"),
            ("CVCT_REPLACEMENT", "30"),
        )
        variation.apply_to(creature, [])

        caste = creature.get_caste("ALL")
        assert caste.get_tag_values("PETVALUE") == ["20"]
        assert caste.pet_value == 20

    def test_remove_tag_with_value_only_removes_exact_match(self) -> None:
        """Test CV_REMOVE_TAG with a value keeps other values of the tag."""
        creature = _creature()
        creature.parse_tag("BIOME", "MOUNTAIN")
        creature.parse_tag("BIOME", "DESERT_SAND")
        variation = _variation(("CV_REMOVE_TAG", "BIOME:MOUNTAIN"))
        variation.apply_to(creature, [])

        assert creature.biomes == ["DESERT_SAND"]

    def test_application_resets_caste_selection(self) -> None:
        """Test rules target the ALL caste even if another was selected before."""
        creature = _creature()
        creature.select_caste("FEMALE")
        _variation(("CV_ADD_TAG", "FLIER")).apply_to(creature, [])

        assert creature.get_caste("ALL").has_tag("FLIER")
        assert not creature.get_caste("FEMALE").has_tag("FLIER")

    def test_convert_without_target_swaps_every_value(self) -> None:
        """Test a convert rule with no target replaces whatever value the tag had."""
        from dfraw_parser.raws import ConvertTag

        creature = _creature()
        creature.parse_tag("PETVALUE", "10")
        ConvertTag(tag="PETVALUE", replacement="40").apply(creature, [])

        caste = creature.get_caste("ALL")
        assert caste.get_tag_values("PETVALUE") == ["40"]
        assert caste.pet_value == 40


class TestCasteScopedEdits:
    """Test the per-caste tag helpers on Creature."""

    def test_add_for_caste_restores_selection(self) -> None:
        """Test the tag lands on the named caste and the selection is kept."""
        creature = _creature()
        creature.select_caste("MALE")
        creature.add_tag_for_caste("FLIER", "FEMALE")
        creature.add_tag_and_value_for_caste("PETVALUE", "15", "FEMALE")

        assert creature.selected_castes == ["MALE"]
        female = creature.get_caste("FEMALE")
        assert female.has_tag("FLIER")
        assert female.pet_value == 15
        assert not creature.get_caste("MALE").has_tag("FLIER")

    def test_remove_for_caste_restores_selection(self) -> None:
        """Test removals only touch the named caste and report success."""
        creature = _creature()
        creature.add_tag_for_caste("FLIER", "FEMALE")
        creature.add_tag_and_value_for_caste("PETVALUE", "15", "FEMALE")
        creature.select_caste("MALE")
        creature.add_tag("FLIER")

        assert creature.remove_tag_for_caste("FLIER", "FEMALE")
        assert creature.remove_tag_and_value_for_caste("PETVALUE", "15", "FEMALE")
        assert not creature.remove_tag_for_caste("FLIER", "FEMALE")

        assert creature.selected_castes == ["MALE"]
        assert not creature.get_caste("FEMALE").has_tag("FLIER")
        assert creature.get_caste("FEMALE").get_tag_values("PETVALUE") == []
        assert creature.get_caste("MALE").has_tag("FLIER")
