"""
Creature variation raw model.

A creature variation is a named list of rules that rewrite a creature's tags.
Convert rules are built over several tokens: ``CV_CONVERT_TAG`` (or
``CV_CONVERT_CTAG``) opens one, the following ``CVCT_MASTER``, ``CVCT_TARGET``
and ``CVCT_REPLACEMENT`` tokens fill it, and any other token closes it.
"""

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from ..metadata import ObjectType
from ..tokens import CREATURE_VARIATION_TOKENS, CreatureVariationTag
from .base import RawObject, TagTarget
from .variation_rules import (
    AddTag,
    ConditionalAddTag,
    ConditionalConvertTag,
    ConditionalRemoveTag,
    ConvertTag,
    NewTag,
    RemoveTag,
    Rule,
    UnknownRule,
    highest_argument_index,
)

_CONVERT_FIELDS = {
    CreatureVariationTag.CVCT_MASTER: "tag",
    CreatureVariationTag.CVCT_TARGET: "target",
    CreatureVariationTag.CVCT_REPLACEMENT: "replacement",
}


def split_variation_reference(reference: str) -> Tuple[str, List[str]]:
    """Split ``IDENTIFIER:arg1:arg2`` into the identifier and its arguments."""
    identifier, *args = reference.split(":")
    return identifier, args


@dataclass
class CreatureVariation(RawObject):
    """A reusable, parameterised set of creature tag rewrites."""
    object_type: ClassVar[ObjectType] = ObjectType.CREATURE_VARIATION

    rules: List[Rule] = field(default_factory=list)
    argument_count: int = 0
    open_convert_rule: Optional[int] = field(default=None, repr=False, compare=False)

    def get_rules(self) -> List[Rule]:
        return list(self.rules)

    def get_convert_rules(self) -> List[Rule]:
        return [rule for rule in self.rules if rule.is_convert]

    def parse_tag(self, key: str, value: str) -> None:
        logger = self._logger()
        token = CREATURE_VARIATION_TOKENS.get(key)
        self.argument_count = max(self.argument_count, highest_argument_index(value))

        if token in _CONVERT_FIELDS:
            self._fill_convert_rule(token, value)  # type: ignore[arg-type]
            return
        self.open_convert_rule = None

        if token is None:
            logger.warning(f"Creature variation {self.identifier}: unknown tag {key}")
            return

        parts = value.split(":")
        if token in (
            CreatureVariationTag.CV_NEW_TAG,
            CreatureVariationTag.CV_ADD_TAG,
            CreatureVariationTag.CV_REMOVE_TAG,
        ):
            tag, rest = parts[0], ":".join(parts[1:]) or None
            if not tag:
                logger.warning(f"Creature variation {self.identifier}: {key} without a tag")
                self.rules.append(UnknownRule(key=key, value=value))
            elif token is CreatureVariationTag.CV_REMOVE_TAG:
                self.rules.append(RemoveTag(tag=tag, value=rest))
            elif token is CreatureVariationTag.CV_NEW_TAG:
                self.rules.append(NewTag(tag=tag, value=rest))
            else:
                self.rules.append(AddTag(tag=tag, value=rest))
            return

        if token is CreatureVariationTag.CV_CONVERT_TAG:
            self.rules.append(ConvertTag())
            self.open_convert_rule = len(self.rules) - 1
            return

        # Conditional forms: index:requirement[:tag[:value...]]
        argument_index = _parse_argument_index(parts[0])
        if argument_index is None or len(parts) < 2:
            logger.warning(
                f"Creature variation {self.identifier}: malformed {key}:{value}"
            )
            self.rules.append(UnknownRule(key=key, value=value))
            return
        requirement = parts[1]

        if token is CreatureVariationTag.CV_CONVERT_CTAG:
            self.rules.append(
                ConditionalConvertTag(
                    argument_index=argument_index, argument_requirement=requirement
                )
            )
            self.open_convert_rule = len(self.rules) - 1
            return

        if len(parts) < 3 or not parts[2]:
            logger.warning(f"Creature variation {self.identifier}: {key} without a tag")
            self.rules.append(UnknownRule(key=key, value=value))
            return
        tag, rest = parts[2], ":".join(parts[3:]) or None
        if token is CreatureVariationTag.CV_REMOVE_CTAG:
            self.rules.append(
                ConditionalRemoveTag(
                    tag=tag,
                    value=rest,
                    argument_index=argument_index,
                    argument_requirement=requirement,
                )
            )
        else:
            self.rules.append(
                ConditionalAddTag(
                    tag=tag,
                    value=rest,
                    argument_index=argument_index,
                    argument_requirement=requirement,
                )
            )

    def _fill_convert_rule(self, token: CreatureVariationTag, value: str) -> None:
        if self.open_convert_rule is None:
            self._logger().warning(
                f"Creature variation {self.identifier}: {token.value} without an open convert rule"
            )
            return
        rule = self.rules[self.open_convert_rule]
        field_name = _CONVERT_FIELDS[token]
        if field_name == "tag":
            value = value.split(":")[0]
        self.rules[self.open_convert_rule] = replace(rule, **{field_name: value})

    def apply_to(self, creature: TagTarget, args: Sequence[str]) -> None:
        """Apply every rule to ``creature``.

        Caste selection is reset to ``ALL`` first. Non-convert rules run in
        declaration order, then convert rules run in reverse declaration order.
        """
        creature.select_caste("ALL")
        for rule in self.rules:
            if not rule.is_convert:
                rule.apply(creature, args)
        for rule in reversed(self.get_convert_rules()):
            rule.apply(creature, args)

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["argument_count"] = self.argument_count
        data["rules"] = [rule.to_dict() for rule in self.rules]
        return data


def _parse_argument_index(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None
