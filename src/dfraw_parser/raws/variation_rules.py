"""
Creature variation rules.

A rule is an immutable, parameterised tag rewrite. ``with_args`` produces a
copy with ``!ARGn`` placeholders substituted; ``apply`` substitutes, checks the
argument condition (for conditional rules) and performs the rewrite on a
creature through its tag operations.
"""

import logging
import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, ClassVar, Dict, Optional, Sequence

from ..tokens import VARIATION_ARGUMENT_RE
from .base import TagTarget

logger = logging.getLogger(__name__)


def substitute_args(text: str, args: Sequence[str]) -> str:
    """Replace ``!ARGn`` placeholders with ``args[n-1]``.

    Placeholders pointing outside ``args`` are left as written.
    """

    def _replace(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if 1 <= index <= len(args):
            return args[index - 1]
        logger.warning(
            f"Argument placeholder {match.group(0)} in '{text}' is out of range "
            f"for {len(args)} argument(s)"
        )
        return match.group(0)

    return VARIATION_ARGUMENT_RE.sub(_replace, text)


def highest_argument_index(text: str) -> int:
    """Largest ``!ARGn`` index referenced in ``text`` (0 if none)."""
    return max((int(index) for index in VARIATION_ARGUMENT_RE.findall(text)), default=0)


@dataclass(frozen=True)
class Rule:
    """Base class for all rules."""
    is_convert: ClassVar[bool] = False

    def with_args(self, args: Sequence[str]) -> "Rule":
        """Copy of this rule with argument placeholders substituted."""
        if not args:
            return replace(self)
        changes = {
            rule_field.name: substitute_args(getattr(self, rule_field.name), args)
            for rule_field in fields(self)
            if isinstance(getattr(self, rule_field.name), str)
        }
        return replace(self, **changes)

    def is_triggered(self, args: Sequence[str]) -> bool:
        return True

    def apply(self, creature: TagTarget, args: Sequence[str]) -> None:
        """Substitute ``args`` and rewrite ``creature`` if the rule fires."""
        rule = self.with_args(args)
        if rule.is_triggered(args):
            rule.execute(creature)

    def execute(self, creature: TagTarget) -> None:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        data = {key: value for key, value in asdict(self).items() if value is not None}
        data["kind"] = self.__class__.__name__
        return data


@dataclass(frozen=True)
class AddTag(Rule):
    """``CV_ADD_TAG:tag[:value...]``."""
    tag: str = ""
    value: Optional[str] = None

    def execute(self, creature: TagTarget) -> None:
        if self.value:
            creature.add_tag_and_value(self.tag, self.value)
        else:
            creature.add_tag(self.tag)


@dataclass(frozen=True)
class NewTag(AddTag):
    """``CV_NEW_TAG:tag[:value...]``; behaves exactly like AddTag."""


@dataclass(frozen=True)
class RemoveTag(Rule):
    """``CV_REMOVE_TAG:tag[:value...]``; with a value only exact matches go."""
    tag: str = ""
    value: Optional[str] = None

    def execute(self, creature: TagTarget) -> None:
        if self.value:
            creature.remove_tag_and_value(self.tag, self.value)
        else:
            creature.remove_tag(self.tag)


@dataclass(frozen=True)
class ConvertTag(Rule):
    """Opened by ``CV_CONVERT_TAG`` and filled by the ``CVCT_*`` tokens.

    With a target only the tag carrying that value is rewritten to the
    replacement; without one every instance of the tag is swapped for the
    replacement value.
    """
    is_convert: ClassVar[bool] = True

    tag: str = ""
    target: Optional[str] = None
    replacement: Optional[str] = None

    def execute(self, creature: TagTarget) -> None:
        if not self.tag or self.replacement is None:
            logger.warning(f"Incomplete convert rule {self}; skipping")
            return
        if self.target is not None:
            if creature.remove_tag_and_value(self.tag, self.target):
                creature.add_tag_and_value(self.tag, self.replacement)
            return
        if creature.remove_tag(self.tag):
            creature.add_tag_and_value(self.tag, self.replacement)


@dataclass(frozen=True)
class ConditionalRuleMixin:
    """Gate shared by the ``CV_*_CTAG`` rules (1-based argument index)."""
    argument_index: int = 0
    argument_requirement: str = ""

    def is_triggered(self, args: Sequence[str]) -> bool:
        if self.argument_index < 1 or len(args) < self.argument_index:
            logger.warning(
                f"Conditional rule needs argument {self.argument_index} "
                f"but only {len(args)} were supplied"
            )
            return False
        return args[self.argument_index - 1] == self.argument_requirement


@dataclass(frozen=True)
class ConditionalAddTag(ConditionalRuleMixin, AddTag):
    """``CV_ADD_CTAG`` / ``CV_NEW_CTAG``."""


@dataclass(frozen=True)
class ConditionalRemoveTag(ConditionalRuleMixin, RemoveTag):
    """``CV_REMOVE_CTAG``."""


@dataclass(frozen=True)
class ConditionalConvertTag(ConditionalRuleMixin, ConvertTag):
    """``CV_CONVERT_CTAG``."""


@dataclass(frozen=True)
class UnknownRule(Rule):
    """Placeholder for rule data that could not be parsed; never applied."""
    key: str = ""
    value: str = ""

    def with_args(self, args: Sequence[str]) -> "Rule":
        return replace(self)

    def is_triggered(self, args: Sequence[str]) -> bool:
        return False

    def execute(self, creature: TagTarget) -> None:
        return None
