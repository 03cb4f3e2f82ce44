"""
Material definitions embedded in inorganics, plants and material templates.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..tokens import MATERIAL_TOKENS, MaterialTag
from .base import render_tags
from .values import TagEntry, compact_dict, parse_int

_STATE_NAME_TOKENS = (
    MaterialTag.STATE_NAME,
    MaterialTag.STATE_ADJ,
    MaterialTag.STATE_NAME_ADJ,
)


@dataclass
class Material:
    """Properties of one material."""
    identifier: str = ""
    template: str = ""
    tags: List[TagEntry] = field(default_factory=list)
    state_names: Dict[str, str] = field(default_factory=dict)
    state_colors: Dict[str, str] = field(default_factory=dict)
    reaction_classes: List[str] = field(default_factory=list)
    material_value: Optional[int] = None

    def parse_tag(self, key: str, value: str) -> bool:
        """Record a material token. Returns False for keys that are not material tokens."""
        token = MATERIAL_TOKENS.get(key)
        if token is None:
            return False
        self.tags.append(TagEntry(token, value))

        if token in _STATE_NAME_TOKENS:
            state, _, name = value.partition(":")
            if token is MaterialTag.STATE_NAME_ADJ:
                self.state_names[state] = name
                self.state_names[f"{state}_ADJ"] = name
            elif token is MaterialTag.STATE_ADJ:
                self.state_names[f"{state}_ADJ"] = name
            else:
                self.state_names[state] = name
        elif token is MaterialTag.STATE_COLOR:
            state, _, color = value.partition(":")
            self.state_colors[state] = color
        elif token is MaterialTag.REACTION_CLASS:
            self.reaction_classes.append(value)
        elif token is MaterialTag.MATERIAL_VALUE:
            self.material_value = parse_int(value)
        return True

    def is_empty(self) -> bool:
        return not self.tags and not self.template

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "identifier": self.identifier,
                "template": self.template,
                "tags": render_tags(self.tags),
                "state_names": self.state_names,
                "state_colors": self.state_colors,
                "reaction_classes": self.reaction_classes,
                "material_value": self.material_value,
            }
        )
