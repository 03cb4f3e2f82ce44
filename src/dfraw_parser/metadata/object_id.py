"""
Helpers for building object ids.
"""

import re
import unicodedata

from .object_type import ObjectType

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert text to a lowercase, dash-separated ASCII slug."""
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = _NON_ALPHANUMERIC.sub("-", text.lower())
    return text.strip("-")


def build_object_id(
    module_identifier: str, object_type: ObjectType, identifier: str
) -> str:
    """Build a globally unique object id.

    Args:
        module_identifier: Identifier of the module that defines the object
        object_type: Kind of the object
        identifier: Object identifier from the raw file

    Returns:
        Id in the form ``{module-identifier}-{OBJECT-KIND}-{slug(identifier)}``
    """
    return f"{module_identifier}-{object_type.value}-{slugify(identifier)}"
