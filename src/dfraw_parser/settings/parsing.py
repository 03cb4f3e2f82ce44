"""
Parse defaults used by the command line.
"""

import logging
from typing import List

from ..errors import UnexpectedObjectTypeError
from ..metadata import DEFAULT_OBJECT_TYPES, ObjectType, RawModuleLocation
from .section import SettingsSection

logger = logging.getLogger(__name__)


class ParsingSettings(SettingsSection):
    """What to parse and how to write it, when the command line does not say."""

    prefix = "parsing"

    @property
    def attach_metadata(self) -> bool:
        """Check if metadata should be attached to every raw."""
        return self._get_bool("attach_metadata", False)

    @attach_metadata.setter
    def attach_metadata(self, value: bool) -> None:
        self._set("attach_metadata", value)

    @property
    def pretty_print(self) -> bool:
        """Check if JSON output should be indented."""
        return self._get_bool("pretty_print", False)

    @pretty_print.setter
    def pretty_print(self, value: bool) -> None:
        self._set("pretty_print", value)

    @property
    def locations(self) -> List[RawModuleLocation]:
        """Locations parsed when none are given; unknown names are dropped."""
        locations: List[RawModuleLocation] = []
        for name in self._get_list("locations", [RawModuleLocation.VANILLA.value]):
            try:
                locations.append(RawModuleLocation.from_name(name))
            except ValueError:
                logger.warning(f"Ignoring unknown location in settings: {name}")
        return locations

    @locations.setter
    def locations(self, value: List[RawModuleLocation]) -> None:
        self._set("locations", [location.value for location in value])

    @property
    def object_types(self) -> List[ObjectType]:
        """Object types parsed when none are given; unsupported ones are dropped."""
        names = self._get_list(
            "object_types", [object_type.value for object_type in DEFAULT_OBJECT_TYPES]
        )
        object_types: List[ObjectType] = []
        for name in names:
            try:
                object_types.append(ObjectType.parsable_from_token(name))
            except UnexpectedObjectTypeError as e:
                logger.warning(f"Ignoring object type in settings: {e}")
        return object_types

    @object_types.setter
    def object_types(self, value: List[ObjectType]) -> None:
        self._set("object_types", [object_type.value for object_type in value])
