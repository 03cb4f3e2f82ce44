"""
Parse a single raw file into objects.

Creatures are captured as ``UnprocessedRaw`` bodies because they can refer to
other creatures and variations; every other kind is built directly.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..errors import InvalidRawFileError, NothingToParseError, RawIOError
from ..metadata import ObjectType, RawMetadata, RawModuleLocation
from ..options import ParserOptions
from ..raws import (
    CreatureVariation,
    Entity,
    Graphic,
    InfoFile,
    Inorganic,
    MaterialTemplate,
    Plant,
    RawObject,
    SelectCreature,
    TilePage,
)
from ..raws.info_file import DF_ENCODING
from ..tokens import GRAPHIC_TYPE_TOKENS, iter_tokens
from .header import read_raw_file_header
from .unprocessed_raw import UnprocessedRaw

logger = logging.getLogger(__name__)

# Opening token -> model, per declared object type
_SIMPLE_OPENERS = {
    ObjectType.CREATURE_VARIATION: {"CREATURE_VARIATION": CreatureVariation},
    ObjectType.PLANT: {"PLANT": Plant},
    ObjectType.INORGANIC: {"INORGANIC": Inorganic, "SELECT_INORGANIC": Inorganic},
    ObjectType.MATERIAL_TEMPLATE: {"MATERIAL_TEMPLATE": MaterialTemplate},
    ObjectType.ENTITY: {"ENTITY": Entity},
    ObjectType.GRAPHICS: {"TILE_PAGE": TilePage},
    ObjectType.TILE_PAGE: {"TILE_PAGE": TilePage},
}


@dataclass
class FileParseResult:
    """Objects read from one raw file."""
    path: Path
    object_type: ObjectType = ObjectType.UNKNOWN
    parsed_raws: List[RawObject] = field(default_factory=list)
    unprocessed_raws: List[UnprocessedRaw] = field(default_factory=list)
    skipped: bool = False

    @property
    def object_count(self) -> int:
        return len(self.parsed_raws) + len(self.unprocessed_raws)


def wants_file(object_type: ObjectType, options: ParserOptions) -> bool:
    """Whether a file declaring ``object_type`` holds anything the options ask for."""
    if not object_type.is_parsable:
        return False
    if object_type is ObjectType.GRAPHICS:
        return options.needs(ObjectType.GRAPHICS) or options.needs(ObjectType.TILE_PAGE)
    return options.needs(object_type)


def module_metadata(
    path: Path,
    raw_identifier: str,
    object_type: ObjectType,
    options: ParserOptions,
    info: Optional[InfoFile] = None,
    location: Optional[RawModuleLocation] = None,
) -> RawMetadata:
    """Metadata for a raw file, using its module's ``info.txt`` when there is one."""
    if info is None:
        try:
            info = InfoFile.from_raw_file_path(path)
        except (NothingToParseError, RawIOError) as e:
            logger.debug(f"No module info for {path}: {e}")
    if info is not None:
        return info.metadata_for(
            path,
            raw_identifier=raw_identifier,
            object_type=object_type,
            attach_metadata=options.attach_metadata_to_raws,
            location=location,
        )
    return RawMetadata.for_file(
        path,
        raw_identifier=raw_identifier,
        object_type=object_type,
        location=location or RawModuleLocation.from_path(path),
        attach_metadata=options.attach_metadata_to_raws,
    )


class RawFileParser:
    """Reads one raw file, tracking the object currently being built."""

    def __init__(
        self,
        path: Path,
        options: ParserOptions,
        info: Optional[InfoFile] = None,
        location: Optional[RawModuleLocation] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.path = Path(path)
        self.options = options
        self.info = info
        self.location = location

        self.metadata = RawMetadata()
        self.result = FileParseResult(path=self.path)
        self._current: Optional[Union[RawObject, UnprocessedRaw]] = None

    def parse(self) -> FileParseResult:
        """Parse the file.

        Raises:
            RawIOError: If the file cannot be read
        """
        header = read_raw_file_header(self.path)
        self.result.object_type = header.object_type

        if not wants_file(header.object_type, self.options):
            self.logger.debug(f"Skipping {self.path.name} ({header.object_type.value})")
            self.result.skipped = True
            return self.result

        self.metadata = module_metadata(
            self.path,
            header.raw_identifier,
            header.object_type,
            self.options,
            self.info,
            self.location,
        )

        try:
            with open(self.path, "r", encoding=DF_ENCODING) as f:
                for line_number, line in enumerate(f):
                    if line_number == 0:
                        continue
                    self._parse_line(line, header.object_type, line_number + 1)
        except OSError as e:
            raise RawIOError(self.path, e) from e
        except InvalidRawFileError as e:
            self.logger.error(f"{e}, skipping the rest of the file")

        self._finish_current()
        self.logger.debug(
            f"Parsed {self.result.object_count} objects from {self.path.name}"
        )
        return self.result

    def _parse_line(self, line: str, object_type: ObjectType, line_number: int) -> None:
        """Handle every token on a line.

        Raises:
            InvalidRawFileError: If an OBJECT tag contradicts the file header
        """
        for key, value in iter_tokens(line):
            if key == "OBJECT":
                declared = ObjectType.from_token(value)
                if declared is not object_type:
                    raise InvalidRawFileError(
                        f"line {line_number}: OBJECT:{value} does not match {object_type.value}",
                        self.path,
                    )
                continue
            if self._open_object(key, value, object_type):
                continue
            if self._current is None:
                self.logger.debug(
                    f"{self.path.name}:{line_number}: {key} outside of any object"
                )
                continue
            self._current.parse_tag(key, value)

    def _open_object(self, key: str, value: str, object_type: ObjectType) -> bool:
        """Start a new object if ``key`` opens one in this kind of file."""
        if object_type is ObjectType.CREATURE:
            if key == "CREATURE":
                self._start(UnprocessedRaw.new(ObjectType.CREATURE, self.metadata, value))
                return True
            if key == "SELECT_CREATURE":
                self._start(SelectCreature.new(value, self.metadata))
                return True
            return False

        if object_type is ObjectType.GRAPHICS and key in GRAPHIC_TYPE_TOKENS:
            self._start(Graphic.for_type(GRAPHIC_TYPE_TOKENS[key], value, self.metadata))
            return True

        model = _SIMPLE_OPENERS.get(object_type, {}).get(key)
        if model is None:
            return False
        self._start(model.new(value, self.metadata))
        return True

    def _start(self, obj: Union[RawObject, UnprocessedRaw]) -> None:
        self._finish_current()
        self._current = obj

    def _finish_current(self) -> None:
        current, self._current = self._current, None
        if current is None or current.is_empty():
            return
        if isinstance(current, UnprocessedRaw):
            self.result.unprocessed_raws.append(current)
        elif self.options.needs(current.object_type):
            self.result.parsed_raws.append(current)


def parse_raw_file(
    path: Path,
    options: Optional[ParserOptions] = None,
    info: Optional[InfoFile] = None,
    location: Optional[RawModuleLocation] = None,
) -> FileParseResult:
    """Parse one raw file.

    Args:
        path: Raw file to read
        options: Parser options (defaults when omitted)
        info: Info file of the owning module, looked up next to the file when omitted
        location: Module location, guessed from the path when omitted

    Raises:
        RawIOError: If the file cannot be read
    """
    return RawFileParser(path, options or ParserOptions(), info, location).parse()
