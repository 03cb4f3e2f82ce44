"""
Raw file headers: the identifier line and the ``[OBJECT:TYPE]`` declaration.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import RawIOError
from ..metadata import ObjectType
from ..raws.info_file import DF_ENCODING
from ..tokens import iter_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawFileHeader:
    """What a raw file declares about itself."""
    raw_identifier: str
    object_type: ObjectType


def read_raw_file_header(path: Path) -> RawFileHeader:
    """Read the identifier line and the object type of a raw file.

    Only reads up to the ``OBJECT`` tag. Files without one are UNKNOWN.

    Raises:
        RawIOError: If the file cannot be read
    """
    raw_identifier = ""
    try:
        with open(path, "r", encoding=DF_ENCODING) as f:
            for line_number, line in enumerate(f):
                if line_number == 0:
                    raw_identifier = line.strip()
                    continue
                for key, value in iter_tokens(line):
                    if key == "OBJECT":
                        return RawFileHeader(raw_identifier, ObjectType.from_token(value))
    except OSError as e:
        raise RawIOError(path, e) from e

    logger.debug(f"No OBJECT tag in {path}")
    return RawFileHeader(raw_identifier, ObjectType.UNKNOWN)
