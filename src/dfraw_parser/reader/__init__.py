"""
Per-file raw reading and the unprocessed-raw resolver.
"""

from .header import RawFileHeader, read_raw_file_header
from .modification import (
    AddBeforeTag,
    AddToBeginning,
    AddToEnding,
    ApplyCreatureVariation,
    CopyTagsFrom,
    MainRawBody,
    Modification,
    ModificationKind,
)
from .parse_file import FileParseResult, RawFileParser, parse_raw_file
from .unprocessed_raw import UnprocessedRaw, insert_before_tag

__all__ = [
    "AddBeforeTag",
    "AddToBeginning",
    "AddToEnding",
    "ApplyCreatureVariation",
    "CopyTagsFrom",
    "FileParseResult",
    "MainRawBody",
    "Modification",
    "ModificationKind",
    "RawFileHeader",
    "RawFileParser",
    "UnprocessedRaw",
    "insert_before_tag",
    "parse_raw_file",
    "read_raw_file_header",
]
