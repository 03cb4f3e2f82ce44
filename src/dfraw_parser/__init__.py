"""
dfraw-parser: parse Dwarf Fortress raw files into structured records.

Usage:
    from dfraw_parser import ParserOptions, RawModuleLocation, parse

    options = ParserOptions(
        dwarf_fortress_directory=Path("~/df").expanduser(),
        locations_to_parse=[RawModuleLocation.VANILLA],
    )
    result = parse(options)
"""

__version__ = "0.1.0"

from .errors import (
    DFRawParserError,
    InvalidOptionsError,
    InvalidRawFileError,
    InvalidTokenError,
    NothingToParseError,
    NotYetImplementedError,
    RawIOError,
    UnexpectedObjectTypeError,
)
from .metadata import ObjectType, RawMetadata, RawModuleLocation
from .options import ParserOptions, validate_options
from .parser import ParseResult, RawParser, parse
from .progress import ParseStage, ProgressDetails

__all__ = [
    "DFRawParserError",
    "InvalidOptionsError",
    "InvalidRawFileError",
    "InvalidTokenError",
    "NothingToParseError",
    "NotYetImplementedError",
    "ObjectType",
    "ParseResult",
    "ParseStage",
    "ParserOptions",
    "ProgressDetails",
    "RawIOError",
    "RawMetadata",
    "RawModuleLocation",
    "RawParser",
    "UnexpectedObjectTypeError",
    "__version__",
    "parse",
    "validate_options",
]
