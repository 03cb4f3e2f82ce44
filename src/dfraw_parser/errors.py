"""
Exception types for dfraw-parser.

File-local and tag-local problems are logged and recovered from inside the
parser; only option validation and path-resolution errors reach the caller.
"""

from pathlib import Path
from typing import List, Optional


class DFRawParserError(Exception):
    """Base class for all parser errors."""
    pass


class InvalidTokenError(DFRawParserError):
    """Raised when a bracketed token cannot be tokenized."""
    pass


class InvalidOptionsError(DFRawParserError):
    """Raised when ParserOptions fail validation."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("Invalid parser options: " + "; ".join(self.messages))


class InvalidRawFileError(DFRawParserError):
    """Raised when a raw file is structurally invalid (e.g. object type mismatch)."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class UnexpectedObjectTypeError(DFRawParserError):
    """Raised when an object of an unexpected type is handed to a component."""
    pass


class RawIOError(DFRawParserError):
    """Wraps an underlying file-system error together with the offending path."""

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class NotYetImplementedError(DFRawParserError):
    """Raised when resolution is requested for an unsupported raw type."""
    pass


class NothingToParseError(DFRawParserError):
    """Raised when the requested paths contain nothing parseable."""
    pass
