"""
Bracket tokenizer for raw text.

Raw files are line oriented. Each line holds zero or more ``[KEY:value...]``
tokens, optionally surrounded by free text which is ignored.
"""

import re
from typing import Iterator, List, Tuple

from ..errors import InvalidTokenError

RAW_TOKEN_RE = re.compile(r"(\[(?P<key>[^\[:]+):?(?P<value>[^\]\[]*)])")
"""Matches one ``[KEY:value]`` token; ``value`` may be empty."""

VARIATION_ARGUMENT_RE = re.compile(r"!ARG(\d{1,3})")
"""Matches an argument placeholder inside creature variation rules."""

Token = Tuple[str, str]


def iter_tokens(line: str) -> Iterator[Token]:
    """Yield every ``(key, value)`` pair found in a line."""
    for match in RAW_TOKEN_RE.finditer(line):
        yield match.group("key"), match.group("value")


def tokenize_line(line: str) -> List[Token]:
    """Return all tokens found in a line."""
    return list(iter_tokens(line))


def split_raw_line(raw: str) -> Token:
    """Split a stored raw line (``KEY:value`` without brackets) into key and value.

    Raises:
        InvalidTokenError: If the line has no key
    """
    text = raw.strip()
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]
    key, _, value = text.partition(":")
    if not key or "[" in key or "]" in key:
        raise InvalidTokenError(f"Malformed raw token: {raw!r}")
    return key, value


def join_token(key: str, value: str) -> str:
    """Inverse of ``split_raw_line``: ``KEY`` or ``KEY:value``."""
    return f"{key}:{value}" if value else key
