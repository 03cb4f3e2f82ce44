"""
JSON output for parsed raws and module info files.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

import orjson

from .errors import RawIOError
from .raws import InfoFile, RawObject

logger = logging.getLogger(__name__)


def _options(pretty_print: bool) -> int:
    option = orjson.OPT_APPEND_NEWLINE
    if pretty_print:
        option |= orjson.OPT_INDENT_2
    return option


def raws_to_records(raws: Iterable[RawObject]) -> List[dict]:
    return [raw.to_dict() for raw in raws]


def dumps(records: Any, pretty_print: bool = False) -> bytes:
    """Serialize JSON-ready records with orjson."""
    return orjson.dumps(records, default=str, option=_options(pretty_print))


def raws_to_json(raws: Iterable[RawObject], pretty_print: bool = False) -> bytes:
    """A JSON array with one tagged record per raw object."""
    return dumps(raws_to_records(raws), pretty_print)


def info_files_to_json(info_files: Iterable[InfoFile], pretty_print: bool = False) -> bytes:
    return dumps([info.to_dict() for info in info_files], pretty_print)


def write_json(data: bytes, output_path: Optional[Path]) -> None:
    """Write serialized JSON to ``output_path``, creating parent directories.

    Raises:
        RawIOError: If the file cannot be written
    """
    if output_path is None:
        raise ValueError("No output path given")
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise RawIOError(path, e) from e
    logger.info(f"Wrote {len(data)} bytes to {path}")
