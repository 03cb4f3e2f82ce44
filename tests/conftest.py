"""Shared fixtures for dfraw-parser tests."""

from pathlib import Path
from typing import Callable, List

import pytest

MODULE_INFO = """[ID:vanilla_creatures]
[NUMERIC_VERSION:5001]
[DISPLAYED_VERSION:50.01]
[EARLIEST_COMPATIBLE_NUMERIC_VERSION:5001]
[EARLIEST_COMPATIBLE_DISPLAYED_VERSION:50.01]
[AUTHOR:Bay 12 Games]
[NAME:Creatures]
[DESCRIPTION:Creatures for the vanilla game.]
"""

CREATURE_LINES = [
    "[CREATURE:TOAD]",
    "\t[NAME:toad:toads:toad]",
    "\t[BIOME:POOL_TEMPERATE_FRESHWATER]",
    "\t[APPLY_CREATURE_VARIATION:STANDARD_WALK_CRAWL_GAITS:10:20]",
    "\t[CASTE:FEMALE]",
    "\t[CASTE:MALE]",
    "\t[SELECT_CASTE:ALL]",
    "\t[BODY_SIZE:0:0:50]",
    "",
    "[CREATURE:GIANT_TOAD]",
    "\t[COPY_TAGS_FROM:TOAD]",
    "\t[GO_TO_START]",
    "\t[NAME:giant toad:giant toads:giant toad]",
]

VARIATION_LINES = [
    "[CREATURE_VARIATION:STANDARD_WALK_CRAWL_GAITS]",
    "\t[CV_NEW_TAG:GAIT:WALK:Walk:!ARG1:NO_BUILD_UP:0]",
    "\t[CV_NEW_TAG:GAIT:CRAWL:Crawl:!ARG2:NO_BUILD_UP:0]",
]

SELECT_LINES = [
    "[SELECT_CREATURE:TOAD]",
    "\t[BIOME:ANY_POOL]",
]

RawWriter = Callable[[Path, str, List[str]], Path]


def write_raw_file(path: Path, object_type: str, lines: List[str]) -> Path:
    """Write a raw file: identifier line, blank line, OBJECT header, body."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = "\n".join([path.stem, "", f"[OBJECT:{object_type}]", "", *lines]) + "\n"
    path.write_text(text, encoding="latin-1")
    return path


@pytest.fixture
def raw_writer() -> RawWriter:
    """Function writing raw files in the on-disk format."""
    return write_raw_file


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """A vanilla creature module with creatures, a variation and a SELECT_CREATURE fragment."""
    module = tmp_path / "df" / "data" / "vanilla" / "vanilla_creatures"
    module.mkdir(parents=True)
    (module / "info.txt").write_text(MODULE_INFO, encoding="latin-1")
    objects = module / "objects"
    write_raw_file(objects / "creature_test.txt", "CREATURE", CREATURE_LINES)
    write_raw_file(objects / "c_variation_test.txt", "CREATURE_VARIATION", VARIATION_LINES)
    write_raw_file(objects / "creature_select.txt", "CREATURE", SELECT_LINES)
    write_raw_file(objects / "language_words.txt", "LANGUAGE", ["[WORD:ABBEY]"])
    (objects / "notes.md").write_text("not a raw file", encoding="utf-8")
    return module


@pytest.fixture
def df_dir(module_dir: Path) -> Path:
    """Dwarf Fortress directory holding ``module_dir`` under data/vanilla."""
    return module_dir.parent.parent.parent


@pytest.fixture
def app_settings(tmp_path: Path):
    """AppSettings backed by an ini file inside ``tmp_path``."""
    from PySide6.QtCore import QSettings

    from dfraw_parser.settings import AppSettings

    qsettings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return AppSettings(settings=qsettings)
