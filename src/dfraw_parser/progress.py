"""
Fire-and-forget progress reporting for hosts that want to show progress.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from .metadata import RawModuleLocation


class ParseStage(Enum):
    """Steps of a parse run, in order."""

    DISCOVERING = "Discovering"
    READING_MODULE_INFO = "ReadingModuleInfo"
    PARSING_RAW_FILES = "ParsingRawFiles"
    PARSING_LEGENDS_EXPORTS = "ParsingLegendsExports"
    RESOLVING_CREATURES = "ResolvingCreatures"
    ABSORBING_SELECT_CREATURE = "AbsorbingSelectCreature"
    APPLYING_COPY_TAGS_FROM = "ApplyingCopyTagsFrom"
    APPLYING_CREATURE_VARIATIONS = "ApplyingCreatureVariations"
    DONE = "Done"


@dataclass(frozen=True)
class ProgressDetails:
    """One progress update."""
    stage: ParseStage
    current: int = 0
    total: int = 0
    location: RawModuleLocation = RawModuleLocation.UNKNOWN
    current_file: Optional[Path] = None

    @property
    def percent(self) -> float:
        if self.total <= 0:
            return 0.0
        return 100.0 * self.current / self.total


ProgressCallback = Callable[[ProgressDetails], None]


class ProgressReporter:
    """Delivers progress updates to an optional callback.

    A failing callback is logged and otherwise ignored so it can never break
    a parse.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.callback = callback

    def report(
        self,
        stage: ParseStage,
        current: int = 0,
        total: int = 0,
        location: RawModuleLocation = RawModuleLocation.UNKNOWN,
        current_file: Optional[Path] = None,
    ) -> None:
        if self.callback is None:
            return
        details = ProgressDetails(stage, current, total, location, current_file)
        try:
            self.callback(details)
        except Exception as e:
            self.logger.warning(f"Progress callback failed at {stage.value}: {e}")
