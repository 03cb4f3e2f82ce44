"""
Parse orchestration: discovery, per-file parsing and the corpus passes.

Files are read in parallel; every corpus pass runs afterwards, one at a time,
on the merged corpus.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .discovery import RawModule, discover_location, load_module
from .errors import DFRawParserError, NothingToParseError
from .legends_export import parse_legends_export
from .metadata import RawModuleLocation
from .options import ParserOptions, validate_options
from .progress import ParseStage, ProgressCallback, ProgressReporter
from .raws import InfoFile, RawObject
from .reader import FileParseResult, UnprocessedRaw, parse_raw_file
from .resolution import (
    absorb_select_creature,
    apply_copy_tags_from,
    apply_creature_variations,
    resolve_unprocessed_raws,
)


@dataclass(frozen=True)
class FileJob:
    """A raw file queued for parsing."""
    path: Path
    info: Optional[InfoFile] = None
    location: Optional[RawModuleLocation] = None


@dataclass
class ParseResult:
    """Everything a parse run produced."""
    raws: List[RawObject] = field(default_factory=list)
    info_files: List[InfoFile] = field(default_factory=list)
    parsed_files: int = 0
    skipped_files: int = 0
    failed_files: int = 0

    @property
    def object_count(self) -> int:
        return len(self.raws)

    def count_by_type(self) -> Dict[str, int]:
        return dict(Counter(raw.object_type.value for raw in self.raws))

    def count_by_location(self) -> Dict[str, int]:
        return dict(Counter(raw.metadata.module_location.value for raw in self.raws))


class RawParser:
    """Runs a complete parse for a set of options."""

    def __init__(self, options: ParserOptions, progress: Optional[ProgressCallback] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.options = options
        self.progress = ProgressReporter(progress)

    def parse(self) -> ParseResult:
        """Parse everything the options ask for.

        Raises:
            InvalidOptionsError: If the options do not validate
            NothingToParseError: If the options resolve to no files at all
        """
        validate_options(self.options)
        result = ParseResult()

        self.progress.report(ParseStage.DISCOVERING)
        modules = self._discover_modules()
        result.info_files = [module.info for module in modules]
        result.info_files.extend(self._read_module_info_files())

        jobs = self._collect_jobs(modules)
        if not jobs and not self.options.legends_exports_to_parse and not result.info_files:
            raise NothingToParseError("The given options resolve to no raw files")
        self.logger.info(f"Parsing {len(jobs)} raw files")

        file_results = self._parse_files(jobs, result)
        corpus: List[RawObject] = []
        unprocessed: List[UnprocessedRaw] = []
        for file_result in file_results:
            corpus.extend(file_result.parsed_raws)
            unprocessed.extend(file_result.unprocessed_raws)
        corpus.extend(self._parse_legends_exports())

        result.raws = self._run_passes(corpus, unprocessed)
        self.progress.report(ParseStage.DONE, result.object_count, result.object_count)

        self.logger.info(
            f"Parsed {result.object_count} objects from {result.parsed_files} files "
            f"({result.skipped_files} skipped, {result.failed_files} failed)"
        )
        if self.options.log_summary:
            self._log_summary(result)
        return result

    # === DISCOVERY ===

    def _discover_modules(self) -> List[RawModule]:
        modules: List[RawModule] = []
        df_directory = self.options.dwarf_fortress_directory
        if df_directory is not None:
            for location in self.options.locations_to_parse:
                modules.extend(discover_location(Path(df_directory), location))
        for module_path in self.options.raw_modules_to_parse:
            module = load_module(module_path)
            if module is not None:
                modules.append(module)
        return modules

    def _read_module_info_files(self) -> List[InfoFile]:
        info_files: List[InfoFile] = []
        total = len(self.options.module_info_files_to_parse)
        for index, path in enumerate(self.options.module_info_files_to_parse, start=1):
            self.progress.report(ParseStage.READING_MODULE_INFO, index, total, current_file=path)
            try:
                info_files.append(InfoFile.parse(path))
            except DFRawParserError as e:
                self.logger.error(f"Unable to read module info {path}: {e}")
        return info_files

    def _collect_jobs(self, modules: List[RawModule]) -> List[FileJob]:
        jobs: List[FileJob] = []
        seen = set()

        def add(job: FileJob) -> None:
            key = Path(job.path).resolve()
            if key not in seen:
                seen.add(key)
                jobs.append(job)

        for module in modules:
            for path in module.raw_files():
                add(FileJob(path, module.info, module.location))
        for path in self.options.raw_files_to_parse:
            add(FileJob(Path(path)))
        return jobs

    # === FILE PARSING ===

    def _parse_file(self, job: FileJob) -> FileParseResult:
        return parse_raw_file(job.path, self.options, job.info, job.location)

    def _parse_files(self, jobs: List[FileJob], result: ParseResult) -> List[FileParseResult]:
        """Parse files in parallel; results come back in job order."""
        ordered: List[Optional[FileParseResult]] = [None] * len(jobs)
        if not jobs:
            return []

        with ThreadPoolExecutor(max_workers=self.options.max_workers) as executor:
            future_to_job = {
                executor.submit(self._parse_file, job): (index, job)
                for index, job in enumerate(jobs)
            }

            processed_count = 0
            total_files = len(future_to_job)

            for future in as_completed(future_to_job):
                index, job = future_to_job[future]
                processed_count += 1
                try:
                    ordered[index] = future.result()
                except DFRawParserError as e:
                    result.failed_files += 1
                    self.logger.error(f"Failed to parse {job.path}: {e}")
                self.progress.report(
                    ParseStage.PARSING_RAW_FILES,
                    processed_count,
                    total_files,
                    location=job.location or RawModuleLocation.UNKNOWN,
                    current_file=job.path,
                )
                if processed_count % 250 == 0:
                    self.logger.debug(f"Processed {processed_count}/{total_files} raw files")

        file_results = [file_result for file_result in ordered if file_result is not None]
        for file_result in file_results:
            if file_result.skipped:
                result.skipped_files += 1
            else:
                result.parsed_files += 1
        return file_results

    def _parse_legends_exports(self) -> List[RawObject]:
        raws: List[RawObject] = []
        total = len(self.options.legends_exports_to_parse)
        for index, path in enumerate(self.options.legends_exports_to_parse, start=1):
            self.progress.report(
                ParseStage.PARSING_LEGENDS_EXPORTS,
                index,
                total,
                location=RawModuleLocation.LEGENDS_EXPORT,
                current_file=Path(path),
            )
            try:
                raws.extend(parse_legends_export(path, self.options.attach_metadata_to_raws))
            except DFRawParserError as e:
                self.logger.error(f"Failed to parse legends export {path}: {e}")
        return raws

    # === CORPUS PASSES ===

    def _run_passes(
        self, corpus: List[RawObject], unprocessed: List[UnprocessedRaw]
    ) -> List[RawObject]:
        options = self.options

        self.progress.report(ParseStage.RESOLVING_CREATURES, 0, len(unprocessed))
        corpus = resolve_unprocessed_raws(
            unprocessed,
            corpus,
            skip_copy_tags_from=options.skip_apply_copy_tags_from,
            skip_creature_variations=options.skip_apply_creature_variations,
        )
        self.logger.info(f"Resolved {len(unprocessed)} creatures")

        self.progress.report(ParseStage.ABSORBING_SELECT_CREATURE)
        corpus = absorb_select_creature(corpus)

        if not options.skip_apply_copy_tags_from:
            self.progress.report(ParseStage.APPLYING_COPY_TAGS_FROM)
            corpus = apply_copy_tags_from(corpus)
        if not options.skip_apply_creature_variations:
            self.progress.report(ParseStage.APPLYING_CREATURE_VARIATIONS)
            corpus = apply_creature_variations(corpus)

        return [raw for raw in corpus if options.wants(raw.object_type)]

    def _log_summary(self, result: ParseResult) -> None:
        self.logger.info("Parse summary by object type:")
        for name, count in _sorted_counts(result.count_by_type()):
            self.logger.info(f"  {name}: {count}")
        self.logger.info("Parse summary by location:")
        for name, count in _sorted_counts(result.count_by_location()):
            self.logger.info(f"  {name}: {count}")
        self.logger.info(f"Module info files: {len(result.info_files)}")


def _sorted_counts(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def parse(options: ParserOptions, progress: Optional[ProgressCallback] = None) -> ParseResult:
    """Parse everything ``options`` asks for.

    Raises:
        InvalidOptionsError: If the options do not validate
        NothingToParseError: If the options resolve to no files at all
    """
    return RawParser(options, progress).parse()
