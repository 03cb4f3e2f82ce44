"""
Command line interface.

Defaults for every command come from the persisted settings profile; flags
given on the command line win.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer

from . import __version__
from .discovery import discover_location
from .errors import (
    InvalidOptionsError,
    NothingToParseError,
    RawIOError,
    UnexpectedObjectTypeError,
)
from .metadata import ObjectType, RawModuleLocation
from .options import ParserOptions
from .output import info_files_to_json, raws_to_json, write_json
from .parser import parse
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

app = typer.Typer(help="Parse Dwarf Fortress raw files into JSON")


def get_settings(profile: str) -> AppSettings:
    try:
        return AppSettings(profile)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


def _locations(names: Optional[List[str]]) -> List[RawModuleLocation]:
    locations: List[RawModuleLocation] = []
    for name in names or []:
        try:
            locations.append(RawModuleLocation.from_name(name))
        except ValueError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=2)
    return locations


def _object_types(names: Optional[List[str]]) -> List[ObjectType]:
    object_types: List[ObjectType] = []
    for name in names or []:
        try:
            object_types.append(ObjectType.parsable_from_token(name))
        except UnexpectedObjectTypeError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=2)
    return object_types


def _emit(data: bytes, output: Optional[Path]) -> None:
    if output is None:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return
    try:
        write_json(data, output)
    except RawIOError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command("parse")
def parse_command(
    df_dir: Optional[Path] = typer.Option(
        None, "--df-dir", "-d", help="Dwarf Fortress directory (default: from settings)"
    ),
    location: Optional[List[str]] = typer.Option(
        None, "--location", "-l", help="Location to parse: vanilla, installed-mods, mods"
    ),
    object_type: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="Object type to parse, e.g. CREATURE (repeatable)"
    ),
    raw_file: Optional[List[Path]] = typer.Option(
        None, "--raw-file", help="Extra raw file to parse"
    ),
    module: Optional[List[Path]] = typer.Option(
        None, "--module", "-m", help="Extra raw module directory to parse"
    ),
    info_file: Optional[List[Path]] = typer.Option(
        None, "--info-file", help="Module info.txt to include in the result"
    ),
    legends: Optional[List[Path]] = typer.Option(
        None, "--legends", help="legends_plus XML export to parse"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output JSON file (default: from settings, else stdout)"
    ),
    pretty: Optional[bool] = typer.Option(
        None, "--pretty/--compact", help="Indent the JSON output"
    ),
    metadata: Optional[bool] = typer.Option(
        None, "--metadata/--no-metadata", help="Attach module metadata to every object"
    ),
    skip_copy_tags_from: bool = typer.Option(
        False, "--skip-copy-tags-from", help="Do not apply COPY_TAGS_FROM"
    ),
    skip_variations: bool = typer.Option(
        False, "--skip-variations", help="Do not apply creature variations"
    ),
    summary: bool = typer.Option(False, "--summary", "-s", help="Log an object count summary"),
    workers: int = typer.Option(32, "--workers", "-w", help="Parallel file readers"),
    log_level: str = typer.Option("", "--log-level", help="Console log level"),
    profile: str = typer.Option("default", "--profile", help="Settings profile"),
) -> None:
    """Parse raw files and write them as JSON."""
    settings = get_settings(profile)
    setup_logging(settings, log_level)

    explicit_sources = raw_file or module or info_file or legends
    locations = _locations(location)
    if not locations and not explicit_sources:
        locations = settings.locations

    options = ParserOptions(
        attach_metadata_to_raws=settings.attach_metadata if metadata is None else metadata,
        skip_apply_copy_tags_from=skip_copy_tags_from,
        skip_apply_creature_variations=skip_variations,
        object_types_to_parse=_object_types(object_type) or settings.object_types,
        locations_to_parse=locations,
        dwarf_fortress_directory=df_dir or settings.df_path,
        legends_exports_to_parse=list(legends or []),
        raw_files_to_parse=list(raw_file or []),
        raw_modules_to_parse=list(module or []),
        module_info_files_to_parse=list(info_file or []),
        log_summary=summary,
        output_path=output or settings.output_path,
        pretty_print=settings.pretty_print if pretty is None else pretty,
        max_workers=workers,
    )

    try:
        result = parse(options)
    except InvalidOptionsError as e:
        for message in e.messages:
            typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1)
    except NothingToParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit(raws_to_json(result.raws, options.pretty_print), options.output_path)
    typer.echo(
        f"Parsed {result.object_count} objects from {result.parsed_files} files, "
        f"skipped {result.skipped_files} files, {result.failed_files} failed",
        err=True,
    )


@app.command("info")
def info_command(
    df_dir: Optional[Path] = typer.Option(
        None, "--df-dir", "-d", help="Dwarf Fortress directory (default: from settings)"
    ),
    location: Optional[List[str]] = typer.Option(
        None, "--location", "-l", help="Location to list (default: from settings)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    pretty: bool = typer.Option(True, "--pretty/--compact", help="Indent the JSON output"),
    profile: str = typer.Option("default", "--profile", help="Settings profile"),
) -> None:
    """List the raw modules of a game directory with their info files."""
    settings = get_settings(profile)
    setup_logging(settings)

    df_directory = df_dir or settings.df_path
    if df_directory is None or not Path(df_directory).is_dir():
        typer.echo("Error: no Dwarf Fortress directory (use --df-dir or config)", err=True)
        raise typer.Exit(code=1)

    info_files = []
    for raw_location in _locations(location) or settings.locations:
        info_files.extend(module.info for module in discover_location(df_directory, raw_location))
    _emit(info_files_to_json(info_files, pretty), output)


@app.command("config")
def config_command(
    df_dir: Optional[Path] = typer.Option(None, "--df-dir", "-d", help="Set the game directory"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Set the output file"),
    location: Optional[List[str]] = typer.Option(
        None, "--location", "-l", help="Set the default locations"
    ),
    object_type: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="Set the default object types"
    ),
    pretty: Optional[bool] = typer.Option(None, "--pretty/--compact", help="Set JSON indenting"),
    metadata: Optional[bool] = typer.Option(
        None, "--metadata/--no-metadata", help="Set metadata attachment"
    ),
    console_level: Optional[str] = typer.Option(None, "--console-level", help="Set console log level"),
    colors: Optional[bool] = typer.Option(None, "--colors/--no-colors", help="Set console colours"),
    file_logging: Optional[bool] = typer.Option(
        None, "--file-logging/--no-file-logging", help="Set file logging"
    ),
    file_level: Optional[str] = typer.Option(None, "--file-level", help="Set log file level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Set the log file"),
    profile: str = typer.Option("default", "--profile", help="Settings profile"),
) -> None:
    """Show or update the persisted defaults."""
    settings = get_settings(profile)

    if df_dir is not None:
        settings.df_path = df_dir
    if output is not None:
        settings.output_path = output
    if location:
        settings.locations = _locations(location)
    if object_type:
        settings.object_types = _object_types(object_type)
    if pretty is not None:
        settings.pretty_print = pretty
    if metadata is not None:
        settings.attach_metadata = metadata
    if console_level is not None:
        settings.console_log_level = console_level
    if colors is not None:
        settings.console_use_colors = colors
    if file_logging is not None:
        settings.file_logging = file_logging
    if file_level is not None:
        settings.file_log_level = file_level
    if log_file is not None:
        settings.log_file_path = str(log_file)

    typer.echo(f"dfraw-parser {__version__} (profile '{profile}')")
    typer.echo(f"Settings file: {settings.get_settings_file_path()}")
    typer.echo(f"Dwarf Fortress directory: {settings.df_path or '-'}")
    typer.echo(f"Output path: {settings.output_path or '-'}")
    typer.echo(f"Locations: {', '.join(loc.value for loc in settings.locations) or '-'}")
    typer.echo(f"Object types: {', '.join(t.value for t in settings.object_types) or '-'}")
    typer.echo(f"Pretty print: {settings.pretty_print}")
    typer.echo(f"Attach metadata: {settings.attach_metadata}")
    typer.echo(
        f"Console logging: {settings.console_logging} "
        f"({settings.console_log_level}, colors: {settings.console_use_colors})"
    )
    typer.echo(
        f"File logging: {settings.file_logging} "
        f"({settings.file_log_level}, {settings.log_file_path})"
    )

    validation = settings.validate()
    for warning in validation.warnings:
        typer.echo(f"Warning: {warning}")
    for error in validation.errors:
        typer.echo(f"Error: {error}")
    if not validation.is_valid:
        raise typer.Exit(code=1)


def main() -> None:
    app()
