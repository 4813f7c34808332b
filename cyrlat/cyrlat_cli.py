"""cyrlat CLI - Main entry point."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from cyrlat.exceptions import ConfigurationError, CyrlatError
from cyrlat.models import Schema
from cyrlat.normalize.transliteration import transliterate_many, transliterate_with_schema
from cyrlat.qc.validate_schema import validate_bundled
from cyrlat.schemas import list_schemas, load_schema, load_schema_file
from cyrlat.utils.io import read_text_lines, write_text
from cyrlat.utils.log import log_with_context, setup_logging
from cyrlat.utils.schema import ETC_DIR, load_json_schema, validate_against_schema


DEFAULT_SETTINGS_PATH = ETC_DIR / "settings.yaml"
SETTINGS_SCHEMA_PATH = ETC_DIR / "settings.schema.json"

# Lines handed to the worker pool at a time
CHUNK_SIZE = 1000


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            result = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if result is None:
        return {}
    if not isinstance(result, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")
    return result


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml, layering an optional user file over the defaults.

    Args:
        path: Optional user settings file

    Returns:
        Merged settings

    Raises:
        ConfigurationError: If a file is unreadable or has the wrong shape
    """
    settings = _read_yaml(DEFAULT_SETTINGS_PATH)
    if path is not None:
        settings = _merge(settings, _read_yaml(Path(path)))

    errors = validate_against_schema(settings, load_json_schema(SETTINGS_SCHEMA_PATH))
    if errors:
        raise ConfigurationError("Invalid settings: " + "; ".join(errors))
    return settings


def resolve_schema(name: str | None, schema_file: Path | None, settings: dict[str, Any]) -> Schema:
    """Pick the schema from --schema-file, --schema or the configured default."""
    if schema_file is not None:
        return load_schema_file(schema_file)
    return load_schema(name or settings["default_schema"])


def _fail(logger: logging.Logger, error: Exception) -> NoReturn:
    logger.error(f"{type(error).__name__}: {error}")
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


schema_option = click.option(
    "--schema", "-s", "schema_name", help="Bundled schema name (default from settings)"
)
schema_file_option = click.option(
    "--schema-file",
    type=click.Path(path_type=Path),
    help="Path to a schema definition JSON file",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(path_type=Path),
    help="Settings YAML overriding the defaults",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Cyrillic to Latin transliteration CLI."""
    try:
        settings = load_settings(settings_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_level = "DEBUG" if verbose else settings["logging"]["level"]
    log_format = settings["logging"].get("format", "pretty")
    log_file = settings["logging"].get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=Path(log_file) if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command()
@click.argument("text", nargs=-1)
@schema_option
@schema_file_option
@click.pass_context
def translit(
    ctx: click.Context,
    text: tuple[str, ...],
    schema_name: str | None,
    schema_file: Path | None,
) -> None:
    """Transliterate TEXT (or stdin when no TEXT is given)."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        schema = resolve_schema(schema_name, schema_file, settings)
    except CyrlatError as e:
        _fail(logger, e)

    if text:
        click.echo(transliterate_with_schema(" ".join(text), schema))
    else:
        for line in sys.stdin:
            click.echo(transliterate_with_schema(line, schema), nl=False)


@cli.command("file")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", "output_path", type=click.Path(path_type=Path), help="Output file (default: stdout)"
)
@schema_option
@schema_file_option
@click.option("--workers", type=int, help="Parallel workers (default from settings)")
@click.pass_context
def file_command(
    ctx: click.Context,
    input_path: Path,
    output_path: Path | None,
    schema_name: str | None,
    schema_file: Path | None,
    workers: int | None,
) -> None:
    """Transliterate a UTF-8 text file line by line."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]
    max_workers = workers or settings["batch"]["max_workers"]

    try:
        schema = resolve_schema(schema_name, schema_file, settings)
    except CyrlatError as e:
        _fail(logger, e)

    try:
        lines = list(read_text_lines(input_path))
        output: list[str] = []
        with tqdm(total=len(lines), desc=input_path.name, unit="line", disable=output_path is None) as bar:
            for start in range(0, len(lines), CHUNK_SIZE):
                chunk = lines[start : start + CHUNK_SIZE]
                output.extend(transliterate_many(chunk, schema, max_workers=max_workers))
                bar.update(len(chunk))

        if output_path is None:
            click.echo("".join(output), nl=False)
        else:
            count = write_text(output_path, output)
            click.echo(f"Wrote {count} lines to {output_path}")

        log_with_context(
            logger,
            "info",
            "File transliterated",
            input=str(input_path),
            output=str(output_path) if output_path else "-",
            schema=schema.name,
            lines=len(lines),
        )
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _fail(logger, e)


@cli.group()
def schemas() -> None:
    """Bundled schema commands."""
    pass


@schemas.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List bundled schemas."""
    logger = ctx.obj["logger"]

    for name in list_schemas():
        try:
            schema = load_schema(name)
        except CyrlatError as e:
            _fail(logger, e)
        click.echo(f"{name:16s}  {schema.description}")


@schemas.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print a bundled schema definition as JSON."""
    logger = ctx.obj["logger"]

    try:
        schema = load_schema(name)
    except CyrlatError as e:
        _fail(logger, e)

    click.echo(json.dumps(schema.to_dict(), ensure_ascii=False, indent=2))


@schemas.command()
@click.argument("names", nargs=-1)
@click.pass_context
def validate(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Validate bundled schemas and their samples (default: all)."""
    logger = ctx.obj["logger"]

    unknown = sorted(set(names) - set(list_schemas()))
    if unknown:
        click.echo(f"Error: Unknown schemas: {', '.join(unknown)}", err=True)
        sys.exit(1)

    results = validate_bundled(logger, list(names) or None)

    failed = False
    for name, result in results.items():
        for warning in result.warnings:
            click.echo(f"  WARNING: {name}: {warning}")
        if not result.valid:
            failed = True
            click.echo(f"Validation failed for {name}:", err=True)
            for error in result.errors:
                click.echo(f"  ERROR: {error}", err=True)

    if failed:
        sys.exit(1)
    click.echo(f"All {len(results)} schemas passed validation")


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
