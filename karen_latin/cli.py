"""karen-latin CLI - Main entry point."""

import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]

from karen_latin.mapping import MappingError, find_unmapped, load_mapping
from karen_latin.normalize.transliteration import Transliterator
from karen_latin.utils.io import read_lines, write_lines
from karen_latin.utils.log import setup_logging


DEFAULT_SETTINGS_PATH = Path(__file__).parent / "etc" / "settings.yaml"


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """Load settings.yaml."""
    settings_path = settings_path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        click.echo(f"Error: settings file not found at {settings_path}", err=True)
        sys.exit(1)

    with settings_path.open(encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


def get_transliterator(ctx: click.Context) -> Transliterator:
    """Build the engine once per invocation from the configured mapping."""
    if "engine" not in ctx.obj:
        table = load_mapping(ctx.obj["mapping_path"])
        ctx.obj["engine"] = Transliterator(table)
    engine: Transliterator = ctx.obj["engine"]
    return engine


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Settings YAML file (default: packaged settings.yaml)",
)
@click.option(
    "--mapping",
    "mapping_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Mapping JSON file (overrides settings)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    settings_path: Path | None,
    mapping_path: Path | None,
) -> None:
    """Karen script to Latin transliteration."""
    settings = load_settings(settings_path)
    log_settings = settings.get("logging", {})

    log_level = "DEBUG" if verbose else log_settings.get("level", "WARNING")
    log_format = log_settings.get("format", "pretty")
    log_file = log_settings.get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=Path(log_file) if log_file else None,
    )

    if mapping_path is None:
        configured = settings.get("mapping", {}).get("path")
        mapping_path = Path(configured) if configured else None

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger
    ctx.obj["mapping_path"] = mapping_path


@cli.command()
@click.argument("text", nargs=-1)
@click.pass_context
def translit(ctx: click.Context, text: tuple[str, ...]) -> None:
    """Transliterate TEXT, or lines from stdin when no TEXT is given."""
    logger: logging.Logger = ctx.obj["logger"]

    try:
        engine = get_transliterator(ctx)
        if text:
            click.echo(engine.transliterate(" ".join(text)))
        else:
            for line in click.get_text_stream("stdin"):
                click.echo(engine.transliterate(line))
    except MappingError as e:
        logger.error(f"Transliteration failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("translit-file")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def translit_file(ctx: click.Context, input_path: Path, output_path: Path) -> None:
    """Transliterate INPUT_PATH line by line into OUTPUT_PATH."""
    logger: logging.Logger = ctx.obj["logger"]

    try:
        engine = get_transliterator(ctx)
        count = write_lines(
            output_path,
            (engine.transliterate(line) for line in read_lines(input_path)),
        )
        logger.info(f"Wrote {count} lines to {output_path}")
        click.echo(f"Transliterated {count} lines to {output_path}")
    except (MappingError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Transliteration failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("check-mapping")
@click.pass_context
def check_mapping(ctx: click.Context) -> None:
    """Validate the configured mapping and report uncovered graphemes."""
    logger: logging.Logger = ctx.obj["logger"]

    try:
        table = load_mapping(ctx.obj["mapping_path"])
    except MappingError as e:
        logger.error(f"Mapping check failed: {e}")
        click.echo("Mapping is invalid:", err=True)
        for error in e.errors:
            click.echo(f"  {error}", err=True)
        sys.exit(1)

    missing = find_unmapped(table)
    if not missing:
        click.echo("Mapping is valid and covers every grapheme")
        return

    click.echo("Mapping is valid but has no entry for:")
    for key, graphemes in missing.items():
        click.echo(f"  {key}: {' '.join(graphemes)}")


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
