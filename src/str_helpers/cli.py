"""CLI entry point for str_helpers package."""
from __future__ import annotations

import json
import sys
from typing import Optional

import click
from pydantic import ValidationError

from .config import load_settings
from .log import setup_logger
from .tools import StringTools



def _single_character(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) != 1:
        raise click.BadParameter("must be exactly one character")
    return value


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to STR_HELPERS_LOG_LEVEL or WARNING).",
)
@click.option("--env-file", type=click.Path(dir_okay=False), default=None, help="Read settings from this .env file.")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str], env_file: Optional[str]) -> None:
    """String helpers: slugs, casing, truncation and JSON sniffing."""
    try:
        settings = load_settings(env_file)
    except ValidationError as exc:
        raise click.UsageError(f"invalid settings: {exc}") from exc
    setup_logger((log_level or settings.log_level).upper())
    ctx.obj = StringTools(settings)


@main.command("slug")
@click.argument("text")
@click.option(
    "--separator", "-s", default=None, callback=_single_character, help="Separator character (default from settings)."
)
@click.pass_obj
def slug_cmd(tools: StringTools, text: str, separator: Optional[str]) -> None:
    """Print a URL-friendly slug of TEXT."""
    click.echo(tools.slug(text, separator))


@main.command("ascii")
@click.argument("text")
@click.pass_obj
def ascii_cmd(tools: StringTools, text: str) -> None:
    """Print TEXT transliterated to ASCII."""
    click.echo(tools.ascii(text))


@main.command("snake")
@click.argument("text")
@click.option(
    "--delimiter", "-d", default=None, callback=_single_character, help="Word delimiter (default from settings)."
)
@click.option("--safe", is_flag=True, help="Slugify the snake-cased result.")
@click.pass_obj
def snake_cmd(tools: StringTools, text: str, delimiter: Optional[str], safe: bool) -> None:
    """Print TEXT in snake case."""
    if safe:
        click.echo(tools.snake_safe(text, delimiter))
    else:
        click.echo(tools.snake(text, delimiter))


@main.command("camel")
@click.argument("text")
@click.pass_obj
def camel_cmd(tools: StringTools, text: str) -> None:
    """Print TEXT in camel case."""
    click.echo(tools.camel(text))


@main.command("studly")
@click.argument("text")
@click.pass_obj
def studly_cmd(tools: StringTools, text: str) -> None:
    """Print TEXT in studly case."""
    click.echo(tools.studly(text))


@main.command("truncate")
@click.argument("text")
@click.option("--limit", "-l", type=click.IntRange(min=0), default=None, help="Maximum characters kept.")
@click.option("--end", "-e", default=None, help="Marker appended when TEXT is cut.")
@click.pass_obj
def truncate_cmd(tools: StringTools, text: str, limit: Optional[int], end: Optional[str]) -> None:
    """Print TEXT limited to LIMIT characters."""
    click.echo(tools.truncate(text, limit, end))


@main.command("json")
@click.argument("text")
@click.option("--as-array", is_flag=True, help="Decode objects as plain dicts.")
@click.pass_obj
def json_cmd(tools: StringTools, text: str, as_array: bool) -> None:
    """Decode TEXT if it looks like a JSON object and pretty-print it."""
    result = tools.json(text, as_array=as_array)
    if not result.ok:
        click.echo(f"error: {result.failure.name}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result.value, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
