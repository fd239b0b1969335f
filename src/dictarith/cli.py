"""dictarith CLI — entry point.

Commands:
    dictarith subtract <file> <spec>...   Remove keys from a JSON object
    dictarith add      <file> <other>...  Merge JSON objects left to right

Spec notation: ``/regex/`` removes every key containing a match, ``:name``
and plain ``name`` remove the key with exactly that text.
"""
from __future__ import annotations

import json
import logging
import re
from typing import IO, Any

import click
from rich.console import Console

from .arith import ArithDict
from .config import settings
from .filters.specs import FilterSpec, parse_spec
from .visualization.tables import print_mapping_table

console = Console()

logger = logging.getLogger(__name__)

# ── Helpers ─────────────────────────────────────────────────────────────────


def _load_object(fh: IO[str]) -> ArithDict:
    """Read a JSON document that must be an object."""
    try:
        data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{fh.name}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise click.BadParameter(
            f"{fh.name}: expected a JSON object, got {type(data).__name__}"
        )
    return ArithDict(data)


def _parse_specs(raw: tuple[str, ...], ignore_case: bool) -> list[FilterSpec]:
    flags = re.IGNORECASE if ignore_case else 0
    specs: list[FilterSpec] = []
    for text in raw:
        try:
            specs.append(parse_spec(text, flags))
        except re.error as exc:
            raise click.BadParameter(f"Invalid pattern {text!r}: {exc}", param_hint="SPECS") from exc
    return specs


def _emit(mapping: dict[str, Any] | ArithDict, output_fmt: str, title: str) -> None:
    if output_fmt == "table":
        print_mapping_table(mapping, title=title, console=console)
    else:
        click.echo(json.dumps(dict(mapping), default=str))


_output_option = click.option(
    "--output", "-o", "output_fmt", default=settings.output,
    type=click.Choice(["json", "table"], case_sensitive=False),
    help="Output format.",
    show_default=True,
)


# ── CLI root ─────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version="1.0.0", prog_name="dictarith")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """dictarith — key-filter subtraction and merge addition for JSON objects."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# ── subtract ─────────────────────────────────────────────────────────────────


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.argument("specs", nargs=-1)
@click.option(
    "--ignore-case/--case-sensitive", "-i", "ignore_case",
    default=settings.ignore_case,
    help="Match /patterns/ case-insensitively.",
    show_default=True,
)
@_output_option
def subtract(
    file: IO[str],
    specs: tuple[str, ...],
    ignore_case: bool,
    output_fmt: str,
) -> None:
    """Remove keys from the JSON object in FILE.

    \b
    Examples:
      dictarith subtract config.json password token
      dictarith subtract config.json '/^_/' --output table
      cat env.json | dictarith subtract - '/secret/' -i
    """
    mapping = _load_object(file)
    filters = _parse_specs(specs, ignore_case)
    result = mapping - filters
    logger.debug("subtract: %d -> %d keys", len(mapping), len(result))
    if not filters:
        logger.info("No filters given; %s unchanged", file.name)
    _emit(result, output_fmt, title=f"{file.name} - {' '.join(str(f) for f in filters)}")


# ── add ──────────────────────────────────────────────────────────────────────


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.argument("others", nargs=-1, type=click.File("r", encoding="utf-8"))
@_output_option
def add(file: IO[str], others: tuple[IO[str], ...], output_fmt: str) -> None:
    """Merge the JSON objects in OTHERS into FILE; later keys win.

    \b
    Examples:
      dictarith add defaults.json overrides.json
      dictarith add base.json a.json b.json --output table
    """
    result = _load_object(file)
    for fh in others:
        result += _load_object(fh)
    _emit(result, output_fmt, title=" + ".join([file.name, *(fh.name for fh in others)]))


if __name__ == "__main__":
    main()
