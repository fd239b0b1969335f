"""Rich-powered table rendering for mappings."""
from __future__ import annotations

import json
from typing import Any, Mapping

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

_console = Console()


def mapping_table(mapping: Mapping[Any, Any], title: str = "Mapping") -> Table:
    """Build a two-column key/value table, one row per entry."""
    # Keys are arbitrary text, never markup
    table = Table(title=Text(title), box=box.ROUNDED, show_lines=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value", overflow="fold", max_width=70)
    for key, value in mapping.items():
        table.add_row(Text(str(key)), Text(json.dumps(value, default=str)))
    return table


def print_mapping_table(
    mapping: Mapping[Any, Any],
    title: str = "Mapping",
    console: Console | None = None,
) -> None:
    """Render a mapping as a Rich table."""
    out = console or _console
    if not mapping:
        out.print("[yellow]Empty mapping.[/yellow]")
        return
    out.print(mapping_table(mapping, title=title))
    out.print(f"[dim]{len(mapping)} keys[/dim]")
