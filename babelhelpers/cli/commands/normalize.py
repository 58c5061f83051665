"""
Normalize command implementation.

Prints each raw plugin name next to its canonical form.
"""
from typing import List

import typer
from rich.table import Table

from babelhelpers.cli.commands._common import console_for, service_for


def normalize_command(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Plugin names to normalize"),
    plain: bool = typer.Option(False, "--plain", help="Print only canonical names, one per line"),
):
    """Print the canonical form of Babel plugin names."""
    console = console_for(ctx)
    pairs = service_for(ctx).normalize_names(names)

    if plain:
        for _, canonical in pairs:
            console.print(canonical, markup=False, highlight=False)
        return

    table = Table(title="Plugin names")
    table.add_column("Name")
    table.add_column("Canonical name", style="green")
    for raw, canonical in pairs:
        table.add_row(raw, canonical)
    console.print(table)
